"""Serviços do cliente Mollom."""

from mollom.services.dispatcher import (
    GET_SERVER_LIST,
    METHOD_PREFIX,
    SESSIONLESS_OPERATIONS,
    Dispatcher,
)

__all__ = [
    "GET_SERVER_LIST",
    "METHOD_PREFIX",
    "SESSIONLESS_OPERATIONS",
    "Dispatcher",
]

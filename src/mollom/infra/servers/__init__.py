"""Pool de servidores Mollom (estado compartilhado pelo processo)."""

from .server_pool import DEFAULT_SERVERS, ServerPool, get_server_pool, reset_server_pool

__all__ = [
    "DEFAULT_SERVERS",
    "ServerPool",
    "get_server_pool",
    "reset_server_pool",
]

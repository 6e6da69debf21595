"""Bootstrap: factories do cliente Mollom a partir de settings."""

from mollom.bootstrap.factory import configure_client_logging, create_mollom_client

__all__ = [
    "configure_client_logging",
    "create_mollom_client",
]

"""Protocolos e contratos do cliente Mollom."""

from .transport import RpcTransportProtocol, TransportFactory

__all__ = [
    "RpcTransportProtocol",
    "TransportFactory",
]

"""Transporte XML-RPC e faults do Mollom."""

from .faults import (
    ERROR_NEXT_SERVER,
    ERROR_PARSE,
    ERROR_REFRESH_SERVERS,
    FaultKind,
    RpcFault,
    classify_fault,
    fault_to_dict,
    parse_fault,
)
from .xmlrpc_transport import (
    DEFAULT_API_VERSION,
    XmlRpcTransport,
    build_xmlrpc_transport_factory,
)

__all__ = [
    "DEFAULT_API_VERSION",
    "ERROR_NEXT_SERVER",
    "ERROR_PARSE",
    "ERROR_REFRESH_SERVERS",
    "FaultKind",
    "RpcFault",
    "XmlRpcTransport",
    "build_xmlrpc_transport_factory",
    "classify_fault",
    "fault_to_dict",
    "parse_fault",
]

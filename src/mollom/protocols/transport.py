"""Protocolo de transporte RPC usado pelo dispatcher.

Evita dependência direta do codec XML-RPC/HTTP.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol


class RpcTransportProtocol(Protocol):
    """Contrato mínimo para transporte RPC contra um único endpoint.

    Retorna o valor decodificado ou, em fault remoto, um dict com
    `faultCode` (int) e `faultString` (str).
    """

    def invoke(self, method: str, arguments: Mapping[str, Any]) -> Any: ...


# Recebe a URI base do endpoint e devolve um transporte para ela
TransportFactory = Callable[[str], RpcTransportProtocol]

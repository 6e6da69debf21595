"""Faults XML-RPC do Mollom e helpers de classificação."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

ERROR_PARSE = 1000
ERROR_REFRESH_SERVERS = 1100
ERROR_NEXT_SERVER = 1200


class FaultKind(Enum):
    """Como o dispatcher deve reagir a um fault."""

    REFRESH_SERVERS = "refresh_servers"
    NEXT_SERVER = "next_server"
    FATAL = "fatal"


@dataclass(frozen=True)
class RpcFault:
    """Fault retornado pelo servidor Mollom."""

    code: int
    message: str

    @property
    def kind(self) -> FaultKind:
        return classify_fault(self.code)


def classify_fault(code: int) -> FaultKind:
    """Classifica o código de fault.

    Apenas 1100 (refresh) e 1200 (next server) são recuperáveis;
    qualquer outro código, inclusive 1000 (parse), é fatal.
    """
    if code == ERROR_REFRESH_SERVERS:
        return FaultKind.REFRESH_SERVERS
    if code == ERROR_NEXT_SERVER:
        return FaultKind.NEXT_SERVER
    return FaultKind.FATAL


def parse_fault(result: Any) -> RpcFault | None:
    """Extrai o fault de um resultado decodificado.

    Args:
        result: Valor retornado pelo transporte

    Returns:
        RpcFault se o resultado tem formato de fault, None se sucesso
    """
    if not isinstance(result, dict):
        return None
    code = result.get("faultCode")
    if not code:
        return None
    return RpcFault(
        code=int(code),
        message=str(result.get("faultString", "")),
    )


def fault_to_dict(code: int, message: str) -> dict[str, Any]:
    """Monta o formato de fault devolvido pelo transporte."""
    return {"faultCode": code, "faultString": message}

"""Erros do cliente Mollom.

Todos herdam de MollomError para permitir captura única pelo chamador.
Faults recuperáveis (refresh/next server) nunca chegam aqui, exceto quando
a própria recuperação falha.
"""

from __future__ import annotations


class MollomError(Exception):
    """Erro base do cliente Mollom."""


class ConfigurationError(MollomError):
    """Credenciais ausentes ou malformadas na construção do cliente."""


class ArgumentValidationError(MollomError):
    """Argumentos de uma operação rejeitados pelo schema antes do envio."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"Argumentos inválidos para {operation}: {message}")
        self.operation = operation


class EmptyPoolError(MollomError):
    """Pool de servidores sem nenhum endpoint."""


class ServerListUnavailableError(MollomError):
    """Não foi possível obter a lista de servidores do Mollom."""


class NoMoreServersError(MollomError):
    """Todos os servidores conhecidos responderam 'server busy'."""


class RemoteFaultError(MollomError):
    """Fault não recuperável reportado pelo servidor.

    Preserva código e mensagem originais para diagnóstico.
    """

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"Erro na comunicação com o Mollom [{code}]: {message}")
        self.code = code
        self.message = message


class TransportError(MollomError):
    """Falha de HTTP, rede ou decodificação no transporte XML-RPC."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

"""correlation_id das chamadas ao Mollom.

Toda chamada do Dispatcher roda dentro de `correlation_scope()`: se o
chamador já definiu um id (ex.: o id da requisição web que originou a
moderação), ele é reaproveitado; senão a chamada ganha um id próprio,
compartilhado pelo getServerList de bootstrap e pelos retries.

O CorrelationIdFilter de config.logging lê o valor via get_correlation_id.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("mollom_correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera um novo se None.

    Returns:
        Token para reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or uuid.uuid4().hex)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


@contextmanager
def correlation_scope() -> Iterator[str]:
    """Garante um correlation_id durante o bloco.

    Chamadas aninhadas (bootstrap dentro de call) herdam o id externo.
    """
    current = _correlation_id.get()
    if current:
        yield current
        return
    token = set_correlation_id()
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)

"""Pool de servidores Mollom compartilhado pelo processo.

A lista de servidores é obtida uma única vez por processo (via getServerList)
e reaproveitada por todas as instâncias de cliente. O estado é mutável e
compartilhado, por isso toda operação passa pelo mesmo RLock.

Uso:
    from mollom.infra.servers import get_server_pool

    pool = get_server_pool()
    pool.refresh(fetch_server_list)
    endpoint = pool.current()
"""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from typing import TYPE_CHECKING

from mollom.errors import EmptyPoolError, NoMoreServersError, ServerListUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

logger = logging.getLogger(__name__)

DEFAULT_SERVERS: tuple[str, ...] = (
    "http://xmlrpc1.mollom.com",
    "http://xmlrpc2.mollom.com",
    "http://xmlrpc3.mollom.com",
)


class ServerPool:
    """Lista ordenada de endpoints com cursor e flag de inicialização.

    Invariante: o cursor é sempre índice válido da lista atual; a lista só é
    substituída junto com reset do cursor para 0.

    Args:
        seed: Servidores usados até o primeiro fetch/override bem-sucedido.
    """

    def __init__(self, seed: Iterable[str] = DEFAULT_SERVERS) -> None:
        self._lock = threading.RLock()
        self._seed = tuple(seed)
        self._servers: tuple[str, ...] = self._seed
        self._cursor = 0
        self._initialized = False

    @property
    def initialized(self) -> bool:
        with self._lock:
            return self._initialized

    @property
    def cursor(self) -> int:
        with self._lock:
            return self._cursor

    def servers(self) -> tuple[str, ...]:
        """Retorna snapshot da lista atual."""
        with self._lock:
            return self._servers

    def current(self) -> str:
        """Retorna o endpoint na posição do cursor.

        Raises:
            EmptyPoolError: Se a lista está vazia.
        """
        with self._lock:
            if not self._servers:
                raise EmptyPoolError("Nenhum servidor Mollom disponível")
            return self._servers[self._cursor]

    def refresh(self, fetch: Callable[[], Sequence[str]]) -> tuple[str, ...]:
        """Busca a lista de servidores se o pool ainda não foi inicializado.

        O lock é mantido durante o fetch para que apenas uma busca ocorra
        por processo; o RLock permite que o fetch leia current().

        Args:
            fetch: Callback que executa getServerList.

        Returns:
            Lista atual de servidores.

        Raises:
            ServerListUnavailableError: Se o fetch retornar lista vazia; o
                pool continua não inicializado e a próxima chamada busca de novo.
        """
        with self._lock:
            if self._initialized:
                return self._servers
            servers = tuple(fetch())
            if not servers:
                logger.warning("mollom_server_list_empty")
                raise ServerListUnavailableError("Mollom retornou lista de servidores vazia")
            self._replace(servers)
            logger.info(
                "mollom_server_list_loaded",
                extra={"server_count": len(servers)},
            )
            return self._servers

    def override(self, servers: Iterable[str]) -> tuple[str, ...]:
        """Define a lista explicitamente (ex.: lida de storage persistente).

        Raises:
            EmptyPoolError: Se `servers` for vazio.
        """
        candidates = tuple(servers)
        if not candidates:
            raise EmptyPoolError("Lista de servidores vazia")
        with self._lock:
            self._replace(candidates)
            return self._servers

    def invalidate(self) -> None:
        """Marca a lista como obsoleta; o próximo refresh busca de novo."""
        with self._lock:
            self._initialized = False

    def advance(self) -> str:
        """Move o cursor para o próximo servidor.

        Returns:
            Novo endpoint corrente.

        Raises:
            NoMoreServersError: Se o cursor já está no último servidor.
        """
        with self._lock:
            next_index = self._cursor + 1
            if next_index >= len(self._servers):
                raise NoMoreServersError("Nenhum outro servidor Mollom para tentar")
            self._cursor = next_index
            return self._servers[next_index]

    def rewind(self) -> None:
        """Volta o cursor ao primeiro servidor, mantendo a lista."""
        with self._lock:
            self._cursor = 0

    def reset(self) -> None:
        """Volta ao seed, cursor 0 e não inicializado."""
        with self._lock:
            self._servers = self._seed
            self._cursor = 0
            self._initialized = False

    def _replace(self, servers: tuple[str, ...]) -> None:
        self._servers = servers
        self._cursor = 0
        self._initialized = True


@lru_cache(maxsize=1)
def get_server_pool() -> ServerPool:
    """Retorna o pool compartilhado pelo processo (singleton)."""
    from config.settings import get_mollom_settings

    return ServerPool(get_mollom_settings().servers)


def reset_server_pool() -> None:
    """Descarta o singleton; o próximo get_server_pool() cria um novo."""
    get_server_pool.cache_clear()

"""Dispatcher de chamadas à API Mollom.

Responsável por:
- Montar argumentos assinados (public_key, time, nonce, hash)
- Anexar session_id em chamadas da conversa de classificação
- Escolher o servidor corrente do pool compartilhado
- Recuperar de faults 1100 (refresh da lista) e 1200 (próximo servidor)

A recuperação é um loop explícito: o caminho "próximo servidor" é limitado
pelo tamanho do pool e o caminho "refresh" por max_refreshes. O bootstrap
(getServerList) nunca faz refresh. Quando todos os servidores respondem
"ocupado", o cursor volta ao primeiro antes de NoMoreServersError.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mollom.errors import NoMoreServersError, RemoteFaultError, ServerListUnavailableError
from mollom.infra.crypto import compute_signature, generate_nonce, generate_timestamp
from mollom.infra.rpc.faults import FaultKind, parse_fault
from mollom.observability import correlation_scope

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mollom.domain.credentials import Credentials
    from mollom.infra.servers import ServerPool
    from mollom.protocols.transport import TransportFactory
    from mollom.sessions import SessionState

logger = logging.getLogger(__name__)

METHOD_PREFIX = "mollom."
GET_SERVER_LIST = "getServerList"
# Operações fora da conversa de classificação: nunca levam session_id
SESSIONLESS_OPERATIONS = frozenset({GET_SERVER_LIST, "verifyKey", "getStatistics"})
DEFAULT_MAX_REFRESHES = 3


class Dispatcher:
    """Executa chamadas assinadas contra o pool de servidores Mollom.

    Args:
        credentials: Par de chaves do site
        server_pool: Pool compartilhado pelo processo
        transport_factory: Cria transporte para um endpoint
        session: Estado de sessão da instância (somente leitura aqui)
        max_refreshes: Limite de refreshes da lista por chamada
    """

    __slots__ = (
        "_credentials",
        "_max_refreshes",
        "_pool",
        "_session",
        "_transport_factory",
    )

    def __init__(
        self,
        *,
        credentials: Credentials,
        server_pool: ServerPool,
        transport_factory: TransportFactory,
        session: SessionState,
        max_refreshes: int = DEFAULT_MAX_REFRESHES,
    ) -> None:
        self._credentials = credentials
        self._pool = server_pool
        self._transport_factory = transport_factory
        self._session = session
        self._max_refreshes = max_refreshes

    @property
    def server_pool(self) -> ServerPool:
        return self._pool

    def call(self, operation: str, arguments: Mapping[str, Any] | None = None) -> Any:
        """Executa `operation` e retorna o resultado decodificado.

        Args:
            operation: Nome da operação sem prefixo (ex.: checkContent)
            arguments: Argumentos específicos da operação

        Returns:
            Valor retornado pelo servidor.

        Raises:
            ServerListUnavailableError: Lista de servidores indisponível
            NoMoreServersError: Todos os servidores ocupados
            RemoteFaultError: Qualquer outro fault do servidor
            EmptyPoolError: Pool sem endpoints
        """
        with correlation_scope():
            if operation != GET_SERVER_LIST:
                self.ensure_servers()
            return self._dispatch(operation, arguments or {})

    def ensure_servers(self) -> tuple[str, ...]:
        """Garante o pool inicializado (um getServerList por processo)."""
        with correlation_scope():
            return self._pool.refresh(self.fetch_server_list)

    def fetch_server_list(self) -> list[str]:
        """Executa getServerList pelo caminho de bootstrap."""
        result = self._dispatch(GET_SERVER_LIST, {})
        return [str(server) for server in result or ()]

    def _dispatch(self, operation: str, arguments: Mapping[str, Any]) -> Any:
        refreshes = 0
        while True:
            call_args = self.build_arguments(operation, arguments)
            endpoint = self._pool.current()
            transport = self._transport_factory(endpoint)
            result = transport.invoke(METHOD_PREFIX + operation, call_args)

            fault = parse_fault(result)
            if fault is None:
                logger.debug(
                    "mollom_call_success",
                    extra={
                        "operation": operation,
                        "endpoint": endpoint,
                    },
                )
                return result

            if fault.kind is FaultKind.REFRESH_SERVERS:
                if operation == GET_SERVER_LIST:
                    raise ServerListUnavailableError(
                        "Não foi possível obter a lista de servidores do Mollom"
                    )
                if refreshes >= self._max_refreshes:
                    raise ServerListUnavailableError(
                        f"Mollom pediu refresh da lista {refreshes + 1} vezes seguidas"
                    )
                refreshes += 1
                logger.info(
                    "mollom_servers_refresh",
                    extra={
                        "operation": operation,
                        "endpoint": endpoint,
                        "attempt": refreshes,
                    },
                )
                self._pool.invalidate()
                self.ensure_servers()
                continue

            if fault.kind is FaultKind.NEXT_SERVER:
                logger.warning(
                    "mollom_server_busy",
                    extra={
                        "operation": operation,
                        "endpoint": endpoint,
                    },
                )
                try:
                    self._pool.advance()
                except NoMoreServersError:
                    # próxima chamada recomeça do primeiro servidor
                    self._pool.rewind()
                    logger.error(
                        "mollom_no_more_servers",
                        extra={"operation": operation},
                    )
                    raise
                continue

            logger.warning(
                "mollom_remote_fault",
                extra={
                    "operation": operation,
                    "endpoint": endpoint,
                    "fault_code": fault.code,
                },
            )
            raise RemoteFaultError(fault.code, fault.message)

    def build_arguments(
        self,
        operation: str,
        arguments: Mapping[str, Any],
    ) -> dict[str, Any]:
        """Monta o mapping assinado de uma tentativa.

        Sempre parte de uma cópia dos argumentos do chamador, então cada
        retry gera time/nonce/hash novos. O hash é calculado por último.
        """
        call_args = dict(arguments)
        secret = self._credentials.private_key

        if _is_absent(call_args.get("public_key")):
            call_args["public_key"] = self._credentials.public_key
        if _is_absent(call_args.get("time")):
            call_args["time"] = generate_timestamp()
        if _is_absent(call_args.get("nonce")):
            call_args["nonce"] = generate_nonce()
        if _is_absent(call_args.get("hash")):
            call_args["hash"] = compute_signature(call_args["time"], call_args["nonce"], secret)

        token = self._session.get()
        if operation not in SESSIONLESS_OPERATIONS and token:
            call_args.setdefault("session_id", token)
        return call_args


def _is_absent(value: Any) -> bool:
    return value is None or value == ""

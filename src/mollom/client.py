"""Cliente Mollom: operações expostas ao chamador.

Cada operação valida seus argumentos (mollom.domain.arguments), delega ao
Dispatcher e converte o resultado. Captura do session_id é feita aqui,
nunca no dispatcher.

Uso:
    client = MollomClient(public_key="...", private_key="...")
    check = client.check_content(post_title=title, post_body=body)
    if check.is_spam:
        ...
    elif check.is_unsure:
        captcha_url = client.get_image_captcha()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mollom.domain.arguments import (
    CaptchaArgs,
    CheckContentArgs,
    SendFeedbackArgs,
    StatisticsArgs,
    build_arguments,
)
from mollom.domain.content_check import ContentCheck
from mollom.domain.credentials import Credentials
from mollom.errors import TransportError
from mollom.infra.rpc import build_xmlrpc_transport_factory
from mollom.infra.servers import get_server_pool
from mollom.services.dispatcher import Dispatcher
from mollom.sessions import SessionState

if TYPE_CHECKING:
    from collections.abc import Iterable

    from config.settings import MollomSettings
    from mollom.infra.servers import ServerPool
    from mollom.protocols.transport import TransportFactory

logger = logging.getLogger(__name__)


class MollomClient:
    """Cliente síncrono da API Mollom.

    Args:
        public_key: Chave pública do site
        private_key: Chave privada do site
        settings: Settings (versão da API, timeout, limite de refresh).
            Usa get_mollom_settings() se None.
        server_pool: Pool compartilhado. Usa o singleton do processo se None.
        transport_factory: Factory endpoint -> transporte. Usa XML-RPC/httpx
            se None.

    Raises:
        ConfigurationError: Se alguma chave estiver vazia.
    """

    def __init__(
        self,
        public_key: str,
        private_key: str,
        *,
        settings: MollomSettings | None = None,
        server_pool: ServerPool | None = None,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self._credentials = Credentials(public_key=public_key, private_key=private_key)
        if settings is None:
            from config.settings import get_mollom_settings

            settings = get_mollom_settings()
        self._session = SessionState()
        self._dispatcher = Dispatcher(
            credentials=self._credentials,
            server_pool=server_pool or get_server_pool(),
            transport_factory=transport_factory
            or build_xmlrpc_transport_factory(
                api_version=settings.api_version,
                timeout_seconds=settings.request_timeout_seconds,
            ),
            session=self._session,
            max_refreshes=settings.max_refreshes,
        )

    @property
    def public_key(self) -> str:
        return self._credentials.public_key

    @property
    def session_id(self) -> str | None:
        """Último session_id recebido do Mollom."""
        return self._session.get()

    @session_id.setter
    def session_id(self, token: str | None) -> None:
        self._session.set(token)

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def verify_key(self) -> bool:
        """Verifica se o Mollom reconhece o par de chaves."""
        return bool(self._dispatcher.call("verifyKey"))

    def check_content(self, **fields: Any) -> ContentCheck:
        """Classifica um conteúdo (spam/ham/unsure + qualidade).

        Aceita post_title, post_body, author_name, author_url, author_mail,
        author_openid, author_ip e author_id; pelo menos um é obrigatório.
        Guarda o session_id retornado para as chamadas seguintes.

        Raises:
            ArgumentValidationError: Se nenhum campo válido for informado.
        """
        arguments = build_arguments(CheckContentArgs, "checkContent", **fields)
        raw = self._dispatcher.call("checkContent", arguments)
        result = self._expect_struct("checkContent", raw)
        check = ContentCheck.from_result(result)
        self._remember_session(check.session_id)
        logger.debug(
            "mollom_content_checked",
            extra={"classification": check.classification, "quality": check.quality},
        )
        return check

    def send_feedback(self, feedback: str, session_id: str | None = None) -> bool:
        """Envia feedback (spam, profanity, low-quality, unwanted) sobre um conteúdo.

        Sem session_id explícito, usa o da última classificação.
        """
        arguments = build_arguments(
            SendFeedbackArgs,
            "sendFeedback",
            feedback=feedback,
            session_id=session_id or self._session.get(),
        )
        return bool(self._dispatcher.call("sendFeedback", arguments))

    def get_image_captcha(
        self,
        author_ip: str | None = None,
        session_id: str | None = None,
    ) -> str:
        """Retorna a URL de um CAPTCHA de imagem."""
        return self._get_captcha("getImageCaptcha", author_ip, session_id)

    def get_audio_captcha(
        self,
        author_ip: str | None = None,
        session_id: str | None = None,
    ) -> str:
        """Retorna a URL de um CAPTCHA de áudio (mp3)."""
        return self._get_captcha("getAudioCaptcha", author_ip, session_id)

    def server_list(self, servers: Iterable[str] | None = None) -> list[str]:
        """Retorna a lista de servidores Mollom em uso.

        Com `servers` não vazio, substitui a lista do processo (ex.: lida de
        um storage persistente) sem chamar o Mollom. Sem `servers` (ou com
        lista vazia), busca a lista uma única vez por processo.
        """
        pool = self._dispatcher.server_pool
        if servers:
            return list(pool.override(servers))
        return list(self._dispatcher.ensure_servers())

    def get_statistics(self, type: str) -> int:  # noqa: A002 - nome do parâmetro na API
        """Retorna o contador de uso pedido (ex.: total_accepted)."""
        arguments = build_arguments(StatisticsArgs, "getStatistics", type=type)
        return int(self._dispatcher.call("getStatistics", arguments))

    def _get_captcha(
        self,
        operation: str,
        author_ip: str | None,
        session_id: str | None,
    ) -> str:
        arguments = build_arguments(
            CaptchaArgs,
            operation,
            author_ip=author_ip,
            session_id=session_id or self._session.get(),
        )
        raw = self._dispatcher.call(operation, arguments)
        result = self._expect_struct(operation, raw)
        self._remember_session(result.get("session_id"))
        return str(result.get("url", ""))

    def _remember_session(self, token: Any) -> None:
        if token:
            self._session.set(str(token))

    @staticmethod
    def _expect_struct(operation: str, result: Any) -> dict[str, Any]:
        if not isinstance(result, dict):
            logger.warning(
                "mollom_unexpected_result",
                extra={"operation": operation, "result_type": type(result).__name__},
            )
            raise TransportError(f"Resposta inesperada do Mollom para {operation}")
        return result

"""Transporte XML-RPC sobre httpx.

Codifica a chamada com xmlrpc.client e envia via POST para
"{endpoint}/{api_version}". Faults remotos viram o dict
{"faultCode", "faultString"}; falhas de HTTP/rede/decodificação
viram TransportError.
"""

from __future__ import annotations

import logging
import xmlrpc.client
from typing import TYPE_CHECKING, Any

import httpx

from mollom.errors import TransportError
from mollom.infra.rpc.faults import fault_to_dict

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mollom.protocols.transport import TransportFactory

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "1.0"
_HEADERS = {
    "Content-Type": "text/xml",
    "User-Agent": "mollom-client-python",
}


class XmlRpcTransport:
    """Cliente XML-RPC para um único endpoint Mollom.

    Args:
        endpoint: URI base do servidor (ex.: http://xmlrpc1.mollom.com)
        api_version: Versão da API anexada ao path
        timeout_seconds: Timeout HTTP por requisição
        http_client: Cliente httpx opcional (injetável em testes)
    """

    def __init__(
        self,
        endpoint: str,
        *,
        api_version: str = DEFAULT_API_VERSION,
        timeout_seconds: float = 10.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._url = f"{endpoint.rstrip('/')}/{api_version}"
        self._timeout = timeout_seconds
        self._http_client = http_client

    @property
    def url(self) -> str:
        return self._url

    def invoke(self, method: str, arguments: Mapping[str, Any]) -> Any:
        """Executa a chamada remota.

        Args:
            method: Nome qualificado (ex.: mollom.checkContent)
            arguments: Struct de argumentos da chamada

        Returns:
            Valor decodificado ou dict de fault

        Raises:
            TransportError: Em argumento não serializável, erro HTTP, de rede
                ou resposta malformada
        """
        try:
            body = xmlrpc.client.dumps((dict(arguments),), methodname=method, allow_none=False)
        except (TypeError, OverflowError) as exc:
            logger.warning(
                "mollom_request_encode_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            raise TransportError(f"Argumentos não serializáveis em XML-RPC: {exc}") from exc
        response = self._post(method, body)
        try:
            params, _ = xmlrpc.client.loads(response.content)
        except xmlrpc.client.Fault as fault:
            return fault_to_dict(fault.faultCode, fault.faultString)
        except Exception as exc:
            logger.warning(
                "mollom_response_decode_error",
                extra={"method": method, "url": self._url},
            )
            raise TransportError("Resposta XML-RPC inválida do Mollom") from exc

        return params[0] if params else None

    def _post(self, method: str, body: str) -> httpx.Response:
        try:
            if self._http_client is not None:
                response = self._http_client.post(
                    self._url, content=body, headers=_HEADERS, timeout=self._timeout
                )
            else:
                with httpx.Client() as client:
                    response = client.post(
                        self._url, content=body, headers=_HEADERS, timeout=self._timeout
                    )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "mollom_http_error",
                extra={
                    "method": method,
                    "url": self._url,
                    "status_code": exc.response.status_code,
                },
            )
            raise TransportError(
                "http_status_error", status_code=exc.response.status_code
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "mollom_connection_error",
                extra={"method": method, "url": self._url},
            )
            raise TransportError("http_connection_error") from exc
        return response


def build_xmlrpc_transport_factory(
    *,
    api_version: str = DEFAULT_API_VERSION,
    timeout_seconds: float = 10.0,
    http_client: httpx.Client | None = None,
) -> TransportFactory:
    """Retorna factory endpoint -> XmlRpcTransport com config fixa."""

    def factory(endpoint: str) -> XmlRpcTransport:
        return XmlRpcTransport(
            endpoint,
            api_version=api_version,
            timeout_seconds=timeout_seconds,
            http_client=http_client,
        )

    return factory

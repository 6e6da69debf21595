"""Testes do transporte XML-RPC sobre httpx."""

from __future__ import annotations

import xmlrpc.client
from typing import Any

import httpx
import pytest

from mollom.errors import TransportError
from mollom.infra.rpc import XmlRpcTransport, build_xmlrpc_transport_factory


def _xml_response(value: Any) -> httpx.Response:
    return httpx.Response(200, content=xmlrpc.client.dumps((value,), methodresponse=True))


def _build_transport(handler, endpoint: str = "http://xmlrpc1.mollom.com") -> XmlRpcTransport:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return XmlRpcTransport(endpoint, http_client=client)


class TestXmlRpcTransport:
    """Testes do XmlRpcTransport."""

    def test_posts_encoded_call_to_versioned_url(self) -> None:
        seen: dict[str, Any] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            params, method = xmlrpc.client.loads(request.content)
            seen.update(url=str(request.url), method=method, params=params)
            seen["content_type"] = request.headers["content-type"]
            return _xml_response(True)

        transport = _build_transport(handler, "http://xmlrpc1.mollom.com/")
        result = transport.invoke("mollom.verifyKey", {"public_key": "pub", "nonce": 5})

        assert result is True
        assert seen["url"] == "http://xmlrpc1.mollom.com/1.0"
        assert seen["method"] == "mollom.verifyKey"
        assert seen["params"] == ({"public_key": "pub", "nonce": 5},)
        assert seen["content_type"] == "text/xml"

    def test_decodes_struct(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return _xml_response({"spam": 2, "quality": 0.25, "session_id": "s1"})

        result = _build_transport(handler).invoke("mollom.checkContent", {})

        assert result == {"spam": 2, "quality": 0.25, "session_id": "s1"}

    def test_fault_becomes_fault_mapping(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            body = xmlrpc.client.dumps(xmlrpc.client.Fault(1200, "server busy"))
            return httpx.Response(200, content=body)

        result = _build_transport(handler).invoke("mollom.checkContent", {})

        assert result == {"faultCode": 1200, "faultString": "server busy"}

    def test_http_error_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        with pytest.raises(TransportError) as exc_info:
            _build_transport(handler).invoke("mollom.checkContent", {})

        assert exc_info.value.status_code == 503

    def test_connection_error_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError, match="http_connection_error"):
            _build_transport(handler).invoke("mollom.checkContent", {})

    def test_malformed_body_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>not xml-rpc</html>")

        with pytest.raises(TransportError):
            _build_transport(handler).invoke("mollom.checkContent", {})

    @pytest.mark.parametrize(
        "arguments",
        [{"author_id": None}, {"nonce": 2**31}],
        ids=["none", "int_overflow"],
    )
    def test_unencodable_arguments_raise_before_request(
        self, arguments: dict[str, Any]
    ) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return _xml_response(True)

        with pytest.raises(TransportError, match="não serializáveis"):
            _build_transport(handler).invoke("mollom.checkContent", arguments)

        assert requests == []


class TestTransportFactory:
    """Testes de build_xmlrpc_transport_factory."""

    def test_factory_builds_transport_per_endpoint(self) -> None:
        factory = build_xmlrpc_transport_factory(api_version="2.0", timeout_seconds=3.0)

        transport = factory("http://xmlrpc2.mollom.com")

        assert isinstance(transport, XmlRpcTransport)
        assert transport.url == "http://xmlrpc2.mollom.com/2.0"

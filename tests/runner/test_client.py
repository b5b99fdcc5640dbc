import httpx
import pytest
from harness.core.models import APPLICATION, TRANSPORT
from harness.runner.client import ApiClient


def _client(handler):
    http = httpx.Client(base_url="http://mock", transport=httpx.MockTransport(handler))
    return ApiClient(http=http)


def test_success_payload():
    api = _client(lambda req: httpx.Response(200, json={"mensagem": "Login realizado com sucesso"}))
    out = api.login(16)
    assert out.ok
    assert out.payload == {"mensagem": "Login realizado com sucesso"}


def test_identifier_goes_in_query():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["query"] = dict(request.url.params)
        return httpx.Response(200, json={"mensagem": "ok"})

    _client(handler).update(48213)
    assert seen == {"method": "PUT", "path": "/api/alteracao", "query": {"usuarioId": "48213"}}


def test_non_2xx_keeps_body():
    api = _client(lambda req: httpx.Response(401, json={"erro": "Unauthorized"}))
    out = api.login(15)
    assert not out.ok
    assert out.kind == APPLICATION
    assert out.status_code == 401
    assert out.message == "Unauthorized"
    assert out.to_body() == {"erro": "Unauthorized"}


def test_non_2xx_without_erro():
    api = _client(lambda req: httpx.Response(502, json=["bad gateway"]))
    out = api.list_orders(16)
    assert out.message == "Erro desconhecido"


def test_connection_error_is_transport_failure():
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    out = _client(handler).login(16)
    assert not out.ok
    assert out.kind == TRANSPORT
    assert "ConnectError" in out.message


def test_undecodable_body_is_transport_failure():
    api = _client(lambda req: httpx.Response(200, content=b"<html>oops</html>"))
    out = api.list_orders(16)
    assert out.kind == TRANSPORT


@pytest.mark.parametrize("body", [{}, {"usuarioId": "abc"}, {"usuarioId": 0}])
def test_register_without_usable_id_is_transport_failure(body):
    api = _client(lambda req: httpx.Response(200, json=body))
    out = api.register()
    assert not out.ok
    assert out.kind == TRANSPORT


def test_register_sends_default_data():
    seen = {}

    def handler(request):
        seen["body"] = request.read()
        return httpx.Response(200, json={"usuarioId": 48213})

    out = _client(handler).register()
    assert out.payload == {"usuarioId": 48213}
    assert b"senha123" in seen["body"]

import random
import pytest
from unittest.mock import patch
from harness.core.endpoints import MockEndpoints, MISSING_FIELDS, MISSING_ID
from harness.core.models import VALIDATION


@pytest.fixture
def endpoints():
    return MockEndpoints(rng=random.Random(7))


def test_register_returns_five_digit_id(endpoints):
    for _ in range(200):
        out = endpoints.register("A", "a@a.com", "x", None)
        assert out.ok
        assert 10000 <= out.payload["usuarioId"] <= 99999


def test_register_ids_are_fresh_per_call(endpoints):
    ids = {endpoints.register("A", "a@a.com", "x").payload["usuarioId"] for _ in range(50)}
    assert len(ids) > 1


@pytest.mark.parametrize("nome,email,senha", [
    ("", "a@a.com", "x"),
    ("A", None, "x"),
    ("A", "a@a.com", ""),
    (None, None, None),
    (0, "a@a.com", "x"),
    ("A", False, "x"),
    ("A", "a@a.com", float("nan")),
])
def test_register_requires_all_fields(endpoints, nome, email, senha):
    out = endpoints.register(nome, email, senha, "teste")
    assert not out.ok
    assert out.status_code == 400
    assert out.message == MISSING_FIELDS
    assert out.kind == VALIDATION


@pytest.mark.parametrize("method", ["login", "update", "list_orders"])
@pytest.mark.parametrize("identifier", [None, 0])
def test_identifier_is_required(endpoints, method, identifier):
    out = getattr(endpoints, method)(identifier)
    assert out.status_code == 400
    assert out.to_body() == {"erro": MISSING_ID}


def test_login_rules(endpoints):
    assert endpoints.login(16).payload == {"mensagem": "Login realizado com sucesso"}
    out = endpoints.login(15)
    assert not out.ok
    assert out.status_code in (400, 401, 500, 504)


def test_update_rules(endpoints):
    assert endpoints.update(16).payload == {"mensagem": "Dados alterados com sucesso"}
    assert not endpoints.update(18).ok


@patch("harness.core.endpoints.fs.should_fire", return_value=False)
def test_list_orders_returns_fixed_listing(mock_fire, endpoints):
    out = endpoints.list_orders(16)
    assert out.ok
    assert out.payload == {"pedidos": [
        {"id": 1, "valor": 150.0, "data": "2023-01-15"},
        {"id": 2, "valor": 89.9, "data": "2023-02-20"},
        {"id": 3, "valor": 200.5, "data": "2023-03-10"},
    ]}


@patch("harness.core.endpoints.log")
@patch("harness.core.endpoints.fs.should_fire", return_value=True)
def test_list_orders_fault_is_logged(mock_fire, mock_log, endpoints):
    out = endpoints.list_orders(16)
    assert not out.ok
    mock_log.assert_called_once()
    assert mock_log.call_args.args[0] == "simulated_fault"
    assert mock_log.call_args.kwargs["operation"] == "list"


@pytest.mark.parametrize("nome", [[], {}, 1, True, " "])
def test_register_accepts_any_present_value(endpoints, nome):
    assert endpoints.register(nome, "a@a.com", "x").ok

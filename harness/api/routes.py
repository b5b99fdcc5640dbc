from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from harness.api.normalize import normalize_cadastro_payload, parse_usuario_id
from harness.api.schemas import (
    CadastroRequest,
    CadastroResponse,
    ErroResponse,
    MensagemResponse,
    PedidosResponse,
)
from harness.core.endpoints import MockEndpoints
from harness.core.models import OperationOutcome
from harness.observability.logging import log

router = APIRouter(prefix="/api")

_endpoints: Optional[MockEndpoints] = None

# Every route can fail with 400 (missing input) or one of the catalog errors
ERROR_RESPONSES = {code: {"model": ErroResponse} for code in (400, 401, 500, 504)}


def get_endpoints() -> MockEndpoints:
    """Process-wide endpoints instance; tests swap it via dependency_overrides."""
    global _endpoints
    if _endpoints is None:
        _endpoints = MockEndpoints()
    return _endpoints


def _respond(route: str, outcome: OperationOutcome, **context) -> JSONResponse:
    if outcome.ok:
        log("api_outcome", route=route, statusCode=outcome.status_code, **context)
        return JSONResponse(status_code=outcome.status_code, content=outcome.payload)
    log(
        "api_outcome",
        route=route,
        statusCode=outcome.status_code,
        kind=outcome.kind,
        erro=outcome.message,
        **context,
    )
    return JSONResponse(status_code=outcome.status_code, content=outcome.to_body())


@router.post("/cadastro", response_model=CadastroResponse, responses=ERROR_RESPONSES)
async def cadastro(request: Request, endpoints: MockEndpoints = Depends(get_endpoints)):
    # Read the body by hand: a broken or missing JSON body is just "no fields"
    try:
        payload: Any = await request.json()
    except ValueError:
        payload = None

    req = CadastroRequest.model_validate(normalize_cadastro_payload(payload))
    outcome = endpoints.register(req.nome, req.email, req.senha, req.origem)
    return _respond("cadastro", outcome, request=req.model_dump())


@router.get("/login", response_model=MensagemResponse, responses=ERROR_RESPONSES)
def login(
    usuarioId: Optional[str] = Query(default=None),
    endpoints: MockEndpoints = Depends(get_endpoints),
):
    identifier = parse_usuario_id(usuarioId)
    return _respond("login", endpoints.login(identifier), usuarioId=identifier)


@router.put("/alteracao", response_model=MensagemResponse, responses=ERROR_RESPONSES)
def alteracao(
    usuarioId: Optional[str] = Query(default=None),
    endpoints: MockEndpoints = Depends(get_endpoints),
):
    identifier = parse_usuario_id(usuarioId)
    return _respond("alteracao", endpoints.update(identifier), usuarioId=identifier)


@router.get("/pedidos", response_model=PedidosResponse, responses=ERROR_RESPONSES)
def pedidos(
    usuarioId: Optional[str] = Query(default=None),
    endpoints: MockEndpoints = Depends(get_endpoints),
):
    identifier = parse_usuario_id(usuarioId)
    return _respond("pedidos", endpoints.list_orders(identifier), usuarioId=identifier)

"""
HTTP client for the mock API, used by the flow runner.

Every call returns an OperationOutcome instead of raising:
  - 2xx with a usable JSON body  -> Success
  - non-2xx with any JSON body   -> Failure(kind=application), body kept verbatim
  - connection errors, timeouts, undecodable bodies -> Failure(kind=transport)

The underlying httpx.Client is injectable. FastAPI's TestClient is one, which
lets the runner drive the ASGI app directly.
"""
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from harness.api.schemas import CadastroResponse
from harness.core.models import APPLICATION, TRANSPORT, Failure, OperationOutcome, Success
from harness.settings import settings

# Registration data sent by every flow
DEFAULT_CADASTRO = {
    "nome": "Usuário Teste",
    "email": "usuario@teste.com",
    "senha": "senha123",
    "origem": "teste-api",
}


def _transport_failure(exc: Exception) -> Failure:
    return Failure(status_code=0, message=f"{type(exc).__name__}: {str(exc)[:300]}", kind=TRANSPORT)


class ApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        http: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        if http is None:
            if timeout is None:
                timeout = settings.HARNESS_REQUEST_TIMEOUT_SEC
            http = httpx.Client(
                base_url=base_url or settings.HARNESS_BASE_URL,
                timeout=timeout or None,
            )
        self._http = http

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _call(self, method: str, path: str, **kwargs) -> OperationOutcome:
        try:
            resp = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            return _transport_failure(e)

        try:
            data = resp.json()
        except ValueError as e:
            return _transport_failure(e)

        if resp.is_success:
            return Success(payload=data, status_code=resp.status_code)

        message = data.get("erro") if isinstance(data, dict) else None
        return Failure(
            status_code=resp.status_code,
            message=message or "Erro desconhecido",
            kind=APPLICATION,
            body=data,
        )

    def register(self, dados: Optional[Dict[str, Any]] = None) -> OperationOutcome:
        outcome = self._call("POST", "/api/cadastro", json=dados if dados is not None else DEFAULT_CADASTRO)
        if not outcome.ok:
            return outcome
        # A 2xx without a usable id cannot feed the next steps
        try:
            body = CadastroResponse.model_validate(outcome.payload)
        except ValidationError as e:
            return _transport_failure(e)
        if not body.usuarioId:
            return Failure(status_code=0, message="usuarioId ausente na resposta", kind=TRANSPORT)
        return outcome

    def login(self, usuario_id: int) -> OperationOutcome:
        return self._call("GET", "/api/login", params={"usuarioId": usuario_id})

    def update(self, usuario_id: int) -> OperationOutcome:
        return self._call("PUT", "/api/alteracao", params={"usuarioId": usuario_id})

    def list_orders(self, usuario_id: int) -> OperationOutcome:
        return self._call("GET", "/api/pedidos", params={"usuarioId": usuario_id})

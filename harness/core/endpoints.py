from typing import Any, Optional

from harness.core import failure_simulator as fs
from harness.core.models import ORDERS, Failure, OperationOutcome, Success, VALIDATION
from harness.observability.logging import log

MISSING_FIELDS = "Dados incompletos"
MISSING_ID = "usuarioId não fornecido"

# usuarioId range, upper bound exclusive (5 digits)
ID_MIN = 10000
ID_MAX = 100000


def _blank(value: Any) -> bool:
    # Empty lists and objects count as provided
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


class MockEndpoints:
    """
    The four lifecycle operations, with no storage behind them.

    Every call validates its input, asks the failure simulator, and otherwise
    returns a canned payload. Registered ids are never remembered: login with
    any non-zero number behaves the same whether it was issued or not.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else fs.make_rng()

    def register(self, nome: Any, email: Any, senha: Any, origem: Any = None) -> OperationOutcome:
        if _blank(nome) or _blank(email) or _blank(senha):
            return Failure(status_code=400, message=MISSING_FIELDS, kind=VALIDATION)
        fault = fs.decide(fs.REGISTER, None, self.rng)
        if fault is not None:
            return fault
        return Success({"usuarioId": self.rng.randrange(ID_MIN, ID_MAX)})

    def login(self, identifier: Optional[float]) -> OperationOutcome:
        return self._guarded(fs.LOGIN, identifier, {"mensagem": "Login realizado com sucesso"})

    def update(self, identifier: Optional[float]) -> OperationOutcome:
        return self._guarded(fs.UPDATE, identifier, {"mensagem": "Dados alterados com sucesso"})

    def list_orders(self, identifier: Optional[float]) -> OperationOutcome:
        return self._guarded(fs.LIST, identifier, {"pedidos": [o.to_dict() for o in ORDERS]})

    def _guarded(self, operation: str, identifier, payload) -> OperationOutcome:
        # 0 counts as missing, same as an absent or non-numeric query value
        if not identifier:
            return Failure(status_code=400, message=MISSING_ID, kind=VALIDATION)
        fault = fs.decide(operation, identifier, self.rng)
        if fault is not None:
            log(
                "simulated_fault",
                operation=operation,
                usuarioId=identifier,
                statusCode=fault.status_code,
                erro=fault.message,
            )
            return fault
        return Success(payload)

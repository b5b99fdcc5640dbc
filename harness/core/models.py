from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Union

# Failure kinds
VALIDATION = "validation"    # missing required input, always 400
SIMULATED = "simulated"      # drawn from the fault catalog
APPLICATION = "application"  # non-2xx response as observed by the runner
TRANSPORT = "transport"      # call did not complete or body was unusable


@dataclass(frozen=True)
class Order:
    id: int
    valor: Decimal
    data: str  # ISO date

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "valor": float(self.valor), "data": self.data}


# The listing never changes
ORDERS = (
    Order(id=1, valor=Decimal("150.0"), data="2023-01-15"),
    Order(id=2, valor=Decimal("89.9"), data="2023-02-20"),
    Order(id=3, valor=Decimal("200.5"), data="2023-03-10"),
)


@dataclass(frozen=True)
class Success:
    payload: Dict[str, Any] = field(default_factory=dict)
    status_code: int = 200

    ok = True


@dataclass(frozen=True)
class Failure:
    status_code: int
    message: str
    kind: str = SIMULATED
    # Raw response body when the failure was observed over HTTP
    body: Optional[Any] = None

    ok = False

    def to_body(self) -> Any:
        """Wire shape of the failure: the raw body if we have one, else {erro}."""
        if self.body is not None:
            return self.body
        return {"erro": self.message}


OperationOutcome = Union[Success, Failure]

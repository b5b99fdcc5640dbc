"""
Synthetic fault injection for the mock endpoints.

Rules:
  - login  fails whenever identifier % 5 == 0
  - update fails whenever identifier % 3 == 0
  - list   fails on 10% of calls, whatever the identifier
  - register never fails here (only input validation can reject it)

A fired fault is drawn uniformly from ERROR_CATALOG, independently of the
operation. All randomness comes from the `rng` argument so tests can pin it.
"""
import random
from typing import Optional

from harness.core.models import Failure, SIMULATED
from harness.settings import settings

REGISTER = "register"
LOGIN = "login"
UPDATE = "update"
LIST = "list"

OPERATIONS = (REGISTER, LOGIN, UPDATE, LIST)

# (status, message); order is part of the contract
ERROR_CATALOG = (
    (504, "Gateway Timeout"),
    (401, "Unauthorized"),
    (400, "Bad Request"),
    (500, "Internal Server Error"),
)

LOGIN_MODULUS = 5
UPDATE_MODULUS = 3
LIST_FAILURE_RATE = 0.1


def make_rng(seed: Optional[str] = None) -> random.Random:
    """Default random source. Seeded from HARNESS_RANDOM_SEED when set."""
    if seed is None:
        seed = settings.HARNESS_RANDOM_SEED
    return random.Random(seed) if seed else random.Random()


def random_failure(rng) -> Failure:
    status, message = rng.choice(ERROR_CATALOG)
    return Failure(status_code=status, message=message, kind=SIMULATED)


def should_fire(operation: str, identifier, rng) -> bool:
    if operation == LOGIN:
        return identifier % LOGIN_MODULUS == 0
    if operation == UPDATE:
        return identifier % UPDATE_MODULUS == 0
    if operation == LIST:
        return rng.random() < LIST_FAILURE_RATE
    if operation == REGISTER:
        return False
    raise ValueError(f"unknown operation: {operation!r}")


def decide(operation: str, identifier, rng) -> Optional[Failure]:
    """Return a catalog Failure when a fault fires, else None."""
    if not should_fire(operation, identifier, rng):
        return None
    return random_failure(rng)

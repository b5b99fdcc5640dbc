import math
from typing import Any, Optional, Union


def normalize_cadastro_payload(payload: Any) -> dict:
    """
    Accepts whatever arrived as the registration body and returns a dict with
    exactly the keys CadastroRequest expects.

    A non-object body (list, string, nothing) carries no fields, so it ends up
    rejected as incomplete rather than as a parse error.
    """
    if not isinstance(payload, dict):
        payload = {}
    return {
        "nome": payload.get("nome"),
        "email": payload.get("email"),
        "senha": payload.get("senha"),
        "origem": payload.get("origem"),
    }


def parse_usuario_id(raw: Optional[str]) -> Optional[Union[int, float]]:
    """
    Read the usuarioId query value as a decimal number. Surrounding whitespace
    is ignored and an empty string is 0. Anything else that is not a finite
    decimal number (hex or binary literals, "Infinity", "NaN", garbage) counts
    as absent. Integral values come back as int.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return 0
    if "_" in text:
        # float() would accept digit separators
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    if value.is_integer():
        return int(value)
    return value

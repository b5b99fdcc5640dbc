"""
One-line JSON events on stdout.

Events written by the harness:
  boot                 app startup (harness.main)
  api_outcome          every answer of the four /api routes
  simulated_fault      an injected failure fired in MockEndpoints
  unhandled_exception  the catch-all 500 handler
  flow_started / flow_step / flow_record / flow_finished
                       progress of a runner flow

With ENABLE_PII_REDACTION on, registration fields (at the top level or one
dict deep, e.g. request={"senha": ...}) are replaced by their length.
"""
import json
import time
from harness.settings import settings

# Registration fields that must never reach stdout in clear text
SENSITIVE_KEYS = {"nome", "email", "senha", "password"}

def _redact_value(v):
    if isinstance(v, str) and len(v) > 0:
        return f"[REDACTED:{len(v)}chars]"
    if isinstance(v, dict):
        return {k: _redact_value(val) for k, val in v.items()}
    return v

def _scrub(fields: dict) -> dict:
    clean = {}
    for k, v in fields.items():
        if k in SENSITIVE_KEYS:
            clean[k] = _redact_value(v)
        elif isinstance(v, dict):
            clean[k] = {sk: (_redact_value(sv) if sk in SENSITIVE_KEYS else sv) for sk, sv in v.items()}
        else:
            clean[k] = v
    return clean

def log(event: str, **fields):
    payload = {"ts": int(time.time()), "event": event}
    payload.update(_scrub(fields) if settings.ENABLE_PII_REDACTION else fields)
    print(json.dumps(payload, ensure_ascii=False, default=str))

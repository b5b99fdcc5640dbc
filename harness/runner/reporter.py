"""
Result reporting for flow runs.

Display modes
-------------
monitor : records are shown exactly as produced, request echo included.
client  : records go through `redact` first. Identifiers, order lists and
          error bodies are replaced by short human-readable summaries, and the
          request echo plus the raw HTTP status are dropped. An error body
          keeps only its `erro` message ("Erro desconhecido" when it has none).

`redact` is the single place where this policy lives. It is pure and
idempotent, so a record can be redacted again without changing.
"""
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping

from harness.observability.logging import log

# Client-mode placeholder for text that mentions an identifier
PROCESSING_PLACEHOLDER = "Processando requisição..."
ID_MARKER = "usuarioId:"

# Keys carrying the raw request or raw status; never shown to clients
ECHO_KEYS = ("request", "usuarioId", "status")

# Bodies that get summarised in client mode
DATA_KEY = "data"
ERROR_KEY = "error"


class DisplayMode(str, Enum):
    MONITOR = "monitor"
    CLIENT = "client"

    @classmethod
    def from_param(cls, value) -> "DisplayMode":
        """Only an explicit "monitor" unlocks full detail."""
        if isinstance(value, DisplayMode):
            return value
        return cls.MONITOR if (value or "").strip().lower() == "monitor" else cls.CLIENT


@dataclass(frozen=True)
class DisplayRecord:
    title: str
    content: Any
    success: bool
    mode: DisplayMode

    def render(self) -> str:
        mark = "OK " if self.success else "ERR"
        if isinstance(self.content, (dict, list)):
            body = json.dumps(self.content, indent=2, ensure_ascii=False, default=str)
        else:
            body = str(self.content)
        return f"[{mark}] {self.title}\n{body}"


UNKNOWN_ERROR = "Erro desconhecido"
ERROR_PREFIX = "Erro: "


def _is_error_summary(body: Any) -> bool:
    return (
        isinstance(body, Mapping)
        and set(body) == {"status"}
        and isinstance(body["status"], str)
        and body["status"].startswith(ERROR_PREFIX)
    )


def _summarize_error(body: Any) -> dict:
    # Only the erro message survives; any other detail a server sends stays hidden
    if _is_error_summary(body):
        return dict(body)
    erro = body.get("erro") if isinstance(body, Mapping) else None
    if not isinstance(erro, str) or not erro:
        erro = UNKNOWN_ERROR
    return {"status": f"{ERROR_PREFIX}{erro}"}


def _summarize_body(body: Any) -> Any:
    if not isinstance(body, Mapping):
        return body
    if body.get("usuarioId"):
        return {"status": "ID gerado com sucesso"}
    if isinstance(body.get("pedidos"), list):
        return {"status": f"{len(body['pedidos'])} pedidos encontrados"}
    if body.get("erro"):
        return _summarize_error(body)
    return dict(body)


def redact(content: Any, mode: DisplayMode) -> Any:
    if mode == DisplayMode.MONITOR:
        return content

    if isinstance(content, Mapping):
        out = {}
        for k, v in content.items():
            if k in ECHO_KEYS:
                continue
            if k == ERROR_KEY:
                out[k] = _summarize_error(v)
            elif k == DATA_KEY:
                out[k] = _summarize_body(v)
            else:
                out[k] = v
        return out

    text = str(content)
    if ID_MARKER in text:
        return PROCESSING_PLACEHOLDER
    return text


class MemorySink:
    """Keeps emitted records in order; `clear` drops them all."""

    def __init__(self):
        self.records: List[DisplayRecord] = []

    def emit(self, record: DisplayRecord) -> None:
        self.records.append(record)

    def clear(self) -> None:
        self.records = []


class ConsoleSink:
    def __init__(self, echo=print):
        self.echo = echo
        self._dirty = False

    def emit(self, record: DisplayRecord) -> None:
        self.echo(record.render())
        self._dirty = True

    def clear(self) -> None:
        # Nothing to take back from a terminal; mark the boundary between runs instead
        if self._dirty:
            self.echo("-" * 40)
            self._dirty = False


class ResultReporter:
    def __init__(self, mode: DisplayMode, sink):
        self.mode = DisplayMode.from_param(mode)
        self.sink = sink

    def clear(self) -> None:
        self.sink.clear()

    def report(self, title: str, content: Any, success: bool = True) -> DisplayRecord:
        record = DisplayRecord(
            title=title,
            content=redact(content, self.mode),
            success=bool(success),
            mode=self.mode,
        )
        self.sink.emit(record)
        log("flow_record", title=title, success=record.success, mode=self.mode.value)
        return record

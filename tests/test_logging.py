import json
from unittest.mock import patch
from harness.observability.logging import log
from harness.settings import settings


def test_log_redacts_registration_fields(capsys):
    with patch.object(settings, "ENABLE_PII_REDACTION", True):
        log("api_outcome", route="cadastro", request={"nome": "Ana", "senha": "segredo", "origem": "web"})
    line = json.loads(capsys.readouterr().out)
    assert line["event"] == "api_outcome"
    assert line["request"]["senha"] == "[REDACTED:7chars]"
    assert line["request"]["nome"] == "[REDACTED:3chars]"
    assert line["request"]["origem"] == "web"


def test_log_passthrough_when_disabled(capsys):
    with patch.object(settings, "ENABLE_PII_REDACTION", False):
        log("api_outcome", email="a@a.com")
    line = json.loads(capsys.readouterr().out)
    assert line["email"] == "a@a.com"
    assert isinstance(line["ts"], int)


def test_log_redacts_top_level_fields(capsys):
    with patch.object(settings, "ENABLE_PII_REDACTION", True):
        log("api_outcome", email="a@a.com", route="cadastro")
    line = json.loads(capsys.readouterr().out)
    assert line["email"] == "[REDACTED:7chars]"
    assert line["route"] == "cadastro"

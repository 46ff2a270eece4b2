import json
import logging

from ops.structured_logger import JsonFormatter, setup_logging
from utils.redact import dest_hint, redact_url


def test_json_formatter_merges_extra():
    record = logging.LogRecord("seeme.gateway", logging.INFO, __file__, 1, "seeme_call_result", None, None)
    record.extra = {"event": "seeme_call_result", "latency_ms": 12}
    payload = json.loads(JsonFormatter().format(record))
    assert payload["severity"] == "INFO"
    assert payload["message"] == "seeme_call_result"
    assert payload["latency_ms"] == 12


def test_setup_logging_quiets_http_clients():
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        setup_logging("DEBUG")
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:], level = saved
        root.setLevel(level)


def test_dest_hint():
    assert dest_hint("36201234567") == "...4567"
    assert dest_hint("123") == "123"
    assert dest_hint("") == ""


def test_redact_url_masks_key():
    url = redact_url("https://seeme.hu/gateway?key=SECRET&number=36201234567")
    assert "SECRET" not in url
    assert "number=36201234567" in url


def test_setup_logging_defaults_to_configured_level_and_service(monkeypatch, capsys):
    from config.settings import settings

    monkeypatch.setattr(settings, "LOG_LEVEL", "warning")
    monkeypatch.setattr(settings, "SERVICE_NAME", "sms-worker")
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        setup_logging()
        assert root.level == logging.WARNING
        logging.getLogger("seeme.gateway").warning(
            "seeme_call_failed",
            extra={"extra": {"event": "seeme_call_failed", "url": "https://seeme.hu/gateway?key=SECRET&format=json"}},
        )
    finally:
        root.handlers[:], level = saved
        root.setLevel(level)

    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["service"] == "sms-worker"
    assert payload["event"] == "seeme_call_failed"
    assert "SECRET" not in payload["url"]

import logging
import re

from ops.diagnostics import CallDiagnostics


def test_flush_appends_timestamped_lines(tmp_path):
    path = tmp_path / "seeme.log"
    d = CallDiagnostics("SEE ME - GET BALANCE", str(path))
    d.add("raw_result: b'ok'")
    assert d.flush() is True
    assert d.flush() is True

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 6
    assert all(re.match(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} - ", line) for line in lines)
    assert lines[1].endswith("SEE ME - GET BALANCE")


def test_flush_without_destination_is_noop():
    assert CallDiagnostics("x").flush() is False


def test_unwritable_sink_is_not_fatal(tmp_path, caplog):
    d = CallDiagnostics("x", str(tmp_path / "missing-dir" / "seeme.log"))
    assert d.flush() is False
    assert any(r.getMessage() == "seeme_log_sink_failed" for r in caplog.records)


def test_lines_are_not_sent_to_logger(caplog):
    caplog.set_level(logging.DEBUG)
    d = CallDiagnostics("SEE ME - SEND SMS")
    d.add("number: '36201234567'")
    d.add("message: 'secret text'")
    assert "36201234567" in d.text()
    assert not any("36201234567" in r.getMessage() or "secret text" in r.getMessage() for r in caplog.records)

from __future__ import annotations

import logging

from utils.logging_setup import SafeExtraFormatter


FMT = "%(message)s run_id=%(run_id)s step=%(step)s status=%(status)s"


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_stamps_run_id_from_env(monkeypatch):
    monkeypatch.setenv("RUN_ID", "run-abc")
    line = SafeExtraFormatter(fmt=FMT).format(_record(step="FetchProfile"))
    assert line == "hello run_id=run-abc step=FetchProfile status=-"


def test_formatter_defaults_when_run_id_unset(monkeypatch):
    monkeypatch.delenv("RUN_ID", raising=False)
    line = SafeExtraFormatter(fmt=FMT).format(_record())
    assert line == "hello run_id=- step=- status=-"


def test_explicit_run_id_wins_over_env(monkeypatch):
    monkeypatch.setenv("RUN_ID", "run-abc")
    line = SafeExtraFormatter(fmt=FMT).format(_record(run_id="other"))
    assert line.startswith("hello run_id=other ")

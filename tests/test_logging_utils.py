import json

from delve.logging_utils import get_logger
from delve.server import _configure_logging


def test_key_value_format(monkeypatch, capsys):
    monkeypatch.setenv("DELVE_LOG_LEVEL", "info")
    monkeypatch.setenv("DELVE_LOG_JSON", "0")
    get_logger("delve.test").info(event="dungeon_generated", seed=7, note="two words")
    err = capsys.readouterr().err.strip()
    assert err.startswith("level=info ts=")
    assert "event=dungeon_generated" in err
    assert "seed=7" in err
    assert "note=two_words" in err
    assert "logger=delve.test" in err


def test_json_format(monkeypatch, capsys):
    monkeypatch.setenv("DELVE_LOG_LEVEL", "debug")
    monkeypatch.setenv("DELVE_LOG_JSON", "1")
    get_logger("delve.test").debug(event="phase_start", phase="add_rooms", skipped=None)
    rec = json.loads(capsys.readouterr().err.strip())
    assert rec["level"] == "debug"
    assert rec["phase"] == "add_rooms"
    assert "skipped" not in rec


def test_level_threshold(monkeypatch, capsys):
    monkeypatch.setenv("DELVE_LOG_LEVEL", "warn")
    log = get_logger("delve.test")
    log.info(event="hidden")
    log.warn(event="shown")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_loggers_are_cached():
    assert get_logger("delve.a") is get_logger("delve.a")


def test_configure_logging_is_idempotent():
    import logging

    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        _configure_logging()
        _configure_logging()
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])

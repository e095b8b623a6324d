import logging

from gbasedialect.utils.logging import (
    configure_logging,
    get_correlation_id,
    get_logger,
    resolve_log_level,
    set_correlation_id,
)


def test_correlation_id_round_trip():
    token = set_correlation_id("sync-run-42")
    assert token == "sync-run-42"
    assert get_correlation_id() == "sync-run-42"


def test_get_logger_namespaces_and_configures_once():
    logger = get_logger("tests.logging")
    assert logger.name == "gbasedialect.tests.logging"
    root = logging.getLogger("gbasedialect")
    handlers = list(root.handlers)
    configure_logging()
    assert root.handlers == handlers
    assert len(handlers) == 1


def test_resolve_log_level(monkeypatch):
    monkeypatch.delenv("GBASE_LOG_LEVEL", raising=False)
    assert resolve_log_level() == logging.INFO
    assert resolve_log_level(override="debug") == logging.DEBUG
    assert resolve_log_level(override=logging.ERROR) == logging.ERROR

    monkeypatch.setenv("GBASE_LOG_LEVEL", "warning")
    assert resolve_log_level() == logging.WARNING

    monkeypatch.setenv("GBASE_LOG_LEVEL", "chatty")
    assert resolve_log_level(default=logging.ERROR) == logging.ERROR


def test_configure_logging_applies_explicit_level_after_import():
    root = logging.getLogger("gbasedialect")
    previous = root.level
    try:
        configure_logging(logging.DEBUG)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        configure_logging("warning")
        assert root.level == logging.WARNING
        configure_logging()
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)

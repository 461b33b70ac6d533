from __future__ import annotations

import logging
from pathlib import Path

import pytest

from defkit.core.config import load_config
from defkit.core.logging import (
    PACKAGE_LOGGER_NAME,
    TRACE,
    configure_stdlib_logging,
    log,
    log_and_return,
)


def test_trace_level_is_registered() -> None:
    assert TRACE < logging.DEBUG
    assert logging.getLevelName(TRACE) == "TRACE"


def test_log_and_return_returns_value_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    custom = logging.getLogger("tests.logging.custom")
    caplog.set_level(TRACE, logger="tests.logging.custom")

    result = log_and_return(custom, TRACE, "Result [%s] for [%s]", 42, "answer")

    assert result == 42
    assert caplog.records[-1].getMessage() == "Result [42] for [answer]"
    assert caplog.records[-1].levelname == "TRACE"


def test_log_skips_disabled_levels(caplog: pytest.LogCaptureFixture) -> None:
    custom = logging.getLogger("tests.logging.quiet")
    caplog.set_level(logging.INFO, logger="tests.logging.quiet")

    log(custom, logging.DEBUG, "hidden %s", "value")
    log(custom, logging.INFO, "shown %s", "value")

    assert [r.getMessage() for r in caplog.records] == ["shown value"]


def test_configure_writes_to_file(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "defkit.log"

    handler = configure_stdlib_logging(level="INFO", log_path=log_path)
    logging.getLogger("defkit.test").info("hello file")
    handler.flush()

    content = log_path.read_text(encoding="utf-8")
    assert "INFO defkit.test: hello file" in content


def test_configure_is_idempotent_for_same_target(tmp_path: Path) -> None:
    log_path = tmp_path / "defkit.log"

    first = configure_stdlib_logging(level="INFO", log_path=log_path)
    second = configure_stdlib_logging(level="DEBUG", log_path=log_path)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    assert first is second
    assert package_logger.handlers.count(first) == 1
    assert package_logger.level == logging.DEBUG


def test_configure_replaces_handler_when_target_changes(tmp_path: Path) -> None:
    first = configure_stdlib_logging(log_path=tmp_path / "a.log")
    second = configure_stdlib_logging(log_path=tmp_path / "b.log")

    handlers = logging.getLogger(PACKAGE_LOGGER_NAME).handlers
    assert first is not second
    assert first not in handlers
    assert second in handlers


def test_configure_defaults_to_stderr_and_configured_level() -> None:
    handler = configure_stdlib_logging()

    assert isinstance(handler, logging.StreamHandler)
    assert not isinstance(handler, logging.FileHandler)
    assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.WARNING


def test_configure_accepts_trace_name() -> None:
    configure_stdlib_logging(level="trace")

    assert logging.getLogger(PACKAGE_LOGGER_NAME).level == TRACE


def test_configure_uses_active_config_level_and_format(tmp_path: Path) -> None:
    load_config(overrides={"logging": {"level": "INFO", "format": "%(levelname)s|%(message)s"}})
    log_path = tmp_path / "defkit.log"

    handler = configure_stdlib_logging(log_path=log_path)
    logging.getLogger("defkit.test").info("configured")
    handler.flush()

    assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.INFO
    assert log_path.read_text(encoding="utf-8").strip() == "INFO|configured"

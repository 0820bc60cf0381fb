"""
tests/core/test_logger.py

Tests for the logging setup: level resolution, the single root handler
and the quiet list for client libraries.
"""

import io
import logging

import pytest

from app.core.logger import QUIET_LOGGERS, configure_logging, get_logger, resolve_level


# ── Fixtures ───────────────────────────────────────────────────────────────────

@pytest.fixture
def bare_root(request):
    """
    A handler-less logger standing in for the root, isolated from pytest's
    own capture handlers. Quiet-list levels are restored afterwards.
    """
    root = logging.getLogger(f"tests.logger.{request.node.name}")
    root.propagate = False
    saved_quiet = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}

    yield root

    root.handlers = []
    for name, level in saved_quiet.items():
        logging.getLogger(name).setLevel(level)


# ── resolve_level ──────────────────────────────────────────────────────────────

class TestResolveLevel:

    def test_debug_flag_decides_without_a_name(self) -> None:
        assert resolve_level(None, debug=False) == logging.INFO
        assert resolve_level(None, debug=True) == logging.DEBUG
        assert resolve_level("", debug=True) == logging.DEBUG

    def test_name_overrides_debug_flag(self) -> None:
        assert resolve_level("warning", debug=True) == logging.WARNING

    def test_name_is_trimmed_and_case_insensitive(self) -> None:
        assert resolve_level("  Error ") == logging.ERROR

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level 'chatty'"):
            resolve_level("chatty")


# ── configure_logging ──────────────────────────────────────────────────────────

class TestConfigureLogging:

    def test_adds_one_formatted_handler(self, bare_root) -> None:
        stream = io.StringIO()

        configure_logging(logging.INFO, stream=stream, root=bare_root)
        configure_logging(logging.INFO, stream=stream, root=bare_root)
        get_logger(f"{bare_root.name}.upload").info("Upload stored")

        assert len(bare_root.handlers) == 1
        line = stream.getvalue().strip()
        assert line.endswith(f"| INFO     | {bare_root.name}.upload | Upload stored")

    def test_existing_handler_is_kept(self, bare_root) -> None:
        existing = logging.NullHandler()
        bare_root.addHandler(existing)

        configure_logging(logging.DEBUG, root=bare_root)

        assert bare_root.handlers == [existing]
        assert bare_root.level == logging.DEBUG

    def test_client_libraries_are_held_at_warning(self, bare_root) -> None:
        configure_logging(logging.DEBUG, stream=io.StringIO(), root=bare_root)

        for name in ("httpx", "httpcore", "botocore", "uvicorn.access"):
            assert logging.getLogger(name).level == logging.WARNING

    def test_quiet_loggers_follow_a_stricter_root(self, bare_root) -> None:
        configure_logging(logging.ERROR, stream=io.StringIO(), root=bare_root)

        assert logging.getLogger("httpx").level == logging.ERROR

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("app.api.upload_controller")

        assert logger.name == "app.api.upload_controller"
        assert logger is logging.getLogger("app.api.upload_controller")

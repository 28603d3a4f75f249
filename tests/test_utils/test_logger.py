from __future__ import annotations

import io
import sys
import logging
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest

from verbump.utils.logger import (
    ColoredFormatter,
    disable_logging,
    get_logger,
    is_logging_configured,
    level_for_verbosity,
    setup_logging,
)


@pytest.fixture
def clean_logger_state() -> Generator[None, None, None]:
    """Reset the verbump logger and the configured flag around a test."""
    root_logger = logging.getLogger("verbump")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True

    import verbump.utils.logger as logger_module

    logger_module._logging_configured = False

    yield

    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    logger_module._logging_configured = False


@pytest.fixture
def captured_stream() -> io.StringIO:
    """Provide a StringIO stream for capturing log output."""
    return io.StringIO()


def _record(level: int = logging.INFO, msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="verbump.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter."""

    def test_format_with_color_enabled(self) -> None:
        """Test the level name is wrapped in ANSI codes on a terminal."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            output = formatter.format(_record(logging.ERROR))

        assert output == "\033[31mERROR\033[0m: hello"

    def test_format_with_color_disabled(self) -> None:
        """Test no ANSI codes are written when colour is off."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        assert formatter.format(_record()) == "INFO: hello"

    def test_format_preserves_original_record(self) -> None:
        """Test the shared record's level name is restored after formatting."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s")
        record = _record(logging.WARNING)

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            formatter.format(record)

        assert record.levelname == "WARNING"

    @pytest.mark.parametrize("env_var", ["NO_COLOR", "CI"])
    def test_should_use_color_env(
        self, monkeypatch: pytest.MonkeyPatch, env_var: str
    ) -> None:
        """Test NO_COLOR and CI disable colour."""
        monkeypatch.setenv(env_var, "1")

        assert ColoredFormatter._should_use_color() is False

    def test_should_use_color_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test colour follows whether stderr is a terminal."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)

        with patch.object(sys.stderr, "isatty", return_value=True):
            assert ColoredFormatter._should_use_color() is True
        with patch.object(sys.stderr, "isatty", return_value=False):
            assert ColoredFormatter._should_use_color() is False

    def test_should_use_color_isatty_raises(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a broken stderr disables colour instead of failing."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)
        mock_stderr = MagicMock()
        mock_stderr.isatty.side_effect = OSError("closed")

        with patch("sys.stderr", mock_stderr):
            assert ColoredFormatter._should_use_color() is False


@pytest.mark.unit
class TestLevelForVerbosity:
    """Tests for level_for_verbosity."""

    @pytest.mark.parametrize(
        "verbose, expected",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_levels(self, verbose: int, expected: int) -> None:
        """Test each -v count maps to a level."""
        assert level_for_verbosity(verbose) == expected


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_setup_default_config(self, clean_logger_state: None) -> None:
        """Test one handler at INFO is installed and propagation disabled."""
        setup_logging()

        root_logger = logging.getLogger("verbump")
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1
        assert root_logger.propagate is False
        assert is_logging_configured() is True

    def test_setup_clears_previous_handlers(self, clean_logger_state: None) -> None:
        """Test repeated calls replace the handler."""
        setup_logging()
        setup_logging(level=logging.DEBUG)

        root_logger = logging.getLogger("verbump")
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.DEBUG

    def test_setup_verbose_format(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test the verbose format includes the logger name."""
        setup_logging(level=logging.DEBUG, verbose=True, stream=captured_stream)

        get_logger("parser").debug("parsed")

        output = captured_stream.getvalue()
        assert "verbump.parser" in output
        assert "parsed" in output

    def test_setup_filters_below_level(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test messages below the configured level are dropped."""
        setup_logging(level=logging.WARNING, stream=captured_stream)
        logger = get_logger("derive")

        logger.info("hidden")
        logger.warning("shown")

        output = captured_stream.getvalue()
        assert "hidden" not in output
        assert "WARNING" in output
        assert "shown" in output

    def test_disable_logging(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test disable_logging silences output and clears the flag."""
        setup_logging(stream=captured_stream)
        disable_logging()

        get_logger("cli").error("nothing")

        assert captured_stream.getvalue() == ""
        assert is_logging_configured() is False


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            (None, "verbump"),
            ("verbump", "verbump"),
            ("parser", "verbump.parser"),
            ("verbump.config", "verbump.config"),
            ("commands.next", "verbump.commands.next"),
        ],
    )
    def test_names_are_namespaced(
        self, clean_logger_state: None, name, expected: str
    ) -> None:
        """Test every logger lives under the verbump namespace."""
        assert get_logger(name).name == expected

    def test_adds_null_handler(self, clean_logger_state: None) -> None:
        """Test an unconfigured logger stays silent."""
        logging.getLogger("verbump.silent_module").handlers.clear()

        logger = get_logger("silent_module")

        assert logger.parent is logging.getLogger("verbump")
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_adds_null_handler_after_setup_is_reset(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test a reset after setup_logging leaves loggers propagating and silent."""
        setup_logging(stream=captured_stream)
        namespace = logging.getLogger("verbump")
        assert namespace.propagate is False

        namespace.handlers.clear()
        namespace.propagate = True
        logging.getLogger("verbump.reset_module").handlers.clear()

        logger = get_logger("reset_module")

        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_clean_state_restores_propagation(self, clean_logger_state: None) -> None:
        """Test the verbump logger propagates once a test has reset it."""
        namespace = logging.getLogger("verbump")

        assert namespace.propagate is True

    def test_same_instance(self, clean_logger_state: None) -> None:
        """Test repeated calls return the same logger."""
        assert get_logger("ordering") is get_logger("verbump.ordering")

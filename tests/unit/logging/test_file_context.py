"""Unit tests for logging context, formatter and configuration."""

import json
import logging
import sys
from pathlib import Path

import pytest

from tvcode.config import LoggingConfig
from tvcode.logging import (
    FileContextFilter,
    JSONFormatter,
    configure_logging,
    file_context,
    get_file_context,
)


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tvcode.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestFileContext:
    """Tests for file_context and get_file_context."""

    def test_default_is_none(self) -> None:
        assert get_file_context() is None

    def test_set_within_block(self) -> None:
        with file_context(Path("/videos/movie.mkv")):
            assert get_file_context() == "/videos/movie.mkv"
        assert get_file_context() is None

    def test_nested_restores_outer(self) -> None:
        with file_context("/a.mkv"):
            with file_context("/b.mkv"):
                assert get_file_context() == "/b.mkv"
            assert get_file_context() == "/a.mkv"

    def test_reset_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with file_context("/a.mkv"):
                raise RuntimeError("boom")
        assert get_file_context() is None


class TestFileContextFilter:
    """Tests for FileContextFilter."""

    def test_adds_file_tag(self) -> None:
        record = _record()

        with file_context("/videos/movie.mkv"):
            assert FileContextFilter().filter(record) is True

        assert record.file_path == "/videos/movie.mkv"
        assert record.file_tag == "[movie.mkv] "

    def test_empty_tag_outside_context(self) -> None:
        record = _record()

        FileContextFilter().filter(record)

        assert record.file_path is None
        assert record.file_tag == ""


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_basic_fields(self) -> None:
        entry = json.loads(JSONFormatter().format(_record("Encoding done")))

        assert entry["level"] == "INFO"
        assert entry["message"] == "Encoding done"
        assert entry["logger"] == "tvcode.test"
        assert "timestamp" in entry

    def test_file_and_extra_fields(self) -> None:
        """The current file is top-level; other extras go under context."""
        record = _record(command="ffprobe", file_tag="[a.mkv] ", file_path="/a.mkv")

        entry = json.loads(JSONFormatter().format(record))

        assert entry["file"] == "/a.mkv"
        assert entry["context"] == {"command": "ffprobe"}

    def test_no_context_outside_file(self) -> None:
        """Records without extras or a file carry neither key."""
        entry = json.loads(
            JSONFormatter().format(_record(file_tag="", file_path=None))
        )

        assert "file" not in entry
        assert "context" not in entry

    def test_exception_included(self) -> None:
        try:
            raise RuntimeError("encoder crashed")
        except RuntimeError:
            record = _record(exc_info=sys.exc_info())

        entry = json.loads(JSONFormatter().format(record))

        assert "RuntimeError: encoder crashed" in entry["exception"]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_stderr_by_default(self, restore_root_logger) -> None:
        configure_logging(LoggingConfig(level="debug"))

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler(self, restore_root_logger, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "tvcode.log"

        configure_logging(LoggingConfig(file=log_file, format="json"))
        logging.getLogger("tvcode.test").info("written")
        for handler in restore_root_logger.handlers:
            handler.flush()

        line = log_file.read_text().strip()
        assert json.loads(line)["message"] == "written"

    def test_text_format_includes_file_tag(
        self, restore_root_logger, tmp_path: Path
    ) -> None:
        log_file = tmp_path / "tvcode.log"

        configure_logging(LoggingConfig(file=log_file))
        with file_context("/videos/movie.mkv"):
            logging.getLogger("tvcode.test").warning("late subtitle")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "[movie.mkv] tvcode.test - WARNING - late subtitle" in (
            log_file.read_text()
        )

    def test_file_and_stderr(self, restore_root_logger, tmp_path: Path) -> None:
        """include_stderr keeps a console handler next to the log file."""
        configure_logging(
            LoggingConfig(file=tmp_path / "tvcode.log", include_stderr=True)
        )

        kinds = sorted(type(h).__name__ for h in restore_root_logger.handlers)
        assert kinds == ["RotatingFileHandler", "StreamHandler"]

    def test_unopenable_file_falls_back_to_stderr(
        self, restore_root_logger, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """A log file that cannot be created leaves logging on stderr."""
        blocker = tmp_path / "not-a-dir"
        blocker.touch()

        configure_logging(LoggingConfig(file=blocker / "tvcode.log"))

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert type(handlers[0]) is logging.StreamHandler
        assert "Could not open log file" in capsys.readouterr().err

"""Unit tests for TranscodeExecutor."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tvcode.domain import SOFTWARE, BitrateTier, MediaProfile
from tvcode.executor.transcode import (
    EncodeError,
    TranscodeCommand,
    TranscodeExecutor,
    build_transcode_command,
)

SUBPROCESS_RUN = "tvcode.executor.transcode.executor.subprocess.run"


@pytest.fixture
def command(hevc_media: MediaProfile) -> TranscodeCommand:
    return build_transcode_command(hevc_media, None, SOFTWARE, BitrateTier("8M", "12M"))


class TestTranscodeExecutor:
    """Tests for TranscodeExecutor.execute."""

    def test_build_argv_prepends_ffmpeg(self, command: TranscodeCommand) -> None:
        executor = TranscodeExecutor(Path("/usr/local/bin/ffmpeg"))

        argv = executor.build_argv(command)

        assert argv[0] == "/usr/local/bin/ffmpeg"
        assert argv[1:] == list(command.args)

    def test_default_ffmpeg_on_path(self, command: TranscodeCommand) -> None:
        assert TranscodeExecutor().build_argv(command)[0] == "ffmpeg"

    @patch(SUBPROCESS_RUN)
    def test_success(self, mock_run: MagicMock, command: TranscodeCommand) -> None:
        """A zero exit status yields a successful result."""
        mock_run.return_value = MagicMock(returncode=0)

        result = TranscodeExecutor().execute(command)

        assert result.success is True
        assert result.output_path == command.output_path

    @patch(SUBPROCESS_RUN)
    def test_inherits_terminal(
        self, mock_run: MagicMock, command: TranscodeCommand
    ) -> None:
        """Output is not captured so ffmpeg progress stays visible."""
        mock_run.return_value = MagicMock(returncode=0)

        TranscodeExecutor().execute(command)

        kwargs = mock_run.call_args[1]
        assert "capture_output" not in kwargs
        assert "stdout" not in kwargs
        assert "timeout" not in kwargs

    @patch(SUBPROCESS_RUN)
    def test_non_zero_exit(self, mock_run: MagicMock, command: TranscodeCommand) -> None:
        """A failed encode raises EncodeError with the exit code."""
        mock_run.return_value = MagicMock(returncode=187)

        with pytest.raises(EncodeError) as exc_info:
            TranscodeExecutor().execute(command)

        assert exc_info.value.exit_code == 187
        assert "exit code: 187" in exc_info.value.message

    @patch(SUBPROCESS_RUN)
    def test_cannot_start(self, mock_run: MagicMock, command: TranscodeCommand) -> None:
        """An executable that cannot be started raises EncodeError."""
        mock_run.side_effect = FileNotFoundError("ffmpeg")

        with pytest.raises(EncodeError, match="Failed to run ffmpeg") as exc_info:
            TranscodeExecutor().execute(command)

        assert exc_info.value.exit_code is None

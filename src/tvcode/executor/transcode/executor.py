"""Encoder invocation for synthesized transcode commands."""

import logging
import subprocess  # nosec B404 - subprocess is required for FFmpeg invocation
from pathlib import Path

from .types import EncodeError, TranscodeCommand, TranscodeResult

logger = logging.getLogger(__name__)


class TranscodeExecutor:
    """Runs ffmpeg for a TranscodeCommand.

    ffmpeg inherits the terminal so its progress line stays visible. There
    is no timeout and no retry; a failed encode is reported to the caller
    and a partial output is left to be overwritten by the next run.
    """

    def __init__(self, ffmpeg_path: Path | None = None) -> None:
        self._ffmpeg_path = ffmpeg_path or Path("ffmpeg")

    def build_argv(self, command: TranscodeCommand) -> list[str]:
        """Full argv including the ffmpeg executable."""
        return [str(self._ffmpeg_path), *command.args]

    def execute(self, command: TranscodeCommand) -> TranscodeResult:
        """Run the encoder.

        Args:
            command: Synthesized command.

        Returns:
            TranscodeResult for a successful encode.

        Raises:
            EncodeError: If ffmpeg cannot be started or exits non-zero.
        """
        argv = self.build_argv(command)
        logger.info(
            "Encoding %s -> %s", command.input_path.name, command.output_path.name
        )
        logger.debug("Executing: %s", " ".join(argv))

        try:
            completed = subprocess.run(argv, check=False)  # nosec B603
        except OSError as e:
            raise EncodeError(f"Failed to run ffmpeg: {e}") from e

        if completed.returncode != 0:
            raise EncodeError(
                f"Transcode failed with exit code: {completed.returncode}",
                exit_code=completed.returncode,
            )

        logger.info("Encode finished: %s", command.output_path)
        return TranscodeResult(success=True, output_path=command.output_path)

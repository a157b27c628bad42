"""FFprobe-based implementation of the MediaIntrospector protocol."""

import json
import logging
import subprocess  # nosec B404 - needed for TimeoutExpired
from pathlib import Path

from tvcode.core.subprocess_utils import run_command
from tvcode.domain import MediaProfile
from tvcode.introspector.interface import AnalysisError
from tvcode.introspector.parsers import parse_ffprobe_output
from tvcode.policy.profile import DEFAULT_PROFILE

logger = logging.getLogger(__name__)

# Large probe windows are slow on big remuxes
FFPROBE_TIMEOUT = 300


class FFprobeIntrospector:
    """ffprobe-based implementation of MediaIntrospector protocol.

    Probes with large analyze-duration/probe-size windows so that late
    starting subtitle streams (PGS in particular) are detected, and the
    encoder pass is given the same windows to see the same stream layout.
    """

    def __init__(
        self,
        ffprobe_path: Path | None = None,
        analyze_duration: int = DEFAULT_PROFILE.probe_analyze_duration,
        probe_size: int = DEFAULT_PROFILE.probe_size,
    ) -> None:
        """Initialize the introspector.

        Args:
            ffprobe_path: Path to ffprobe. Defaults to "ffprobe" on PATH.
            analyze_duration: Value for -analyzeduration (microseconds).
            probe_size: Value for -probesize (bytes).
        """
        self._ffprobe_path = ffprobe_path or Path("ffprobe")
        self._analyze_duration = analyze_duration
        self._probe_size = probe_size

    def get_profile(self, path: Path) -> MediaProfile:
        """Analyze a file and classify its streams.

        Args:
            path: Path to the video file.

        Returns:
            Classified MediaProfile.

        Raises:
            AnalysisError: If the file cannot be analyzed.
        """
        if not path.exists():
            raise AnalysisError(f"File not found: {path}")

        return parse_ffprobe_output(path, self.run_ffprobe(path))

    def run_ffprobe(self, path: Path) -> dict:
        """Run ffprobe and return its parsed JSON report.

        Raises:
            AnalysisError: If ffprobe fails or its output is unusable.
        """
        args: list[str | Path] = [
            self._ffprobe_path,
            "-v",
            "quiet",
            "-print_format",
            "json",
            "-show_format",
            "-show_streams",
            "-analyzeduration",
            str(self._analyze_duration),
            "-probesize",
            str(self._probe_size),
            path,
        ]
        try:
            stdout, stderr, rc = run_command(args, timeout=FFPROBE_TIMEOUT)
        except subprocess.TimeoutExpired as e:
            raise AnalysisError(
                f"ffprobe timed out for {path} after {e.timeout}s"
            ) from e
        except OSError as e:
            raise AnalysisError(f"Failed to run ffprobe: {e}") from e

        if rc != 0:
            detail = stderr.strip() or f"exit code {rc}"
            raise AnalysisError(f"ffprobe failed for {path}: {detail}")

        try:
            data = json.loads(stdout)
        except json.JSONDecodeError as e:
            raise AnalysisError(f"Failed to parse ffprobe output for {path}: {e}") from e

        if not isinstance(data, dict):
            raise AnalysisError(f"Unexpected ffprobe output for {path}")
        if "streams" not in data:
            raise AnalysisError(
                f"Missing 'streams' in ffprobe output for {path}. "
                "File may be corrupted or not a valid media file."
            )
        if "format" not in data:
            raise AnalysisError(
                f"Missing 'format' in ffprobe output for {path}. "
                "File may be corrupted or not a valid media file."
            )
        if not isinstance(data["format"], dict):
            raise AnalysisError(f"Malformed 'format' in ffprobe output for {path}")
        streams = data["streams"]
        if not isinstance(streams, list) or not all(
            isinstance(stream, dict) for stream in streams
        ):
            raise AnalysisError(f"Malformed 'streams' in ffprobe output for {path}")

        logger.debug("ffprobe reported %d stream(s) for %s", len(streams), path)
        return data

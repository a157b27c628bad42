"""Transcode data types and result classes."""

from dataclasses import dataclass
from pathlib import Path

from tvcode.domain import BurnMode, EncodingStrategy, SubtitleTrack


class EncodeError(Exception):
    """Raised when the encoder fails or cannot be started."""

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


@dataclass(frozen=True)
class NoBurn:
    """Video plane encoded per the resolved strategy."""

    strategy: EncodingStrategy

    mode = BurnMode.NONE


@dataclass(frozen=True)
class BitmapOverlayBurn:
    """Bitmap subtitles composited onto the video with the overlay filter."""

    track: SubtitleTrack

    mode = BurnMode.BITMAP_OVERLAY


@dataclass(frozen=True)
class TextFilterBurn:
    """Text subtitles rendered by the subtitles filter from the input file."""

    track: SubtitleTrack

    mode = BurnMode.TEXT_FILTER


VideoPath = NoBurn | BitmapOverlayBurn | TextFilterBurn
"""How the video plane is produced. Burn variants carry no strategy: they
always use the software encoder."""


@dataclass(frozen=True)
class TranscodeCommand:
    """Synthesized encoder invocation for one file."""

    input_path: Path
    output_path: Path
    args: tuple[str, ...]
    """Arguments for ffmpeg, excluding the executable itself."""

    video_label: str
    audio_label: str
    video_path: VideoPath

    @property
    def burn_mode(self) -> BurnMode:
        return self.video_path.mode

    @property
    def burned(self) -> bool:
        return self.burn_mode is not BurnMode.NONE


@dataclass
class TranscodeResult:
    """Result of a transcode operation."""

    success: bool
    output_path: Path | None = None
    exit_code: int | None = None
    error_message: str | None = None

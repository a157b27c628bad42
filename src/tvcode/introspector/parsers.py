"""Pure parsing functions for ffprobe JSON output.

These functions turn an ffprobe report into a classified MediaProfile.
All functions are pure (no I/O, no side effects) for easy testing.
"""

import logging
from pathlib import Path

from tvcode.domain import UNKNOWN_CODEC, MediaProfile, SubtitleTrack

logger = logging.getLogger(__name__)

# Raster subtitle codecs (Blu-ray PGS, DVD VobSub, DVB). Everything else,
# including codecs we do not recognize, is treated as renderable text.
BITMAP_SUBTITLE_CODECS = frozenset(
    {
        "hdmv_pgs_subtitle",
        "pgssub",
        "dvd_subtitle",
        "dvdsub",
        "dvb_subtitle",
        "dvbsub",
    }
)


def is_bitmap_subtitle(codec: str) -> bool:
    """Return True if the subtitle codec is a raster format."""
    return codec.casefold() in BITMAP_SUBTITLE_CODECS


def sanitize_string(value: str | None) -> str | None:
    """Sanitize a string by replacing invalid UTF-8 characters.

    Args:
        value: String value to sanitize.

    Returns:
        Sanitized string or None if input was None.
    """
    if value is None:
        return None
    return value.encode("utf-8", errors="replace").decode("utf-8")


def normalize_codec(value: object) -> str:
    """Normalize an ffprobe codec_name to a lowercase identifier."""
    if not isinstance(value, str) or not value.strip():
        return UNKNOWN_CODEC
    return value.strip().casefold()


def validate_dimension(
    value: object,
    field_name: str,
    file_path: str | None = None,
) -> int:
    """Validate a width/height value, returning 0 when unusable.

    Args:
        value: Raw value from ffprobe.
        field_name: Field name for warning messages.
        file_path: File path context for warnings.

    Returns:
        The value if it is a non-negative int, else 0.
    """
    if value is None:
        return 0
    context = f" in {file_path}" if file_path else ""
    if not isinstance(value, int) or isinstance(value, bool):
        logger.warning(
            "Expected int for %s, got %s%s", field_name, type(value).__name__, context
        )
        return 0
    if value < 0:
        logger.warning("Invalid negative %s: %d%s", field_name, value, context)
        return 0
    return value


def parse_subtitle_stream(stream: dict, subtitle_index: int) -> SubtitleTrack:
    """Parse a subtitle stream dict into a SubtitleTrack.

    Args:
        stream: Stream dictionary from ffprobe JSON.
        subtitle_index: Position among subtitle streams seen so far.

    Returns:
        SubtitleTrack with its bitmap/text classification.
    """
    codec = normalize_codec(stream.get("codec_name"))
    tags = stream.get("tags")
    if not isinstance(tags, dict):
        tags = {}
    return SubtitleTrack(
        subtitle_index=subtitle_index,
        codec=codec,
        language=sanitize_string(tags.get("language")) or None,
        title=sanitize_string(tags.get("title")) or None,
        is_bitmap=is_bitmap_subtitle(codec),
    )


def parse_ffprobe_output(path: Path, data: dict) -> MediaProfile:
    """Classify ffprobe JSON output into a MediaProfile.

    The first video stream supplies the video codec and frame size, the
    first audio stream supplies the audio codec. Every subtitle stream is
    collected in probe order and numbered by its position among subtitle
    streams only, which is what ffmpeg's ``0:s:N`` selector expects.
    Missing video or audio yields the "unknown" codec sentinel.

    Args:
        path: Path to the analyzed file.
        data: Parsed ffprobe JSON output.

    Returns:
        Classified MediaProfile.
    """
    file_path = str(path)
    format_info = data.get("format") or {}
    container = sanitize_string(format_info.get("format_name")) or ""

    video_codec = UNKNOWN_CODEC
    audio_codec = UNKNOWN_CODEC
    width = 0
    height = 0
    seen_video = False
    seen_audio = False
    subtitles: list[SubtitleTrack] = []

    for stream in data.get("streams") or []:
        codec_type = stream.get("codec_type")
        if codec_type == "video" and not seen_video:
            seen_video = True
            video_codec = normalize_codec(stream.get("codec_name"))
            width = validate_dimension(stream.get("width"), "width", file_path)
            height = validate_dimension(stream.get("height"), "height", file_path)
        elif codec_type == "audio" and not seen_audio:
            seen_audio = True
            audio_codec = normalize_codec(stream.get("codec_name"))
        elif codec_type == "subtitle":
            subtitles.append(parse_subtitle_stream(stream, len(subtitles)))

    if not seen_video:
        logger.warning("No video stream found in %s", file_path)
    if not seen_audio:
        logger.debug("No audio stream found in %s", file_path)

    return MediaProfile(
        path=path,
        video_codec=video_codec,
        audio_codec=audio_codec,
        container=container,
        width=width,
        height=height,
        subtitle_tracks=tuple(subtitles),
    )

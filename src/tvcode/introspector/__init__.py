"""Media introspection: ffprobe analysis and stream classification."""

from tvcode.introspector.ffprobe import FFprobeIntrospector
from tvcode.introspector.formatters import format_profile_human, format_track_choice
from tvcode.introspector.interface import AnalysisError, MediaIntrospector
from tvcode.introspector.parsers import (
    BITMAP_SUBTITLE_CODECS,
    is_bitmap_subtitle,
    parse_ffprobe_output,
)

__all__ = [
    "AnalysisError",
    "BITMAP_SUBTITLE_CODECS",
    "FFprobeIntrospector",
    "MediaIntrospector",
    "format_profile_human",
    "format_track_choice",
    "is_bitmap_subtitle",
    "parse_ffprobe_output",
]

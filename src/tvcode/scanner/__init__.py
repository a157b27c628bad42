"""Scanner module: discovery of candidate video files."""

from tvcode.scanner.discovery import DEFAULT_EXTENSIONS, find_video_files

__all__ = [
    "DEFAULT_EXTENSIONS",
    "find_video_files",
]

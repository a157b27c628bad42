"""Video file discovery."""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = [
    "mp4",
    "mkv",
    "avi",
    "mov",
    "wmv",
    "flv",
    "webm",
    "m4v",
    "mpg",
    "mpeg",
    "3gp",
    "ts",
    "m2ts",
]


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def find_video_files(
    directory: Path,
    recursive: bool = False,
    extensions: Iterable[str] | None = None,
) -> list[Path]:
    """Discover video files in a directory.

    Args:
        directory: Directory to scan.
        recursive: Whether to descend into subdirectories.
        extensions: Extensions to accept (without dot), case-insensitive.

    Returns:
        Sorted list of absolute paths to matching regular files; empty if
        the directory is missing. Hidden files and directories are skipped.
    """
    if not directory.is_dir():
        logger.warning("Not a directory: %s", directory)
        return []

    # Returned paths are absolute and never begin with "-"
    directory = directory.resolve()

    accepted = {ext.casefold().lstrip(".") for ext in (extensions or DEFAULT_EXTENSIONS)}
    candidates = directory.rglob("*") if recursive else directory.iterdir()

    files = [
        path
        for path in candidates
        if path.is_file()
        and path.suffix[1:].casefold() in accepted
        and not _is_hidden(path, directory)
    ]
    logger.debug("Found %d video file(s) in %s", len(files), directory)
    return sorted(files)

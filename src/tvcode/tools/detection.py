"""External tool discovery and encoder capability probing.

The capability probe lists ffmpeg's encoders once per run and turns the
listing into a read-only availability table. The acceleration resolver
only ever sees that table, never the tool itself.
"""

from __future__ import annotations

import logging
import re
import shutil
import subprocess  # nosec B404 - needed for TimeoutExpired
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from tvcode.core.subprocess_utils import run_command
from tvcode.domain import HostPlatform
from tvcode.policy.acceleration import UNPROBED_PLATFORMS
from tvcode.policy.profile import DEFAULT_PROFILE, DeliveryProfile

logger = logging.getLogger(__name__)

# Timeout for capability detection commands (seconds)
DETECTION_TIMEOUT = 10

REQUIRED_TOOLS = ("ffmpeg", "ffprobe")

# " V....D libx264              libx264 H.264 / AVC ..."
_ENCODER_LINE = re.compile(r"^\s*[VAS][A-Z.]{5}\s+(\S+)")


def find_tool(name: str, configured_path: Path | None = None) -> Path | None:
    """Find a tool executable.

    Args:
        name: Tool name (e.g., "ffmpeg").
        configured_path: Optional configured path override.

    Returns:
        Path to tool executable, or None if not found.
    """
    if configured_path:
        if configured_path.is_file():
            return configured_path
        logger.warning(
            "Configured path for %s is not a file: %s", name, configured_path
        )

    which_result = shutil.which(name)
    if which_result:
        return Path(which_result)

    return None


def check_tool_availability(
    configured: Mapping[str, Path | None] | None = None,
) -> dict[str, Path | None]:
    """Locate the required external tools.

    Args:
        configured: Optional tool name -> configured path overrides.

    Returns:
        Tool name -> resolved path, or None for tools that are missing.
    """
    configured = configured or {}
    found = {name: find_tool(name, configured.get(name)) for name in REQUIRED_TOOLS}
    for name, path in found.items():
        if path is None:
            logger.error("%s not found in PATH", name)
        else:
            logger.debug("Using %s at %s", name, path)
    return found


def parse_encoder_list(output: str) -> set[str]:
    """Parse ``ffmpeg -encoders`` output into a set of encoder names.

    The legend above the ``------`` separator is skipped.

    Args:
        output: Standard output of ``ffmpeg -hide_banner -encoders``.

    Returns:
        Set of encoder names.
    """
    encoders: set[str] = set()
    in_list = False
    for line in output.splitlines():
        if not in_list:
            if line.strip().startswith("------"):
                in_list = True
            continue
        match = _ENCODER_LINE.match(line)
        if match:
            encoders.add(match.group(1))
    return encoders


def list_encoders(ffmpeg_path: Path) -> set[str]:
    """Run ``ffmpeg -encoders`` and return the listed encoder names.

    A failed listing yields an empty set, which makes every hardware
    candidate unavailable and leaves the software path.
    """
    try:
        stdout, stderr, rc = run_command(
            [ffmpeg_path, "-hide_banner", "-encoders"], timeout=DETECTION_TIMEOUT
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.warning("Failed to enumerate ffmpeg encoders: %s", e)
        return set()
    if rc != 0:
        logger.warning("Failed to enumerate ffmpeg encoders: %s", stderr.strip())
        return set()
    return parse_encoder_list(stdout)


def build_availability_table(
    ffmpeg_path: Path,
    host: HostPlatform,
    profile: DeliveryProfile = DEFAULT_PROFILE,
) -> Mapping[str, bool]:
    """Probe the host's hardware candidates once for the whole run.

    Args:
        ffmpeg_path: Path to ffmpeg executable.
        host: Host platform.
        profile: Delivery profile with the hardware priority table.

    Returns:
        Read-only mapping of candidate encoder name -> available. Empty on
        platforms that are not probed or have no candidates.
    """
    candidates = profile.candidates_for(host)
    if host in UNPROBED_PLATFORMS or not candidates:
        return MappingProxyType({})

    listed = list_encoders(ffmpeg_path)
    table = {kind.encoder_name: kind.encoder_name in listed for kind in candidates}
    logger.info(
        "Hardware encoders on %s: %s",
        host.value,
        ", ".join(f"{name}={'yes' if ok else 'no'}" for name, ok in table.items()),
    )
    return MappingProxyType(table)

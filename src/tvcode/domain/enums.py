"""Domain enums for tvcode.

This module contains the enums shared by the classifier, the policy layer
and the command synthesizer.
"""

from enum import Enum


class HardwareKind(Enum):
    """Hardware H.264 encoder families tvcode knows how to drive."""

    VIDEOTOOLBOX = "videotoolbox"  # Apple VideoToolbox (macOS)
    NVENC = "nvenc"  # NVIDIA NVENC
    QSV = "qsv"  # Intel Quick Sync Video
    VAAPI = "vaapi"  # VA-API (Linux Intel/AMD)

    @property
    def encoder_name(self) -> str:
        """FFmpeg encoder name as listed by ``ffmpeg -encoders``."""
        return f"h264_{self.value}"


class HostPlatform(Enum):
    """Operating system family of the machine running the encode."""

    MACOS = "macos"
    WINDOWS = "windows"
    LINUX = "linux"
    OTHER = "other"

    @classmethod
    def from_system(cls, system_name: str) -> "HostPlatform":
        """Map a ``platform.system()`` value to a HostPlatform.

        Args:
            system_name: Value such as "Darwin", "Windows" or "Linux".

        Returns:
            Matching HostPlatform, or OTHER for anything unrecognized.
        """
        mapping = {
            "darwin": cls.MACOS,
            "windows": cls.WINDOWS,
            "linux": cls.LINUX,
        }
        return mapping.get(system_name.casefold(), cls.OTHER)


class BurnMode(Enum):
    """How the video plane is produced with respect to subtitles.

    The three modes are mutually exclusive. Both burn modes force the
    software encoder because they need a CPU-side filter graph.
    """

    NONE = "none"  # No burn, encoding strategy decides the video args
    BITMAP_OVERLAY = "bitmap_overlay"  # PGS/DVD/DVB composited via overlay
    TEXT_FILTER = "text_filter"  # SRT/ASS rendered via the subtitles filter

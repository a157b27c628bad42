"""Domain models and enums for tvcode.

Usage:
    from tvcode.domain import MediaProfile, SubtitleTrack, BurnRequest
    from tvcode.domain import HardwareKind, HostPlatform, SOFTWARE
"""

from .enums import (
    BurnMode,
    HardwareKind,
    HostPlatform,
)
from .models import (
    SOFTWARE,
    UNKNOWN_CODEC,
    BitrateTier,
    BurnRequest,
    EncodingStrategy,
    HardwareStrategy,
    MediaProfile,
    SoftwareStrategy,
    SubtitleTrack,
)

__all__ = [
    # Models
    "MediaProfile",
    "SubtitleTrack",
    "BurnRequest",
    "BitrateTier",
    "EncodingStrategy",
    "SoftwareStrategy",
    "HardwareStrategy",
    "SOFTWARE",
    "UNKNOWN_CODEC",
    # Enums
    "BurnMode",
    "HardwareKind",
    "HostPlatform",
]

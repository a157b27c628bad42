"""Domain models for tvcode.

All entities here are derived fresh from probe output for each input file
and are never shared across files. They are frozen so that nothing
downstream of the classifier can alter what was observed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .enums import BurnMode, HardwareKind

UNKNOWN_CODEC = "unknown"
"""Sentinel codec identifier used when the probe has no stream of a kind."""


@dataclass(frozen=True)
class SubtitleTrack:
    """A subtitle stream as seen by the subtitle-only stream selector."""

    subtitle_index: int
    """Position among subtitle streams only (0-based), as used by ``0:s:N``."""

    codec: str
    language: str | None = None
    title: str | None = None
    is_bitmap: bool = False
    """True for raster subtitle formats (PGS, VobSub, DVB)."""

    @property
    def kind_label(self) -> str:
        """Short label used in menus and logs."""
        return "bitmap" if self.is_bitmap else "text"


@dataclass(frozen=True)
class MediaProfile:
    """Classified view of one probed input file."""

    path: Path
    video_codec: str = UNKNOWN_CODEC
    audio_codec: str = UNKNOWN_CODEC
    container: str = ""
    width: int = 0
    height: int = 0
    subtitle_tracks: tuple[SubtitleTrack, ...] = field(default_factory=tuple)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def has_subtitles(self) -> bool:
        return bool(self.subtitle_tracks)


@dataclass(frozen=True)
class BurnRequest:
    """Request to burn one subtitle track into the video plane."""

    track: SubtitleTrack

    @property
    def mode(self) -> BurnMode:
        """Burn mode implied by the track type."""
        if self.track.is_bitmap:
            return BurnMode.BITMAP_OVERLAY
        return BurnMode.TEXT_FILTER


@dataclass(frozen=True)
class SoftwareStrategy:
    """Encode the video with the software encoder (CRF mode)."""

    @property
    def label(self) -> str:
        return "software"


@dataclass(frozen=True)
class HardwareStrategy:
    """Encode the video with a hardware encoder of the given kind."""

    kind: HardwareKind

    @property
    def label(self) -> str:
        return self.kind.value


EncodingStrategy = SoftwareStrategy | HardwareStrategy
"""Exactly one strategy is chosen per file."""

SOFTWARE = SoftwareStrategy()


@dataclass(frozen=True)
class BitrateTier:
    """Target/max video bitrate pair, as encoder-consumable strings.

    ``max`` only matters for hardware paths that apply a VBV cap; the
    software path uses CRF and ignores both values.
    """

    target: str
    max: str

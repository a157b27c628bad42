"""Delivery profile model.

A DeliveryProfile holds the target codecs and container plus the tunable
policy tables (bitrate tiers, hardware priority, software encoder settings).
The defaults describe an Apple TV compatible H.264/AAC/MP4 file.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tvcode.domain import BitrateTier, HardwareKind, HostPlatform

# Bitrate strings as ffmpeg accepts them: "8M", "192k", "2500000"
BITRATE_PATTERN = re.compile(r"^\d+(\.\d+)?[kKmMgG]?$")


def _validate_bitrate(value: str, field_name: str) -> str:
    if not BITRATE_PATTERN.match(value):
        raise ValueError(
            f"Invalid {field_name} '{value}'. Use a number with optional "
            "k/M/G suffix (e.g., '8M', '192k')."
        )
    return value


class BitrateModel(BaseModel):
    """Target and maximum video bitrate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: str
    max: str

    @field_validator("target", "max")
    @classmethod
    def validate_bitrate(cls, v: str, info) -> str:
        """Validate bitrate magnitude strings."""
        return _validate_bitrate(v, info.field_name)

    def to_tier(self) -> BitrateTier:
        return BitrateTier(target=self.target, max=self.max)


class BitrateTierModel(BitrateModel):
    """One resolution tier: files with at least ``min_pixels`` use it."""

    min_pixels: int = Field(ge=1)


class SoftwareEncoderModel(BaseModel):
    """Software (CRF) encoder settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    encoder: str = "libx264"
    preset: str = "medium"
    crf: int = Field(default=20, ge=0, le=51)
    profile: str = "high"
    level: str = "4.1"


DEFAULT_BITRATE_TIERS: tuple[BitrateTierModel, ...] = (
    BitrateTierModel(min_pixels=3840 * 2160, target="20M", max="30M"),
    BitrateTierModel(min_pixels=1920 * 1080, target="8M", max="12M"),
    BitrateTierModel(min_pixels=1280 * 720, target="5M", max="7M"),
)

DEFAULT_HARDWARE_PRIORITY: dict[HostPlatform, tuple[HardwareKind, ...]] = {
    HostPlatform.MACOS: (HardwareKind.VIDEOTOOLBOX,),
    HostPlatform.WINDOWS: (HardwareKind.NVENC, HardwareKind.QSV),
    HostPlatform.LINUX: (HardwareKind.NVENC, HardwareKind.VAAPI),
}


class DeliveryProfile(BaseModel):
    """Target delivery profile and the policy tables used to reach it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = "appletv"

    # Compliance targets
    video_codec: str = "h264"
    audio_codec: str = "aac"
    container_aliases: tuple[str, ...] = ("mp4", "m4v")
    output_format: str = "mp4"
    extension: str = "mp4"

    # Audio re-encode settings (stereo downmix)
    audio_bitrate: str = "192k"
    audio_channels: int = Field(default=2, ge=1, le=8)

    # Output naming
    output_suffix: str = "_appletv"
    burn_suffix: str = "_subs"

    # Video bitrate policy
    bitrate_tiers: tuple[BitrateTierModel, ...] = DEFAULT_BITRATE_TIERS
    # Used below the lowest tier, including files without a video stream
    floor_tier: BitrateModel = BitrateModel(target="3M", max="4M")

    # Acceleration policy
    hardware_priority: dict[HostPlatform, tuple[HardwareKind, ...]] = Field(
        default_factory=lambda: dict(DEFAULT_HARDWARE_PRIORITY)
    )
    vaapi_device: str = "/dev/dri/renderD128"
    software: SoftwareEncoderModel = SoftwareEncoderModel()

    # Stream detection hints shared by the analyzer and the encoder
    probe_analyze_duration: int = Field(default=100_000_000, ge=0)
    probe_size: int = Field(default=100_000_000, ge=32)

    @field_validator("video_codec", "audio_codec")
    @classmethod
    def normalize_codec(cls, v: str) -> str:
        """Codec identifiers are compared lowercase."""
        v = v.strip().casefold()
        if not v:
            raise ValueError("codec must not be empty")
        return v

    @field_validator("container_aliases")
    @classmethod
    def validate_aliases(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """At least one non-empty container alias is required."""
        aliases = tuple(a.strip().casefold() for a in v if a.strip())
        if not aliases:
            raise ValueError("container_aliases must list at least one alias")
        return aliases

    @field_validator("extension")
    @classmethod
    def strip_extension_dot(cls, v: str) -> str:
        return v.lstrip(".")

    @field_validator("audio_bitrate")
    @classmethod
    def validate_audio_bitrate(cls, v: str) -> str:
        return _validate_bitrate(v, "audio_bitrate")

    @model_validator(mode="after")
    def validate_tier_order(self) -> DeliveryProfile:
        """Tiers must be strictly descending so the first match is the highest."""
        thresholds = [tier.min_pixels for tier in self.bitrate_tiers]
        for higher, lower in zip(thresholds, thresholds[1:]):
            if lower >= higher:
                raise ValueError(
                    "bitrate_tiers must be ordered by strictly descending "
                    f"min_pixels (got {higher} before {lower})"
                )
        return self

    def tiers(self) -> tuple[tuple[int, BitrateTier], ...]:
        """Return (min_pixels, tier) pairs, highest resolution first."""
        return tuple((t.min_pixels, t.to_tier()) for t in self.bitrate_tiers)

    def candidates_for(self, host: HostPlatform) -> tuple[HardwareKind, ...]:
        """Ordered hardware candidates for a host platform."""
        return tuple(self.hardware_priority.get(host, ()))


DEFAULT_PROFILE = DeliveryProfile()

"""Unit tests for the delivery profile model and its YAML loader."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tvcode.domain import HardwareKind, HostPlatform
from tvcode.policy import (
    DEFAULT_PROFILE,
    DeliveryProfile,
    ProfileValidationError,
    load_profile,
    load_profile_from_dict,
)


class TestDeliveryProfileDefaults:
    """Tests for the built-in Apple TV profile."""

    def test_targets(self) -> None:
        assert DEFAULT_PROFILE.video_codec == "h264"
        assert DEFAULT_PROFILE.audio_codec == "aac"
        assert DEFAULT_PROFILE.container_aliases == ("mp4", "m4v")

    def test_audio_settings(self) -> None:
        assert DEFAULT_PROFILE.audio_bitrate == "192k"
        assert DEFAULT_PROFILE.audio_channels == 2

    def test_hardware_priority(self) -> None:
        """Candidate order per platform."""
        assert DEFAULT_PROFILE.candidates_for(HostPlatform.MACOS) == (
            HardwareKind.VIDEOTOOLBOX,
        )
        assert DEFAULT_PROFILE.candidates_for(HostPlatform.WINDOWS) == (
            HardwareKind.NVENC,
            HardwareKind.QSV,
        )
        assert DEFAULT_PROFILE.candidates_for(HostPlatform.LINUX) == (
            HardwareKind.NVENC,
            HardwareKind.VAAPI,
        )
        assert DEFAULT_PROFILE.candidates_for(HostPlatform.OTHER) == ()

    def test_tiers_descending(self) -> None:
        thresholds = [min_pixels for min_pixels, _ in DEFAULT_PROFILE.tiers()]

        assert thresholds == sorted(thresholds, reverse=True)

    def test_frozen(self) -> None:
        """Profiles cannot be modified after validation."""
        with pytest.raises(ValidationError):
            DEFAULT_PROFILE.video_codec = "hevc"  # type: ignore[misc]


class TestDeliveryProfileValidation:
    """Validation rules of DeliveryProfile."""

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DeliveryProfile(videocodec="h264")

    def test_tiers_must_descend(self) -> None:
        """Ascending tiers would make the first match the lowest tier."""
        with pytest.raises(ValidationError, match="strictly descending"):
            DeliveryProfile(
                bitrate_tiers=[
                    {"min_pixels": 100, "target": "1M", "max": "2M"},
                    {"min_pixels": 200, "target": "2M", "max": "3M"},
                ]
            )

    def test_invalid_bitrate(self) -> None:
        with pytest.raises(ValidationError, match="Invalid target"):
            DeliveryProfile(
                bitrate_tiers=[{"min_pixels": 1, "target": "fast", "max": "2M"}]
            )

    def test_empty_aliases_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at least one alias"):
            DeliveryProfile(container_aliases=[" "])

    def test_crf_range(self) -> None:
        with pytest.raises(ValidationError):
            DeliveryProfile(software={"crf": 60})

    def test_extension_dot_stripped(self) -> None:
        assert DeliveryProfile(extension=".m4v").extension == "m4v"

    def test_floor_tier_has_no_threshold(self) -> None:
        """The floor applies below every tier, so it takes no min_pixels."""
        with pytest.raises(ValidationError, match="min_pixels"):
            DeliveryProfile(
                floor_tier={"min_pixels": 1, "target": "3M", "max": "4M"}
            )

    def test_floor_tier_bitrates_validated(self) -> None:
        with pytest.raises(ValidationError, match="Invalid max"):
            DeliveryProfile(floor_tier={"target": "3M", "max": "lots"})


class TestLoadProfile:
    """Tests for load_profile."""

    def test_none_returns_default(self) -> None:
        assert load_profile(None) is DEFAULT_PROFILE

    def test_loads_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text(
            "name: living-room\n"
            "audio_bitrate: 256k\n"
            "hardware_priority:\n"
            "  linux: [vaapi]\n"
        )

        profile = load_profile(path)

        assert profile.name == "living-room"
        assert profile.audio_bitrate == "256k"
        assert profile.candidates_for(HostPlatform.LINUX) == (HardwareKind.VAAPI,)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ProfileValidationError, match="not found"):
            load_profile(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("")

        with pytest.raises(ProfileValidationError, match="empty"):
            load_profile(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("name: [unclosed\n")

        with pytest.raises(ProfileValidationError, match="Invalid YAML"):
            load_profile(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ProfileValidationError, match="mapping"):
            load_profile(path)


class TestLoadProfileFromDict:
    """Tests for load_profile_from_dict."""

    def test_error_names_field(self) -> None:
        """Validation errors carry the offending field location."""
        with pytest.raises(ProfileValidationError) as exc_info:
            load_profile_from_dict({"audio_channels": 0})

        assert "audio_channels" in str(exc_info.value)
        assert str(exc_info.value).startswith("Profile validation failed")

"""Unit tests for introspector formatters."""

from pathlib import Path

from tvcode.domain import MediaProfile
from tvcode.introspector import format_profile_human, format_track_choice


class TestFormatProfileHuman:
    """Tests for format_profile_human."""

    def test_with_subtitles(self, hevc_media: MediaProfile) -> None:
        """All four summary lines are rendered."""
        assert format_profile_human(hevc_media) == [
            "Video: hevc (1920x1080)",
            "Audio: ac3",
            "Container: matroska,webm",
            "Subtitles: 2 track(s) found",
        ]

    def test_without_subtitles(self, compliant_media: MediaProfile) -> None:
        """The subtitle line is omitted when there are none."""
        lines = format_profile_human(compliant_media)

        assert len(lines) == 3
        assert not any(line.startswith("Subtitles") for line in lines)

    def test_unknown_container(self) -> None:
        """An empty container is shown as unknown."""
        lines = format_profile_human(MediaProfile(path=Path("x.ts")))

        assert "Container: unknown" in lines


class TestFormatTrackChoice:
    """Tests for format_track_choice."""

    def test_bitmap_with_title(self, bitmap_track) -> None:
        assert (
            format_track_choice(bitmap_track, 2)
            == "[2] eng (hdmv_pgs_subtitle, bitmap) - Full"
        )

    def test_text_without_title(self, text_track) -> None:
        assert format_track_choice(text_track, 1) == "[1] eng (subrip, text)"

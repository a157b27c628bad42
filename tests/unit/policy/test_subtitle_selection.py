"""Unit tests for subtitle track selection."""

import logging

import pytest

from tvcode.domain import BurnMode, SubtitleTrack
from tvcode.policy import InvalidSelectionError, parse_selection, select_subtitle


@pytest.fixture
def tracks(text_track: SubtitleTrack, bitmap_track: SubtitleTrack):
    return [text_track, bitmap_track]


class TestParseSelection:
    """Tests for parse_selection."""

    def test_int_in_range(self) -> None:
        assert parse_selection(2, 2) == 2

    def test_zero_is_skip(self) -> None:
        assert parse_selection(0, 2) == 0

    def test_string_with_whitespace(self) -> None:
        """User input is stripped before parsing."""
        assert parse_selection(" 1\n", 2) == 1

    @pytest.mark.parametrize(
        "raw", ["abc", "", "1.5", "-1", "+1", "\u00b2", "\u0661"]
    )
    def test_non_numeric_strings(self, raw: str) -> None:
        """Anything that is not a plain non-negative integer is rejected."""
        with pytest.raises(InvalidSelectionError):
            parse_selection(raw, 2)

    @pytest.mark.parametrize("raw", [3, -1, "3"])
    def test_out_of_range(self, raw) -> None:
        """Selections beyond the track count or below zero are rejected."""
        with pytest.raises(InvalidSelectionError, match="expected 0-2"):
            parse_selection(raw, 2)

    def test_bool_rejected(self) -> None:
        """Booleans are not selections even though they are ints."""
        with pytest.raises(InvalidSelectionError):
            parse_selection(True, 2)

    def test_error_is_value_error(self) -> None:
        """InvalidSelectionError can be handled as a ValueError."""
        with pytest.raises(ValueError):
            parse_selection("x", 1)


class TestSelectSubtitle:
    """Tests for select_subtitle."""

    def test_selects_one_based(self, tracks, bitmap_track: SubtitleTrack) -> None:
        """Selection n picks tracks[n - 1]."""
        request = select_subtitle(tracks, 2)

        assert request is not None
        assert request.track == bitmap_track
        assert request.track.subtitle_index == 1
        assert request.mode is BurnMode.BITMAP_OVERLAY

    def test_text_track_mode(self, tracks) -> None:
        """A text track yields the text filter mode."""
        request = select_subtitle(tracks, "1")

        assert request is not None
        assert request.mode is BurnMode.TEXT_FILTER

    def test_zero_skips(self, tracks) -> None:
        assert select_subtitle(tracks, 0) is None

    def test_none_skips(self, tracks) -> None:
        assert select_subtitle(tracks, None) is None

    def test_no_tracks(self) -> None:
        """With no tracks there is nothing to select."""
        assert select_subtitle([], 1) is None

    def test_invalid_input_fails_soft(
        self, tracks, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Non-numeric input yields no burn and a warning instead of an error."""
        with caplog.at_level(logging.WARNING):
            assert select_subtitle(tracks, "abc") is None

        assert "skipping subtitle burning" in caplog.text

    def test_out_of_range_fails_soft(self, tracks) -> None:
        assert select_subtitle(tracks, 5) is None

    @pytest.mark.parametrize("raw", ["\u00b2", "\u0661", "\uff11"])
    def test_non_ascii_digits_fail_soft(self, tracks, raw: str) -> None:
        """Superscript, Arabic-Indic and full-width digits mean no burn."""
        assert select_subtitle(tracks, raw) is None

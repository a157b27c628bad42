"""Subtitle track selection for burn-in.

The selector interprets a selection that was already obtained from the
user; it never prompts. Selections are 1-based with 0 meaning "skip", so
they match the numbers shown in the interactive menu.
"""

import logging
from collections.abc import Sequence

from tvcode.domain import BurnRequest, SubtitleTrack

from .exceptions import InvalidSelectionError

logger = logging.getLogger(__name__)

SKIP_SELECTION = 0


def parse_selection(raw: int | str, track_count: int) -> int:
    """Parse and range-check a 1-based subtitle selection.

    Args:
        raw: Selection as typed by the user or passed programmatically.
        track_count: Number of subtitle tracks offered.

    Returns:
        Selection in the range 0..track_count (0 = skip).

    Raises:
        InvalidSelectionError: If the value is not an integer or is out of range.
    """
    if isinstance(raw, bool):
        raise InvalidSelectionError(raw, track_count)
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        # isdigit() alone admits superscripts and other non-ASCII digits
        if not (text.isascii() and text.isdigit()):
            raise InvalidSelectionError(raw, track_count)
        value = int(text)

    if value < 0 or value > track_count:
        raise InvalidSelectionError(raw, track_count)
    return value


def select_subtitle(
    tracks: Sequence[SubtitleTrack],
    selection: int | str | None,
) -> BurnRequest | None:
    """Turn a 1-based selection into an optional burn request.

    Fails soft: an absent, zero, non-numeric or out-of-range selection
    yields no request and never aborts the run.

    Args:
        tracks: Subtitle tracks in subtitle-only order.
        selection: 1-based selection, 0 to skip, or None.

    Returns:
        BurnRequest wrapping ``tracks[selection - 1]``, or None.
    """
    if selection is None or not tracks:
        return None

    try:
        value = parse_selection(selection, len(tracks))
    except InvalidSelectionError as e:
        logger.warning("%s, skipping subtitle burning", e)
        return None

    if value == SKIP_SELECTION:
        logger.debug("Subtitle burning skipped by selection")
        return None

    track = tracks[value - 1]
    logger.debug(
        "Selected subtitle stream 0:s:%d (%s, %s)",
        track.subtitle_index,
        track.codec,
        track.kind_label,
    )
    return BurnRequest(track=track)

"""Interactive subtitle track selection."""

from __future__ import annotations

from collections.abc import Sequence

import click

from tvcode.domain import SubtitleTrack
from tvcode.introspector import format_track_choice


def prompt_subtitle_track(tracks: Sequence[SubtitleTrack]) -> str:
    """Show the subtitle menu and return the raw answer.

    Validation is left to the subtitle selector, which treats anything it
    cannot parse as "skip".

    Args:
        tracks: Subtitle tracks in menu order.

    Returns:
        The text the user typed.
    """
    click.echo("\n  Available subtitle tracks:")
    click.echo("  [0] Skip subtitle burning")
    for position, track in enumerate(tracks, start=1):
        click.echo(f"  {format_track_choice(track, position)}")
    return click.prompt(
        f"  Select subtitle track to burn (0-{len(tracks)})",
        type=str,
        default="0",
        show_default=False,
    )

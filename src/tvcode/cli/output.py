"""CLI output helpers: error exits and per-file status lines."""

from __future__ import annotations

import sys
from typing import NoReturn

import click

from tvcode.cli.exit_codes import ExitCode
from tvcode.domain import MediaProfile
from tvcode.executor.transcode import TranscodeCommand
from tvcode.introspector import format_profile_human
from tvcode.workflow import BatchSummary, FileOutcome, OutcomeStatus


def error_exit(message: str, code: ExitCode | int) -> NoReturn:
    """Print an error to stderr and exit with the given code."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(int(code))


class EchoCallback:
    """ProcessingCallback that prints human-readable progress."""

    def __init__(self, dry_run: bool = False) -> None:
        self._dry_run = dry_run

    def on_analyzed(self, media: MediaProfile) -> None:
        click.echo(f"\nProcessing: {media.path.name}")
        for line in format_profile_human(media):
            click.echo(f"  {line}")

    def on_command(self, command: TranscodeCommand) -> None:
        click.echo(f"  Video: {command.video_label}")
        click.echo(f"  Audio: {command.audio_label}")
        click.echo(f"  Output: {command.output_path.name}")
        if self._dry_run:
            click.echo("  Command: " + " ".join(command.args))

    def on_outcome(self, outcome: FileOutcome) -> None:
        status = outcome.status
        if status is OutcomeStatus.COMPLIANT:
            click.echo("  Already compatible, skipping")
        elif status is OutcomeStatus.TRANSCODED:
            click.echo(f"  Successfully converted to: {outcome.output_path}")
        elif status is OutcomeStatus.PLANNED:
            click.echo("  Dry run, not encoding")
        elif status is OutcomeStatus.ANALYSIS_FAILED:
            click.echo(f"\nProcessing: {outcome.path.name}")
            click.echo(f"  Error analyzing video: {outcome.message}", err=True)
        else:
            click.echo(f"  Error: {outcome.message}", err=True)


def format_summary(summary: BatchSummary) -> str:
    """Render the end-of-run summary line."""
    counts = summary.counts
    parts = [
        f"{counts[OutcomeStatus.TRANSCODED]} converted",
        f"{counts[OutcomeStatus.COMPLIANT]} already compatible",
    ]
    if counts[OutcomeStatus.PLANNED]:
        parts.append(f"{counts[OutcomeStatus.PLANNED]} planned")
    parts.append(f"{len(summary.failed)} failed")
    return f"Done: {len(summary.outcomes)} file(s) - " + ", ".join(parts)

"""Per-file processing pipeline and sequential batch runner.

Control flow per file: analyze, optionally select a subtitle to burn,
evaluate compatibility (OR burn), resolve the encoding strategy, pick the
bitrate tier, synthesize the command and hand it to the encoder. Every
failure is reported per file and the batch carries on with the next one.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

from tvcode.domain import BurnRequest, HostPlatform, MediaProfile, SubtitleTrack
from tvcode.executor.transcode import (
    EncodeError,
    TranscodeCommand,
    TranscodeExecutor,
    build_transcode_command,
)
from tvcode.introspector import AnalysisError, MediaIntrospector
from tvcode.logging import file_context
from tvcode.policy import (
    DEFAULT_PROFILE,
    DeliveryProfile,
    needs_transcode,
    resolve_strategy,
    select_bitrate_tier,
    select_subtitle,
)

logger = logging.getLogger(__name__)

TrackChooser = Callable[[Sequence[SubtitleTrack]], int | str | None]
"""Interactive collaborator: shows the tracks, returns the raw selection."""


class OutcomeStatus(Enum):
    """Final state of one file."""

    COMPLIANT = "compliant"  # Already matches the profile, nothing to do
    TRANSCODED = "transcoded"  # Encoder ran successfully
    PLANNED = "planned"  # Dry run: command synthesized but not run
    ANALYSIS_FAILED = "analysis_failed"
    ENCODE_FAILED = "encode_failed"

    @property
    def is_failure(self) -> bool:
        return self in (OutcomeStatus.ANALYSIS_FAILED, OutcomeStatus.ENCODE_FAILED)


@dataclass
class FileOutcome:
    """Result of processing one file."""

    path: Path
    status: OutcomeStatus
    media: MediaProfile | None = None
    command: TranscodeCommand | None = None
    message: str | None = None
    exit_code: int | None = None

    @property
    def output_path(self) -> Path | None:
        return self.command.output_path if self.command else None


class ProcessingCallback(Protocol):
    """Progress hooks for status output; all hooks are optional no-ops."""

    def on_analyzed(self, media: MediaProfile) -> None: ...

    def on_command(self, command: TranscodeCommand) -> None: ...

    def on_outcome(self, outcome: FileOutcome) -> None: ...


class NullCallback:
    """ProcessingCallback that ignores every event."""

    def on_analyzed(self, media: MediaProfile) -> None:
        pass

    def on_command(self, command: TranscodeCommand) -> None:
        pass

    def on_outcome(self, outcome: FileOutcome) -> None:
        pass


@dataclass
class ProcessingContext:
    """Run-scoped collaborators and settings shared by every file."""

    introspector: MediaIntrospector
    executor: TranscodeExecutor
    host: HostPlatform
    availability: Mapping[str, bool]
    """Encoder availability, probed once for the run."""

    profile: DeliveryProfile = DEFAULT_PROFILE
    burn_subtitles: bool = False
    dry_run: bool = False
    choose_track: TrackChooser | None = None
    callback: ProcessingCallback = field(default_factory=NullCallback)


@dataclass
class BatchSummary:
    """Aggregate of a batch run."""

    outcomes: list[FileOutcome] = field(default_factory=list)

    @property
    def counts(self) -> Counter[OutcomeStatus]:
        return Counter(outcome.status for outcome in self.outcomes)

    @property
    def failed(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if o.status.is_failure]

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)


def _choose_burn(media: MediaProfile, context: ProcessingContext) -> BurnRequest | None:
    if not context.burn_subtitles or not media.has_subtitles:
        return None
    if context.choose_track is None:
        logger.warning("Subtitle burning enabled but no track chooser configured")
        return None
    selection = context.choose_track(media.subtitle_tracks)
    return select_subtitle(media.subtitle_tracks, selection)


def process_file(path: Path, context: ProcessingContext) -> FileOutcome:
    """Run the decision pipeline, and the encoder, for one file.

    Args:
        path: Input file.
        context: Run-scoped collaborators and settings.

    Returns:
        FileOutcome describing what happened. Never raises for analysis or
        encode failures.
    """
    profile = context.profile

    try:
        media = context.introspector.get_profile(path)
    except AnalysisError as e:
        logger.error("Error analyzing video: %s", e)
        return FileOutcome(path, OutcomeStatus.ANALYSIS_FAILED, message=str(e))

    context.callback.on_analyzed(media)

    burn = _choose_burn(media, context)

    if not (needs_transcode(media, profile) or burn is not None):
        logger.info("Already compatible with profile '%s', skipping", profile.name)
        return FileOutcome(path, OutcomeStatus.COMPLIANT, media=media)

    strategy = resolve_strategy(context.host, burn, context.availability, profile)
    tier = select_bitrate_tier(media.width, media.height, profile)
    command = build_transcode_command(media, burn, strategy, tier, profile)
    logger.info(
        "Transcoding: video=%s, audio=%s, output=%s",
        command.video_label,
        command.audio_label,
        command.output_path.name,
    )
    context.callback.on_command(command)

    if context.dry_run:
        return FileOutcome(path, OutcomeStatus.PLANNED, media=media, command=command)

    try:
        context.executor.execute(command)
    except EncodeError as e:
        logger.error("%s", e.message)
        return FileOutcome(
            path,
            OutcomeStatus.ENCODE_FAILED,
            media=media,
            command=command,
            message=e.message,
            exit_code=e.exit_code,
        )

    return FileOutcome(path, OutcomeStatus.TRANSCODED, media=media, command=command)


def process_batch(paths: Iterable[Path], context: ProcessingContext) -> BatchSummary:
    """Process files one after another.

    Each file is fully analyzed, decided and encoded before the next one
    starts. A failure on one file never affects another file's output.

    Args:
        paths: Input files in processing order.
        context: Run-scoped collaborators and settings.

    Returns:
        BatchSummary with one outcome per file.
    """
    summary = BatchSummary()
    for path in paths:
        with file_context(path):
            outcome = process_file(path, context)
        summary.outcomes.append(outcome)
        context.callback.on_outcome(outcome)

    counts = summary.counts
    logger.info(
        "Batch finished: %d file(s), %d failed",
        len(summary.outcomes),
        sum(n for status, n in counts.items() if status.is_failure),
    )
    return summary

"""File processing workflow."""

from tvcode.workflow.processor import (
    BatchSummary,
    FileOutcome,
    NullCallback,
    OutcomeStatus,
    ProcessingCallback,
    ProcessingContext,
    TrackChooser,
    process_batch,
    process_file,
)

__all__ = [
    "BatchSummary",
    "FileOutcome",
    "NullCallback",
    "OutcomeStatus",
    "ProcessingCallback",
    "ProcessingContext",
    "TrackChooser",
    "process_batch",
    "process_file",
]

"""MediaIntrospector interface for stream analysis."""

from pathlib import Path
from typing import Protocol

from tvcode.domain import MediaProfile


class AnalysisError(Exception):
    """Raised when a file cannot be analyzed or its report cannot be parsed."""

    pass


class MediaIntrospector(Protocol):
    """Protocol for analyzer implementations.

    The workflow only needs a classified MediaProfile per file; tests
    substitute an in-memory implementation.
    """

    def get_profile(self, path: Path) -> MediaProfile:
        """Analyze a file and classify its streams.

        Raises:
            AnalysisError: If the file cannot be analyzed.
        """
        ...

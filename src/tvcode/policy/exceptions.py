"""Exceptions raised by the policy layer."""


class ProfileValidationError(Exception):
    """Error loading or validating a delivery profile."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class InvalidSelectionError(ValueError):
    """A subtitle selection is non-numeric or outside the offered range."""

    def __init__(self, raw: object, track_count: int) -> None:
        self.raw = raw
        self.track_count = track_count
        super().__init__(
            f"Invalid subtitle selection {raw!r} (expected 0-{track_count})"
        )

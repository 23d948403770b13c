from __future__ import annotations


class DatefeedError(Exception):
    """Base error for datefeed failures."""


class SourceConfigError(DatefeedError):
    """Raised when the source map or the default source is misconfigured."""


class InvalidSourceError(DatefeedError):
    """Raised when a request names no source, or one that is not configured."""

    def __init__(self, requested: str | None, available: list[str]) -> None:
        self.requested = requested
        self.available = available
        listing = ", ".join(available)
        if requested:
            message = (
                f'Error: "source" parameter "{requested}" is invalid. '
                f"Available sources: {listing}."
            )
        else:
            message = (
                'Error: the "source" query parameter is missing. '
                f"Available sources: {listing}."
            )
        super().__init__(message)
        self.message = message

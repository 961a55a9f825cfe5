"""Lookup error taxonomy."""

from enum import StrEnum


class ErrorKind(StrEnum):
    NOT_FOUND = "NOT_FOUND"
    UPSTREAM_FAILURE = "UPSTREAM_FAILURE"
    VALIDATION_FAILURE = "VALIDATION_FAILURE"


class WeatherLookupError(Exception):
    """A failed city lookup.

    ``message`` is safe to show to the user. ``cause`` keeps the underlying
    exception for logging and is never part of ``str(error)``.
    """

    def __init__(
        self, kind: ErrorKind, message: str, cause: BaseException | None = None
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message

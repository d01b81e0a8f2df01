"""Error taxonomy and exit code mapping for CLI."""

from __future__ import annotations

from typing import Any


class MusicIdsError(Exception):
    """Base error for deterministic CLI exit codes."""

    exit_code: int = 1


class ValidationError(MusicIdsError):
    """Invalid user input or command usage."""

    exit_code = 2


class InvalidFormat(ValidationError, ValueError):
    """Input is not a well-formed identifier of the requested kind.

    Attributes:
        value: The offending input as it was given (may be None)
        kind: Prefix token of the identifier kind, e.g. "ISRC"
        expected: Human-readable description of the accepted shape
    """

    def __init__(self, value: Any, kind: str, expected: str) -> None:
        self.value = value
        self.kind = kind
        self.expected = expected
        super().__init__(f"{value!r} is not a well-formed {kind}: expected {expected}")


class UnsupportedFormat(ValidationError, ValueError):
    """Requested rendering format is not one of data, full, prefixed."""

    def __init__(self, requested: Any, supported: tuple[str, ...]) -> None:
        self.requested = requested
        self.supported = supported
        super().__init__(
            f"format must be one of {list(supported)}, but it was {requested!r}"
        )


class RuntimeFailure(MusicIdsError):
    """Unexpected runtime failure."""

    exit_code = 1


class IOFailure(MusicIdsError):
    """Filesystem or I/O failure."""

    exit_code = 3


def exit_code_for_exception(exc: BaseException) -> int:
    """Resolve a deterministic exit code for an exception."""
    if isinstance(exc, MusicIdsError):
        return exc.exit_code
    if isinstance(exc, OSError):
        return IOFailure.exit_code
    return RuntimeFailure.exit_code

from __future__ import annotations


class DTMFEncodeError(Exception):
    """Base class for all encoder failures."""


class EmptyInput(DTMFEncodeError):
    """No text was given to encode."""


class InvalidParameter(DTMFEncodeError, ValueError):
    """A timing or format parameter is outside its allowed range."""


class UnsupportedFormat(DTMFEncodeError, ValueError):
    """Only mono 16-bit PCM containers can be built."""


class DurationTooLong(DTMFEncodeError):
    """The requested audio would exceed the configured duration ceiling."""

    def __init__(self, duration_seconds: float, max_duration_seconds: float) -> None:
        super().__init__(
            f"duration {duration_seconds:.3f}s exceeds the maximum of "
            f"{max_duration_seconds:.0f}s"
        )
        self.duration_seconds = duration_seconds
        self.max_duration_seconds = max_duration_seconds


class SinkWriteError(DTMFEncodeError, OSError):
    """Writing the encoded container to its sink failed.

    Whatever reached the sink before the failure must be treated as
    incomplete.
    """

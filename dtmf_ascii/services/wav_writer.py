from __future__ import annotations

from typing import BinaryIO

from dtmf_ascii.errors import SinkWriteError
from dtmf_ascii.logging_utils import get_logger


logger = get_logger(__name__)


def write_wav(data: bytes, sink: BinaryIO) -> int:
    """Write a finished container to an already-open binary sink.

    The sink is flushed but not closed; its owner decides its lifetime.
    Any I/O failure is reported as SinkWriteError and is never retried.
    """
    try:
        written = sink.write(data)
        sink.flush()
    except OSError as exc:
        logger.error("Writing %d bytes to sink failed: %s", len(data), exc)
        raise SinkWriteError(f"failed to write WAV data: {exc}") from exc

    # Raw (unbuffered) sinks may accept fewer bytes than requested.
    if written is not None and written != len(data):
        logger.error("Short write to sink: %d of %d bytes", written, len(data))
        raise SinkWriteError(
            f"short write: {written} of {len(data)} bytes reached the sink"
        )
    return len(data)

from __future__ import annotations

import math
from typing import Optional, Union

from dtmf_ascii.audio import MAX_SAMPLE_RATE
from dtmf_ascii.errors import EmptyInput, InvalidParameter
from dtmf_ascii.logging_utils import get_logger
from dtmf_ascii.models.domain import EncodeRequest


logger = get_logger(__name__)


def validate_request(
    text: Optional[Union[str, bytes]],
    note_seconds: float,
    pause_seconds: float,
    sample_rate: int,
) -> EncodeRequest:
    """Check caller-supplied parameters and build an EncodeRequest.

    Missing text is an error; an empty string is allowed and produces a
    header-only file. Zero note or pause lengths only warn.
    """
    if text is None:
        raise EmptyInput("no data to encode given")

    if not math.isfinite(note_seconds):
        raise InvalidParameter(f"note length must be finite: {note_seconds}")
    if not math.isfinite(pause_seconds):
        raise InvalidParameter(f"pause length must be finite: {pause_seconds}")
    if note_seconds < 0:
        raise InvalidParameter(f"note length must not be negative: {note_seconds}")
    if pause_seconds < 0:
        raise InvalidParameter(f"pause length must not be negative: {pause_seconds}")
    if sample_rate <= 0 or sample_rate > MAX_SAMPLE_RATE:
        raise InvalidParameter(f"sample rate out of range: {sample_rate}")

    if note_seconds == 0:
        logger.warning("The note length is 0.0s!")
    if pause_seconds == 0:
        logger.warning("The pause length is 0.0s!")

    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return EncodeRequest(
        data=data,
        note_seconds=float(note_seconds),
        pause_seconds=float(pause_seconds),
        sample_rate=int(sample_rate),
    )

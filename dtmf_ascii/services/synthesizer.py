from __future__ import annotations

import math
from array import array
from typing import Dict, Sequence, Tuple, Union

from dtmf_ascii.audio import clamp_int16
from dtmf_ascii.errors import DurationTooLong
from dtmf_ascii.logging_utils import get_logger
from dtmf_ascii.tones import frequencies_for


logger = get_logger(__name__)


DEFAULT_MAX_DURATION_SECONDS = 3600.0

# Fixed scale applied to the sum of two unit cosines; peak is 2 * 10000.
TONE_SCALE = 10000


def nibbles_from_bytes(data: bytes) -> Tuple[int, ...]:
    """Split every byte into its high nibble followed by its low nibble."""
    out: list[int] = []
    for byte in data:
        out.append((byte & 0xF0) >> 4)
        out.append(byte & 0x0F)
    return tuple(out)


def nibbles_from_text(text: Union[str, bytes]) -> Tuple[int, ...]:
    if isinstance(text, str):
        text = text.encode("utf-8")
    return nibbles_from_bytes(text)


def segment_lengths(
    sample_rate: int, note_seconds: float, pause_seconds: float
) -> Tuple[int, int]:
    """Return (tone, silence) segment lengths in samples."""
    note_length = int(round(sample_rate * note_seconds))
    pause_length = int(round(sample_rate * pause_seconds))
    return note_length, pause_length


def total_duration_seconds(
    nibble_count: int, note_seconds: float, pause_seconds: float
) -> float:
    return nibble_count * note_seconds + nibble_count * pause_seconds


def check_duration(
    nibble_count: int,
    note_seconds: float,
    pause_seconds: float,
    max_duration_seconds: float = DEFAULT_MAX_DURATION_SECONDS,
) -> float:
    """Raise DurationTooLong if the encoded audio would exceed the ceiling.

    Returns the computed duration in seconds otherwise.
    """
    duration = total_duration_seconds(nibble_count, note_seconds, pause_seconds)
    if duration > max_duration_seconds:
        logger.error(
            "Requested duration %.3fs exceeds ceiling %.0fs (%d nibbles)",
            duration,
            max_duration_seconds,
            nibble_count,
        )
        raise DurationTooLong(duration, max_duration_seconds)
    return duration


def dtmf_amplitude(nibble: int, index: int, sample_rate: int) -> int:
    """Sample `index` of the dual tone for `nibble`.

    The float sum is truncated toward zero, then saturated to int16.
    """
    f1, f2 = frequencies_for(nibble)
    value = (
        math.cos((2 * math.pi * f1 * index) / sample_rate)
        + math.cos((2 * math.pi * f2 * index) / sample_rate)
    ) * TONE_SCALE
    return clamp_int16(int(value))


def tone_segment(nibble: int, note_length: int, sample_rate: int) -> array:
    return array(
        "h", (dtmf_amplitude(nibble, i, sample_rate) for i in range(note_length))
    )


def synthesize(
    nibbles: Sequence[int],
    sample_rate: int,
    note_seconds: float,
    pause_seconds: float,
    *,
    max_duration_seconds: float = DEFAULT_MAX_DURATION_SECONDS,
) -> array:
    """Render a nibble stream as int16 samples: a tone then silence per nibble.

    The duration ceiling is enforced before the buffer is allocated. The
    buffer is sized exactly once and never grows.
    """
    check_duration(len(nibbles), note_seconds, pause_seconds, max_duration_seconds)

    note_length, pause_length = segment_lengths(sample_rate, note_seconds, pause_seconds)
    stride = note_length + pause_length
    buffer = array("h", [0]) * (stride * len(nibbles))

    # The tone segment depends only on the nibble value.
    segments: Dict[int, array] = {}
    position = 0
    for nibble in nibbles:
        segment = segments.get(nibble)
        if segment is None:
            segment = tone_segment(nibble, note_length, sample_rate)
            segments[nibble] = segment
        buffer[position : position + note_length] = segment
        # Silence is already zero from allocation.
        position += stride

    logger.debug(
        "Synthesized %d nibbles into %d samples (%d distinct tones)",
        len(nibbles),
        len(buffer),
        len(segments),
    )
    return buffer

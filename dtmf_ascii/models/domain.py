from __future__ import annotations

from array import array
from dataclasses import dataclass
from typing import Tuple

from dtmf_ascii.audio import WavHeader


@dataclass(frozen=True)
class EncodeRequest:
    """Validated input for one encode: the bytes to send and their timing."""

    data: bytes
    note_seconds: float
    pause_seconds: float
    sample_rate: int

    @property
    def char_count(self) -> int:
        return len(self.data)

    @property
    def nibble_count(self) -> int:
        return 2 * len(self.data)


@dataclass(frozen=True)
class EncodePlan:
    """Sizes derived from a request before any sample is synthesized."""

    nibbles: Tuple[int, ...]
    note_length: int
    pause_length: int
    duration_seconds: float
    header: WavHeader

    @property
    def sample_count(self) -> int:
        return len(self.nibbles) * (self.note_length + self.pause_length)


@dataclass
class EncodeResult:
    """Output of a completed encode."""

    request: EncodeRequest
    plan: EncodePlan
    samples: array
    wav: bytes

    @property
    def header(self) -> WavHeader:
        return self.plan.header

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from dtmf_ascii.audio import MAX_SAMPLE_RATE
from dtmf_ascii.config import settings


class EncodeRequestBody(BaseModel):
    """Request body for encoding text as a DTMF WAV file."""

    text: str = Field(..., description="Text to encode; sent as UTF-8 bytes")
    note_ms: int = Field(
        settings.default_note_ms, ge=0, description="Length of each beep in ms"
    )
    pause_ms: int = Field(
        settings.default_pause_ms, ge=0, description="Silence after each beep in ms"
    )
    sample_rate_hz: int = Field(
        settings.default_sample_rate,
        gt=0,
        le=MAX_SAMPLE_RATE,
        description="Output sample rate",
    )


class EncodePlanResponse(BaseModel):
    nibbles: List[int]
    symbols: str
    note_samples: int
    pause_samples: int
    total_samples: int
    duration_seconds: float
    data_length: int
    file_length: int


class Tone(BaseModel):
    nibble: int
    symbol: str
    low_hz: int
    high_hz: int


class TonesResponse(BaseModel):
    tones: List[Tone]


class HealthResponse(BaseModel):
    status: Literal["ok"]


class ErrorResponse(BaseModel):
    detail: str

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    """Application configuration loaded from environment.

    Holds the encoder defaults used by the CLI and HTTP layers. The core
    synthesizer never reads this directly; callers pass values in.
    """
    default_note_ms: int = int(os.getenv("DTMF_NOTE_MS", "300"))
    default_pause_ms: int = int(os.getenv("DTMF_PAUSE_MS", "100"))
    default_sample_rate: int = int(os.getenv("DTMF_SAMPLE_RATE", "8000"))
    default_output: str = os.getenv("DTMF_OUTPUT", "dtmf_output.wav")

    # Upper bound on the audio length of a single encode, checked before
    # the sample buffer is allocated.
    max_duration_seconds: float = float(
        os.getenv("DTMF_MAX_DURATION_SECONDS", "3600")
    )

    log_level: str = os.getenv("DTMF_LOG_LEVEL", "INFO").upper()

    @property
    def default_note_seconds(self) -> float:
        return self.default_note_ms / 1000.0

    @property
    def default_pause_seconds(self) -> float:
        return self.default_pause_ms / 1000.0


settings = AppConfig()

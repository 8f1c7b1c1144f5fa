from __future__ import annotations

from functools import lru_cache

from dtmf_ascii.config import settings
from dtmf_ascii.services import DTMFEncoderService


@lru_cache(maxsize=1)
def get_encoder_service() -> DTMFEncoderService:
    return DTMFEncoderService(max_duration_seconds=settings.max_duration_seconds)

from .api import (
    EncodeRequestBody,
    EncodePlanResponse,
    Tone,
    TonesResponse,
    HealthResponse,
    ErrorResponse,
)
from .domain import EncodePlan, EncodeRequest, EncodeResult

__all__ = [
    "EncodeRequestBody",
    "EncodePlanResponse",
    "Tone",
    "TonesResponse",
    "HealthResponse",
    "ErrorResponse",
    "EncodePlan",
    "EncodeRequest",
    "EncodeResult",
]

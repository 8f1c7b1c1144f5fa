from __future__ import annotations

import asyncio

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from dtmf_ascii import metrics as app_metrics
from dtmf_ascii.container import get_encoder_service
from dtmf_ascii.errors import DurationTooLong, InvalidParameter
from dtmf_ascii.logging_utils import get_logger
from dtmf_ascii.models import (
    EncodePlanResponse,
    EncodeRequest,
    EncodeRequestBody,
    ErrorResponse,
    HealthResponse,
    Tone,
    TonesResponse,
)
from dtmf_ascii.services import validate_request
from dtmf_ascii.tones import TONE_TABLE, symbol_for


logger = get_logger(__name__)
router = APIRouter()


def _to_request(body: EncodeRequestBody) -> EncodeRequest:
    try:
        return validate_request(
            body.text,
            note_seconds=body.note_ms / 1000.0,
            pause_seconds=body.pause_ms / 1000.0,
            sample_rate=body.sample_rate_hz,
        )
    except InvalidParameter as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/healthz", response_model=HealthResponse)
async def healthz() -> HealthResponse:
    return HealthResponse(status="ok")


@router.get("/v1/tones", response_model=TonesResponse)
async def list_tones() -> TonesResponse:
    tones = []
    for nibble, (high_hz, low_hz) in sorted(TONE_TABLE.items()):
        tones.append(
            Tone(
                nibble=nibble,
                symbol=symbol_for(nibble),
                low_hz=low_hz,
                high_hz=high_hz,
            )
        )
    return TonesResponse(tones=tones)


@router.post(
    "/v1/dtmf/plan",
    response_model=EncodePlanResponse,
    responses={400: {"model": ErrorResponse}},
)
async def plan_encode(body: EncodeRequestBody) -> EncodePlanResponse:
    request = _to_request(body)
    try:
        plan = get_encoder_service().plan(request)
    except DurationTooLong as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return EncodePlanResponse(
        nibbles=list(plan.nibbles),
        symbols="".join(symbol_for(n) for n in plan.nibbles),
        note_samples=plan.note_length,
        pause_samples=plan.pause_length,
        total_samples=plan.sample_count,
        duration_seconds=plan.duration_seconds,
        data_length=plan.header.data_length,
        file_length=plan.header.file_length,
    )


@router.post(
    "/v1/dtmf/encode",
    response_class=Response,
    responses={
        200: {"content": {"audio/wav": {}}},
        400: {"model": ErrorResponse},
    },
)
async def encode(body: EncodeRequestBody) -> Response:
    request = _to_request(body)
    service = get_encoder_service()
    try:
        # CPU-bound synthesis runs off the event loop.
        result = await asyncio.to_thread(service.encode, request)
    except DurationTooLong as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    app_metrics.record_bytes_written("http", len(result.wav))
    return Response(
        content=result.wav,
        media_type="audio/wav",
        headers={"Content-Disposition": 'attachment; filename="dtmf_output.wav"'},
    )


@router.get("/metrics")
async def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

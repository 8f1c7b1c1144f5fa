from __future__ import annotations

from typing import BinaryIO

from dtmf_ascii import metrics as app_metrics
from dtmf_ascii.audio import WavHeader, build_wav
from dtmf_ascii.config import settings
from dtmf_ascii.errors import DurationTooLong, SinkWriteError
from dtmf_ascii.logging_utils import get_logger
from dtmf_ascii.models.domain import EncodePlan, EncodeRequest, EncodeResult
from dtmf_ascii.services.synthesizer import (
    check_duration,
    nibbles_from_bytes,
    segment_lengths,
    synthesize,
)
from dtmf_ascii.services.wav_writer import write_wav


logger = get_logger(__name__)


class DTMFEncoderService:
    """Runs the text -> nibbles -> samples -> WAV pipeline.

    Holds no per-request state; one instance can serve any number of
    concurrent callers.
    """

    def __init__(self, max_duration_seconds: float | None = None) -> None:
        self._max_duration_seconds = (
            settings.max_duration_seconds
            if max_duration_seconds is None
            else max_duration_seconds
        )

    @property
    def max_duration_seconds(self) -> float:
        return self._max_duration_seconds

    def plan(self, request: EncodeRequest) -> EncodePlan:
        nibbles = nibbles_from_bytes(request.data)
        try:
            duration = check_duration(
                len(nibbles),
                request.note_seconds,
                request.pause_seconds,
                self._max_duration_seconds,
            )
        except DurationTooLong:
            app_metrics.record_encode_rejected()
            raise

        note_length, pause_length = segment_lengths(
            request.sample_rate, request.note_seconds, request.pause_seconds
        )
        header = WavHeader.for_samples(
            sample_count=len(nibbles) * (note_length + pause_length),
            sample_rate=request.sample_rate,
        )
        return EncodePlan(
            nibbles=nibbles,
            note_length=note_length,
            pause_length=pause_length,
            duration_seconds=duration,
            header=header,
        )

    def encode(self, request: EncodeRequest) -> EncodeResult:
        plan = self.plan(request)
        logger.info(
            "[START] encode chars=%d beeps=%d rate=%dHz note=%.3fs pause=%.3fs "
            "duration=%.3fs",
            request.char_count,
            len(plan.nibbles),
            request.sample_rate,
            request.note_seconds,
            request.pause_seconds,
            plan.duration_seconds,
        )

        try:
            samples = synthesize(
                plan.nibbles,
                request.sample_rate,
                request.note_seconds,
                request.pause_seconds,
                max_duration_seconds=self._max_duration_seconds,
            )
            wav = build_wav(samples, request.sample_rate)
        except Exception:
            app_metrics.record_encode_failed()
            logger.exception("Encoding failed for %d nibbles", len(plan.nibbles))
            raise

        app_metrics.record_encode_succeeded(
            nibble_count=len(plan.nibbles),
            sample_count=len(samples),
            duration_seconds=plan.duration_seconds,
        )
        logger.info(
            "[DONE] encode samples=%d bytes=%d", len(samples), len(wav)
        )
        return EncodeResult(request=request, plan=plan, samples=samples, wav=wav)

    def encode_to_sink(
        self, request: EncodeRequest, sink: BinaryIO, *, sink_kind: str = "stream"
    ) -> EncodeResult:
        """Encode fully, then write the container to `sink`.

        Nothing is written when encoding fails.
        """
        result = self.encode(request)
        try:
            written = write_wav(result.wav, sink)
        except SinkWriteError:
            app_metrics.record_encode_failed()
            raise
        app_metrics.record_bytes_written(sink_kind, written)
        return result

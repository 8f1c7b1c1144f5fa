from __future__ import annotations

from prometheus_client import Counter, Gauge


DTMF_ENCODES_TOTAL = Counter(
    "dtmf_encodes_total",
    "Total encode operations by outcome.",
    ["status"],
)

DTMF_NIBBLES_TOTAL = Counter(
    "dtmf_nibbles_total",
    "Total number of nibbles rendered as DTMF tones.",
)

DTMF_SAMPLES_TOTAL = Counter(
    "dtmf_samples_total",
    "Total number of PCM samples synthesized.",
)

DTMF_BYTES_WRITTEN_TOTAL = Counter(
    "dtmf_bytes_written_total",
    "Total number of WAV bytes handed to a sink.",
    ["sink"],
)

DTMF_LAST_AUDIO_DURATION_SECONDS = Gauge(
    "dtmf_last_audio_duration_seconds",
    "Audio duration of the most recently completed encode.",
)


def record_encode_succeeded(
    nibble_count: int, sample_count: int, duration_seconds: float
) -> None:
    DTMF_ENCODES_TOTAL.labels(status="succeeded").inc()
    DTMF_NIBBLES_TOTAL.inc(nibble_count)
    DTMF_SAMPLES_TOTAL.inc(sample_count)
    DTMF_LAST_AUDIO_DURATION_SECONDS.set(duration_seconds)


def record_encode_rejected() -> None:
    """Record an encode refused before synthesis (e.g. duration ceiling)."""
    DTMF_ENCODES_TOTAL.labels(status="rejected").inc()


def record_encode_failed() -> None:
    DTMF_ENCODES_TOTAL.labels(status="failed").inc()


def record_bytes_written(sink: str, num_bytes: int) -> None:
    DTMF_BYTES_WRITTEN_TOTAL.labels(sink=sink).inc(num_bytes)

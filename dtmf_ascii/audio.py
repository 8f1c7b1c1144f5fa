from __future__ import annotations

import struct
import sys
from array import array
from dataclasses import dataclass
from typing import Iterable

from dtmf_ascii.errors import UnsupportedFormat


WAV_HEADER_FORMAT = "<4sI4s4sIHHIIHH4sI"
WAV_HEADER_SIZE = struct.calcsize(WAV_HEADER_FORMAT)  # 44

PCM_FORMAT_TAG = 1
FMT_CHUNK_SIZE = 16

INT16_MIN = -32768
INT16_MAX = 32767

# Rates above 16 bits would let the duration ceiling admit buffers of
# many gigabytes.
MAX_SAMPLE_RATE = 65535


def clamp_int16(value: int) -> int:
    return max(INT16_MIN, min(INT16_MAX, value))


@dataclass(frozen=True)
class WavHeader:
    """The fixed 44-byte RIFF/WAVE header for a PCM data chunk."""

    file_length: int
    sample_rate: int
    bytes_per_sec: int
    data_length: int
    num_channels: int = 1
    bytes_per_sample: int = 2
    bits_per_sample: int = 16
    chunk_size: int = FMT_CHUNK_SIZE
    format_tag: int = PCM_FORMAT_TAG
    riff: bytes = b"RIFF"
    wave: bytes = b"WAVE"
    fmt: bytes = b"fmt "
    data: bytes = b"data"

    @classmethod
    def for_samples(
        cls,
        sample_count: int,
        sample_rate: int,
        num_channels: int = 1,
        bits_per_sample: int = 16,
    ) -> "WavHeader":
        if num_channels != 1 or bits_per_sample != 16:
            raise UnsupportedFormat(
                f"only mono 16-bit PCM is supported "
                f"(got channels={num_channels}, bits={bits_per_sample})"
            )
        bytes_per_sample = bits_per_sample // 8 * num_channels
        data_length = sample_count * bytes_per_sample
        return cls(
            file_length=data_length + WAV_HEADER_SIZE,
            sample_rate=sample_rate,
            bytes_per_sec=sample_rate * bytes_per_sample,
            data_length=data_length,
            num_channels=num_channels,
            bytes_per_sample=bytes_per_sample,
            bits_per_sample=bits_per_sample,
        )

    def pack(self) -> bytes:
        return struct.pack(
            WAV_HEADER_FORMAT,
            self.riff,
            self.file_length,
            self.wave,
            self.fmt,
            self.chunk_size,
            self.format_tag,
            self.num_channels,
            self.sample_rate,
            self.bytes_per_sec,
            self.bytes_per_sample,
            self.bits_per_sample,
            self.data,
            self.data_length,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "WavHeader":
        if len(data) < WAV_HEADER_SIZE:
            raise ValueError(
                f"need {WAV_HEADER_SIZE} bytes for a WAV header, got {len(data)}"
            )
        (
            riff,
            file_length,
            wave,
            fmt,
            chunk_size,
            format_tag,
            num_channels,
            sample_rate,
            bytes_per_sec,
            bytes_per_sample,
            bits_per_sample,
            data_marker,
            data_length,
        ) = struct.unpack(WAV_HEADER_FORMAT, data[:WAV_HEADER_SIZE])
        return cls(
            file_length=file_length,
            sample_rate=sample_rate,
            bytes_per_sec=bytes_per_sec,
            data_length=data_length,
            num_channels=num_channels,
            bytes_per_sample=bytes_per_sample,
            bits_per_sample=bits_per_sample,
            chunk_size=chunk_size,
            format_tag=format_tag,
            riff=riff,
            wave=wave,
            fmt=fmt,
            data=data_marker,
        )

    def describe(self) -> str:
        """Render the header fields as an aligned two-column table."""
        rows = [
            ("riff", self.riff.decode("ascii")),
            ("file length", self.file_length),
            ("wave", self.wave.decode("ascii")),
            ("fmt", self.fmt.decode("ascii")),
            ("chunk size", self.chunk_size),
            ("format tag", self.format_tag),
            ("num of channels", self.num_channels),
            ("sample rate", self.sample_rate),
            ("bytes per sec", self.bytes_per_sec),
            ("bytes per sample", self.bytes_per_sample),
            ("bits per sample", self.bits_per_sample),
            ("data", self.data.decode("ascii")),
            ("data length", self.data_length),
        ]
        width = max(len(label) for label, _ in rows)
        return "\n".join(f"{label:>{width}}: {value}" for label, value in rows)


def pcm16le_from_samples(samples: Iterable[int]) -> bytes:
    # Signed 16-bit little-endian PCM, independent of host byte order
    if isinstance(samples, array) and samples.typecode == "h":
        buf = array("h", samples) if sys.byteorder == "big" else samples
    else:
        buf = array("h", (clamp_int16(int(s)) for s in samples))
    if sys.byteorder == "big":
        buf.byteswap()
    return buf.tobytes()


def build_wav(
    samples: Iterable[int],
    sample_rate: int,
    num_channels: int = 1,
    bits_per_sample: int = 16,
) -> bytes:
    pcm = pcm16le_from_samples(samples)
    header = WavHeader.for_samples(
        sample_count=len(pcm) // 2,
        sample_rate=sample_rate,
        num_channels=num_channels,
        bits_per_sample=bits_per_sample,
    )
    return header.pack() + pcm

from __future__ import annotations

import io
import struct
import wave
from array import array

import pytest

from dtmf_ascii.audio import (
    WAV_HEADER_SIZE,
    WavHeader,
    build_wav,
    pcm16le_from_samples,
)
from dtmf_ascii.errors import UnsupportedFormat


def test_header_size_is_44_bytes() -> None:
    assert WAV_HEADER_SIZE == 44
    assert len(WavHeader.for_samples(0, 8000).pack()) == 44


def test_header_fields_for_single_char_scenario() -> None:
    header = WavHeader.for_samples(sample_count=2400, sample_rate=8000)

    assert header.data_length == 4800
    assert header.file_length == 4844
    assert header.bytes_per_sec == 16000
    assert header.bytes_per_sample == 2
    assert header.bits_per_sample == 16
    assert header.num_channels == 1


def test_empty_header_is_byte_exact() -> None:
    expected = (
        b"RIFF"
        + (44).to_bytes(4, "little")
        + b"WAVE"
        + b"fmt "
        + (16).to_bytes(4, "little")
        + (1).to_bytes(2, "little")
        + (1).to_bytes(2, "little")
        + (8000).to_bytes(4, "little")
        + (16000).to_bytes(4, "little")
        + (2).to_bytes(2, "little")
        + (16).to_bytes(2, "little")
        + b"data"
        + (0).to_bytes(4, "little")
    )

    assert build_wav([], 8000) == expected


@pytest.mark.parametrize("sample_count", [0, 1, 2, 999, 2400])
def test_header_length_fields_are_consistent(sample_count: int) -> None:
    wav = build_wav(array("h", [0]) * sample_count, 22050)
    header = WavHeader.unpack(wav)

    assert len(wav) == 44 + 2 * sample_count
    assert header.data_length == 2 * sample_count
    assert header.file_length == header.data_length + 44
    assert header.bytes_per_sec == 22050 * 2


def test_samples_are_little_endian_signed() -> None:
    wav = build_wav([1, -2, 0x1234], 8000)

    assert wav[44:] == b"\x01\x00\xfe\xff\x34\x12"


def test_pcm_conversion_saturates_out_of_range_values() -> None:
    pcm = pcm16le_from_samples([40000, -40000, 32767, -32768])

    assert struct.unpack("<4h", pcm) == (32767, -32768, 32767, -32768)


def test_pcm_conversion_does_not_modify_input_array() -> None:
    samples = array("h", [1, 2, 3])
    pcm16le_from_samples(samples)

    assert list(samples) == [1, 2, 3]


def test_unpack_round_trips_header() -> None:
    header = WavHeader.for_samples(123, 44100)

    assert WavHeader.unpack(header.pack()) == header


def test_unpack_rejects_short_input() -> None:
    with pytest.raises(ValueError):
        WavHeader.unpack(b"RIFF")


@pytest.mark.parametrize("channels,bits", [(2, 16), (1, 8), (1, 24)])
def test_only_mono_16_bit_is_supported(channels: int, bits: int) -> None:
    with pytest.raises(UnsupportedFormat):
        build_wav([0], 8000, num_channels=channels, bits_per_sample=bits)


def test_stdlib_wave_reader_accepts_output() -> None:
    samples = array("h", range(-500, 500))
    wav = build_wav(samples, 8000)

    with wave.open(io.BytesIO(wav), "rb") as wf:
        assert wf.getnchannels() == 1
        assert wf.getframerate() == 8000
        assert wf.getsampwidth() == 2
        assert wf.getnframes() == len(samples)
        frames = wf.readframes(wf.getnframes())

    assert frames == wav[44:]


def test_describe_lists_every_field() -> None:
    text = WavHeader.for_samples(2400, 8000).describe()

    assert "riff: RIFF" in text
    assert "file length: 4844" in text
    assert "bytes per sec: 16000" in text
    assert "data length: 4800" in text
    assert len(text.splitlines()) == 13

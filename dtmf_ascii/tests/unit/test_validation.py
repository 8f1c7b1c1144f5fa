from __future__ import annotations

import logging
import math

import pytest

from dtmf_ascii.errors import EmptyInput, InvalidParameter
from dtmf_ascii.services.validation import validate_request


def test_missing_text_is_rejected() -> None:
    with pytest.raises(EmptyInput):
        validate_request(None, 0.3, 0.1, 8000)


def test_empty_text_is_allowed() -> None:
    request = validate_request("", 0.3, 0.1, 8000)

    assert request.data == b""
    assert request.nibble_count == 0


def test_text_is_encoded_as_utf8() -> None:
    request = validate_request("Aé", 0.3, 0.1, 8000)

    assert request.data == b"A\xc3\xa9"
    assert request.char_count == 3
    assert request.nibble_count == 6


def test_bytes_are_used_verbatim() -> None:
    assert validate_request(b"\x00\xff", 0.3, 0.1, 8000).data == b"\x00\xff"


@pytest.mark.parametrize(
    "note,pause,rate",
    [(-0.1, 0.1, 8000), (0.1, -0.1, 8000), (0.1, 0.1, 0), (0.1, 0.1, -8000)],
)
def test_out_of_range_parameters_are_rejected(
    note: float, pause: float, rate: int
) -> None:
    with pytest.raises(InvalidParameter):
        validate_request("A", note, pause, rate)


def test_invalid_parameter_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_request("A", 0.1, 0.1, 2**32)


def test_zero_lengths_warn_but_pass(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        request = validate_request("A", 0.0, 0.0, 8000)

    assert request.note_seconds == 0.0
    messages = [record.getMessage() for record in caplog.records]
    assert any("note length is 0.0s" in msg for msg in messages)
    assert any("pause length is 0.0s" in msg for msg in messages)


@pytest.mark.parametrize(
    "note,pause",
    [
        (math.nan, 0.1),
        (0.1, math.nan),
        (math.inf, 0.1),
        (0.1, math.inf),
        (-math.inf, 0.1),
    ],
)
def test_non_finite_lengths_are_rejected(note: float, pause: float) -> None:
    with pytest.raises(InvalidParameter) as exc_info:
        validate_request("A", note, pause, 8000)

    assert "finite" in str(exc_info.value)


@pytest.mark.parametrize("rate", [65536, 192000, 2_000_000_000])
def test_sample_rate_is_limited_to_16_bits(rate: int) -> None:
    with pytest.raises(InvalidParameter):
        validate_request("A", 1.0, 0.1, rate)


def test_highest_16_bit_sample_rate_is_accepted() -> None:
    assert validate_request("A", 0.1, 0.1, 65535).sample_rate == 65535

from __future__ import annotations

import pytest

from dtmf_ascii.tones import (
    COLUMN_FREQUENCIES_HZ,
    ROW_FREQUENCIES_HZ,
    TONE_TABLE,
    frequencies_for,
    symbol_for,
)


EXPECTED_PAIRS = [
    (1336, 941),
    (1209, 697),
    (1336, 697),
    (1477, 697),
    (1209, 770),
    (1336, 770),
    (1477, 770),
    (1209, 852),
    (1336, 852),
    (1477, 852),
    (1633, 697),
    (1633, 770),
    (1633, 852),
    (1633, 941),
    (1209, 941),
    (1477, 941),
]


def test_tone_table_covers_every_nibble_exactly_once() -> None:
    assert sorted(TONE_TABLE) == list(range(16))
    assert len(set(TONE_TABLE.values())) == 16


@pytest.mark.parametrize("nibble,pair", list(enumerate(EXPECTED_PAIRS)))
def test_frequencies_for_returns_documented_pair(nibble: int, pair: tuple) -> None:
    assert frequencies_for(nibble) == pair


def test_every_pair_has_one_row_and_one_column_frequency() -> None:
    for column_hz, row_hz in TONE_TABLE.values():
        assert column_hz in COLUMN_FREQUENCIES_HZ
        assert row_hz in ROW_FREQUENCIES_HZ


def test_hash_key_pair_is_used_for_f() -> None:
    # E and F reuse the '*' and '#' keys rather than keypad positions.
    assert frequencies_for(0xE) == (1209, 941)
    assert frequencies_for(0xF) == (1477, 941)


def test_tone_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        TONE_TABLE[0] = (1, 2)  # type: ignore[index]


@pytest.mark.parametrize("nibble", [-1, 16, 255])
def test_frequencies_for_rejects_out_of_range(nibble: int) -> None:
    with pytest.raises(ValueError):
        frequencies_for(nibble)


def test_symbol_for_uses_uppercase_hex() -> None:
    assert [symbol_for(n) for n in range(16)] == list("0123456789ABCDEF")

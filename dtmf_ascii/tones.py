"""DTMF frequency pairs used to encode one hex nibble each.

Rows are 697/770/852/941 Hz and columns 1209/1336/1477/1633 Hz. The
table follows keypad order for 0-9 and A-D, then uses the ``*`` key for
E and the ``#`` key for F. Output compatibility depends on this exact
ordering, so it must not be rearranged into the telephone layout.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple


ROW_FREQUENCIES_HZ: Tuple[int, ...] = (697, 770, 852, 941)
COLUMN_FREQUENCIES_HZ: Tuple[int, ...] = (1209, 1336, 1477, 1633)

# nibble -> (column_hz, row_hz)
TONE_TABLE: Mapping[int, Tuple[int, int]] = MappingProxyType(
    {
        0x0: (1336, 941),
        0x1: (1209, 697),
        0x2: (1336, 697),
        0x3: (1477, 697),
        0x4: (1209, 770),
        0x5: (1336, 770),
        0x6: (1477, 770),
        0x7: (1209, 852),
        0x8: (1336, 852),
        0x9: (1477, 852),
        0xA: (1633, 697),
        0xB: (1633, 770),
        0xC: (1633, 852),
        0xD: (1633, 941),
        0xE: (1209, 941),  # '*' key
        0xF: (1477, 941),  # '#' key
    }
)


def frequencies_for(nibble: int) -> Tuple[int, int]:
    """Return the frequency pair for a 4-bit value."""
    try:
        return TONE_TABLE[nibble]
    except KeyError:
        raise ValueError(f"nibble out of range: {nibble!r}") from None


def symbol_for(nibble: int) -> str:
    frequencies_for(nibble)
    return format(nibble, "X")

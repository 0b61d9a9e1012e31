"""Checksum and test-site grid layout helpers for the tester main window."""

from __future__ import annotations

from typing import NamedTuple

_MASK32 = 0xFFFFFFFF
_MPEG2_POLY = 0x04C11DB7

MIN_SITE_HEIGHT = 60
MAX_SITE_HEIGHT = 240
SITE_CELL_SIZE = 200
SITE_CELL_GAP = 5


class SitePlacement(NamedTuple):
    """A test site's number and its cell in the grid."""

    number: int
    row: int
    col: int


def crc32_mpeg2(data: bytes) -> int:
    """CRC-32/MPEG-2: MSB first, initial value 0xFFFFFFFF, no final inversion."""
    crc = _MASK32
    for byte in data:
        crc ^= byte << 24
        for _ in range(8):
            if crc & 0x80000000:
                crc = ((crc << 1) ^ _MPEG2_POLY) & _MASK32
            else:
                crc = (crc << 1) & _MASK32
    return crc


def site_height(available_height: int, site_count: int) -> int:
    """Fixed height of one test site widget for a screen of ``available_height``."""
    base = int((available_height - 300) / 10)
    if site_count <= 8:
        height = base * 4
    elif site_count <= 16:
        height = base * 3
    elif site_count <= 32:
        height = base * 2
    else:
        height = base
    return max(MIN_SITE_HEIGHT, min(height, MAX_SITE_HEIGHT))


def site_layout(rows: int, cols: int, direction: int = 0) -> list[SitePlacement]:
    """Place ``rows * cols`` sites row by row.

    Direction 0 numbers the sites upwards from 1, direction 1 numbers them
    downwards from the total; any other direction places nothing.
    """
    count = rows * cols
    if direction == 0:
        numbers = range(1, count + 1)
    elif direction == 1:
        numbers = range(count, 0, -1)
    else:
        return []
    return [
        SitePlacement(number, *divmod(position, cols))
        for position, number in enumerate(numbers)
    ]


def scroll_content_size(rows: int, cols: int) -> tuple[int, int]:
    """Minimum (width, height) of the scroll area content for the grid."""
    width = cols * SITE_CELL_SIZE + (cols - 1) * SITE_CELL_GAP
    height = rows * SITE_CELL_SIZE + (rows - 1) * SITE_CELL_GAP
    return width, height
"""Algorithm ranges, socket/BPU bit masks and small conversion helpers."""

from __future__ import annotations

import math
import random
import re
from typing import NamedTuple, Optional

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1

_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)\s*")
_DEC_NUMBER = re.compile(r"\s*([+-]?)([0-9]+)\s*")
_CHINESE = re.compile("[\u4e00-\u9fa5]")

SOFT_TO_AUTO_MAPPING = {
    1: 9, 2: 13, 3: 10, 4: 14,
    5: 11, 6: 15, 7: 12, 8: 16,
    9: 1, 10: 5, 11: 2, 12: 6,
    13: 3, 14: 7, 15: 4, 16: 8,
}
"""Site index on the device (soft) to site index of the automatic handler."""

AUTO_TO_SOFT_MAPPING = {
    1: 9, 2: 11, 3: 13, 4: 15,
    5: 10, 6: 12, 7: 14, 8: 16,
    9: 1, 10: 3, 11: 5, 12: 7,
    13: 2, 14: 4, 15: 6, 16: 8,
}
"""Site index of the automatic handler to site index on the device (soft)."""

INVALID_PERCENTAGE = "Invalid operation"


class Rect(NamedTuple):
    """A rectangle given by its corner and size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


def _to_int(text: str, base: int) -> Optional[int]:
    """Parse a 32-bit signed integer; None if the text is not one."""
    pattern = _HEX_NUMBER if base == 16 else _DEC_NUMBER
    match = pattern.fullmatch(text)
    if match is None:
        return None
    value = int(match.group(2), base)
    if match.group(1) == "-":
        value = -value
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def parse_interval(algo_range: str) -> tuple[int, int]:
    """Split ``"start-end"`` (hex) into its bounds.

    Unparsable bounds count as 0; text without a ``-`` raises ValueError.
    """
    parts = algo_range.split("-")
    if len(parts) < 2:
        raise ValueError(f"not an interval: {algo_range!r}")
    start = _to_int(parts[0], 16) or 0
    end = _to_int(parts[-1], 16) or 0
    return start, end


def check_algo_range(algo: int, algo_range: str) -> bool:
    """Whether ``algo`` lies in a comma-separated list of hex values and ranges."""
    if not algo_range:
        return False
    ranges: list[tuple[int, int]] = []
    for item in algo_range.split(","):
        if "-" in item:
            ranges.append(parse_interval(item))
        else:
            value = _to_int(item, 16)
            if value is not None:
                ranges.append((value, value))
    return any(low <= algo <= high for low, high in ranges)


def byte_sum(data: bytes) -> int:
    """Sum of all bytes."""
    return sum(data)


def to_hex_ascii(text: str) -> str:
    """Lower-case hex of the Latin-1 bytes of ``text``; other characters become '?'."""
    return text.encode("latin-1", errors="replace").hex()


def random_string(length: int) -> str:
    """A string of ``length`` random characters with code points below 255."""
    return "".join(chr(random.randrange(255)) for _ in range(max(length, 0)))


def contains_chinese(text: str) -> bool:
    """Whether ``text`` holds a CJK unified ideograph (U+4E00..U+9FA5)."""
    return _CHINESE.search(text) is not None


def log_source(dev_id: int) -> str:
    """Name of a device in log lines: ``B0``..``B7`` for BPUs, ``MU`` for 8."""
    return "MU" if dev_id == 8 else f"B{dev_id}"


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def calculate_percentage(part: float, whole: float) -> str:
    """``part / whole`` as a percentage with two decimals, e.g. ``"12.50%"``."""
    if whole == 0:
        return INVALID_PERCENTAGE
    percentage = part / whole * 100.0
    percentage = _round_half_away(percentage * 100.0) / 100.0
    return f"{percentage:.2f}%"


def bpu_enable(skt_en: int) -> int:
    """BPU mask: bit i is set when either socket bit 2i or 2i+1 is set."""
    skt_en &= 0xFFFFFFFF
    mask = 0
    for index in range(8):
        if skt_en & 0x03:
            mask |= 1 << index
        skt_en >>= 2
    return mask


def bpu_count(skt_en: int) -> int:
    """Number of BPUs in use for the socket mask."""
    return bin(bpu_enable(skt_en)).count("1")


def bpu_index(skt_en: int) -> int:
    """Index of the first BPU in use, or 0 when none is."""
    mask = bpu_enable(skt_en)
    return next((i for i in range(8) if mask & (1 << i)), 0)


def _swap_sites(enable: int, skt_num: int, mapping: dict[int, int]) -> int:
    if skt_num > len(mapping):
        raise ValueError(f"at most {len(mapping)} sockets can be mapped, got {skt_num}")
    result = 0
    for index in range(skt_num):
        if enable & 0x1:
            result |= 1 << (mapping[index + 1] - 1)
        enable >>= 1
    return result


def soft_to_auto(soft_enable: int, skt_num: int) -> int:
    """Translate a device socket-enable mask into handler site order."""
    return _swap_sites(soft_enable, skt_num, SOFT_TO_AUTO_MAPPING)


def auto_to_soft(auto_enable: int, skt_num: int) -> int:
    """Translate a handler site-enable mask into device socket order."""
    return _swap_sites(auto_enable, skt_num, AUTO_TO_SOFT_MAPPING)


def string_to_rect(text: Optional[str]) -> Rect:
    """Parse ``"x,y,w,h"``; anything else gives an empty rectangle."""
    if text is None:
        return Rect()
    parts = text.split(",")
    if len(parts) != 4:
        return Rect()
    return Rect(*((_to_int(part, 10) or 0) for part in parts))


def hex_string_to_int(text: str) -> int:
    """Hex value starting at the last ``0x`` in ``text`` (or the whole text); 0 if invalid."""
    position = text.rfind("0x")
    if position != -1:
        text = text[position:]
    return _to_int(text, 16) or 0
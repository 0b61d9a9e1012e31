"""CRC-16 (CCITT, MSB-first) and table-driven CRC-32 checksums."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF
_CRC16_POLY = 0x1021
_CRC32_POLY = 0x04C11DB7


def _msb_first_table(poly: int, width: int) -> tuple[int, ...]:
    top = 1 << (width - 1)
    mask = (1 << width) - 1
    table = []
    for index in range(256):
        reg = index << (width - 8)
        for _ in range(8):
            reg = ((reg << 1) ^ poly) if reg & top else (reg << 1)
        table.append(reg & mask)
    return tuple(table)


CRC16_TABLE = _msb_first_table(_CRC16_POLY, 16)
CRC32_TABLE = _msb_first_table(_CRC32_POLY, 32)


def reflect_bits(value: int, width: int) -> int:
    """Reverse the order of the lowest ``width`` bits of ``value``."""
    result = 0
    for _ in range(width):
        result = (result << 1) | (value & 1)
        value >>= 1
    return result


def crc16_ccitt(data: bytes, crc: int = 0) -> int:
    """Continue a CRC-16 (polynomial 0x1021) from ``crc`` over ``data``."""
    crc &= 0xFFFF
    for byte in data:
        index = ((crc >> 8) ^ byte) & 0xFF
        crc = ((crc << 8) ^ CRC16_TABLE[index]) & 0xFFFF
    return crc


def _shift_in(register: int, byte: int) -> int:
    return (((register << 8) | byte) ^ CRC32_TABLE[(register >> 24) & 0xFF]) & _MASK32


def _finish(register: int, length: int) -> int:
    """Feed the four augmentation zero bytes and produce the final CRC."""
    for _ in range(4):
        register = _shift_in(register, 0)
        length += 1
        if length == 4:
            register ^= _MASK32
    return reflect_bits(register, 32) ^ _MASK32


def crc32_reflected(data: bytes) -> int:
    """CRC-32 computed with the augmented direct-table method over ``data``."""
    acc = Crc32Accumulator()
    acc.update(data)
    return acc.digest()


@dataclass
class Crc32Accumulator:
    """Incremental CRC-32 over data fed in several pieces."""

    register: int = 0
    length: int = 0

    def update(self, data: bytes) -> None:
        """Feed more bytes into the checksum."""
        for byte in data:
            self.register = _shift_in(self.register, reflect_bits(byte, 8))
            self.length += 1
            if self.length == 4:
                self.register ^= _MASK32

    def digest(self) -> int:
        """Return the CRC of everything fed so far without changing state."""
        return _finish(self.register, self.length)
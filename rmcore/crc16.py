"""CRC-16 with the reflected CCITT polynomial, as used on the controller link."""

from __future__ import annotations

CRC16_INIT = 0xFFFF
_POLY_REFLECTED = 0x8408


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ _POLY_REFLECTED if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def crc16_calc(data: bytes, crc: int = CRC16_INIT) -> int:
    """Continue a CRC-16 over data, starting from crc."""
    for byte in data:
        crc = (crc >> 8) ^ _TABLE[(crc ^ byte) & 0xFF]
    return crc


def crc16_verify(data: bytes) -> bool:
    """Check that the last two bytes (little-endian) are the CRC of the rest."""
    if len(data) < 2:
        return False
    expected = crc16_calc(data[:-2], CRC16_INIT)
    return expected == int.from_bytes(data[-2:], "little")
# verify/corrupt.py
from __future__ import annotations

from typing import Any, Iterable

from checkseq.algorithms import registry


def flip_bits(data: bytes, positions: Iterable[int], *, msb_first: bool = True) -> bytes:
    """
    Return a copy of `data` with the given bit positions inverted.

    Position p addresses byte p // 8; within the byte, bit 0 is the MSB when
    msb_first (transmission order), the LSB otherwise. Flipping the same
    position twice restores it.
    """
    buf = bytearray(data)
    n_bits = len(buf) * 8
    for p in positions:
        if not (0 <= p < n_bits):
            raise ValueError(f"bit position {p} out of range [0,{n_bits})")
        shift = 7 - (p % 8) if msb_first else p % 8
        buf[p // 8] ^= 1 << shift
    return bytes(buf)


def flip_burst(data: bytes, start: int, length: int, *, msb_first: bool = True) -> bytes:
    """
    Burst error: every bit in [start, start + length) is flipped.
    """
    if length <= 0:
        raise ValueError("length must be > 0")
    return flip_bits(data, range(start, start + length), msb_first=msb_first)


def detects(algorithm: Any, original: bytes, corrupted: bytes, *, cfg: Any = None) -> bool:
    """
    True if the checksum computed over `original` fails to verify `corrupted`.
    """
    expected = registry.compute(algorithm, original, cfg=cfg)
    return not registry.verify(algorithm, corrupted, expected, cfg=cfg)

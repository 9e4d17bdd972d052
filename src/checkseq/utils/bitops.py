from __future__ import annotations

from typing import Iterable, List


def bytes_to_bits(data: bytes, msb_first: bool = True) -> List[int]:
    bits = []
    if msb_first:
        for b in data:
            for i in range(7, -1, -1):
                bits.append((b >> i) & 1)
    else:
        for b in data:
            for i in range(8):
                bits.append((b >> i) & 1)
    return bits


def bits_to_bytes(bits: Iterable[int], msb_first: bool = True) -> bytes:
    """
    Pack bits into bytes, the inverse of bytes_to_bits. Bits must be 0 or 1
    and fill whole bytes.
    """
    bits = list(bits)
    if len(bits) % 8 != 0:
        raise ValueError(f"bit count must be a multiple of 8, got {len(bits)}")
    if any(b not in (0, 1) for b in bits):
        raise ValueError("bits must be 0 or 1")
    order = range(7, -1, -1) if msb_first else range(8)
    out = bytearray()
    for off in range(0, len(bits), 8):
        out.append(sum(bit << i for bit, i in zip(bits[off:off + 8], order)))
    return bytes(out)


def bits_from_str(s: str) -> List[int]:
    """
    "1101 0011" -> [1, 1, 0, 1, 0, 0, 1, 1]. Whitespace and underscores are ignored.
    """
    out = []
    for ch in s:
        if ch in " _\t\n":
            continue
        if ch not in "01":
            raise ValueError(f"not a bit character: {ch!r}")
        out.append(1 if ch == "1" else 0)
    return out


def mask(width: int) -> int:
    if width <= 0:
        raise ValueError("width must be > 0")
    return (1 << width) - 1


def truncate(value: int, width: int) -> int:
    """Keep the low `width` bits; carries above are discarded."""
    return value & mask(width)


def fold_end_around(value: int, width: int) -> int:
    """
    One's-complement fold: add the bits above `width` back into the low bits
    until nothing remains above `width`.
    """
    m = mask(width)
    while value >> width:
        value = (value & m) + (value >> width)
    return value


def reflect_bits(x: int, width: int) -> int:
    r = 0
    for _ in range(width):
        r = (r << 1) | (x & 1)
        x >>= 1
    return r


def parity_of(x: int) -> int:
    return bin(x).count("1") & 1


def width_bytes(width: int) -> int:
    return (width + 7) // 8


def value_to_bytes(value: int, width: int) -> bytes:
    """
    Big-endian serialization of a `width`-bit checksum value (ceil(width/8) bytes).
    """
    if value < 0 or value >> width:
        raise ValueError(f"value {value:#x} does not fit in {width} bits")
    return value.to_bytes(width_bytes(width), "big")


def value_from_bytes(b: bytes, width: int) -> int:
    if len(b) != width_bytes(width):
        raise ValueError(f"expected {width_bytes(width)} bytes for a {width}-bit value, got {len(b)}")
    v = int.from_bytes(b, "big")
    if v >> width:
        raise ValueError(f"value {v:#x} does not fit in {width} bits")
    return v



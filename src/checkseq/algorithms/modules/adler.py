from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np

from checkseq.algorithms._cfg import getattr_int
from checkseq.errors import InvalidConfig

# Block size for the closed-form update. 255 * sum(1..4096) stays well inside uint64.
_BLOCK = 4096


@dataclass(frozen=True)
class Config:
    """
    Adler-style dual modular checksum.

    Two accumulators, each reduced modulo a prime `modulus`:
      A starts at 1, B at 0
      per byte: A = (A + byte) mod M ; B = (B + A) mod M
      result:   B in the high width/2 bits, A in the low width/2 bits

    B sums A's history, so reordering the same bytes changes the result.
    Mixing is weak while the input is shorter than the modulus.

    modulus: prime, < 2**(width/2)
    width: total output width in bits (even)

    width=32, modulus=65521 is Adler-32.
    """
    modulus: int = 251
    width: int = 16

    def __post_init__(self) -> None:
        resolve_cfg(self)


# Deterministic Miller-Rabin witnesses, exact for n < 3.3e24.
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    for p in _WITNESSES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def resolve_cfg(cfg: Any) -> Any:
    w = getattr_int(cfg, "width", 2)
    if w % 2:
        raise InvalidConfig(f"cfg.width must be even, got {w}")
    m = getattr_int(cfg, "modulus", 2)
    if m >= 1 << (w // 2):
        raise InvalidConfig(f"cfg.modulus must be < 2**{w // 2}, got {m}")
    if not _is_prime(m):
        raise InvalidConfig(f"cfg.modulus must be prime, got {m}")
    return cfg


ADLER32 = Config(modulus=65521, width=32)


def width(cfg: Any) -> int:
    return cfg.width


def init(*, cfg: Any) -> Tuple[int, int]:
    return 1, 0


def update(acc: Tuple[int, int], data: bytes, *, cfg: Any) -> Tuple[int, int]:
    """
    Closed form per block of k bytes d1..dk, starting from (A0, B0):
      A = A0 + sum(d)
      B = B0 + k*A0 + sum((k - i + 1) * d_i)
    which equals k applications of the per-byte recurrence modulo M.
    """
    a, b = acc
    m = cfg.modulus
    if not data:
        return acc

    arr = np.frombuffer(data, dtype=np.uint8)
    for off in range(0, arr.size, _BLOCK):
        blk = arr[off:off + _BLOCK].astype(np.uint64)
        k = blk.size
        weights = np.arange(k, 0, -1, dtype=np.uint64)
        s = int(blk.sum())
        ws = int((blk * weights).sum())
        b = (b + k * a + ws) % m
        a = (a + s) % m
    return a, b


def final(acc: Tuple[int, int], *, cfg: Any) -> int:
    a, b = acc
    return (b << (cfg.width // 2)) | a

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from checkseq.algorithms._cfg import getattr_bool
from checkseq.algorithms.accumulate import word16_sum
from checkseq.utils.bitops import fold_end_around

# (running sum, high byte of a word split across absorb() calls)
Acc = Tuple[int, Optional[int]]


@dataclass(frozen=True)
class Config:
    """
    RFC 1071 Internet checksum.

    16-bit big-endian words are summed with end-around carry; an odd trailing
    byte is padded with a zero low byte. The folded sum is complemented unless
    complement=False.
    """
    complement: bool = True

    def __post_init__(self) -> None:
        resolve_cfg(self)


def resolve_cfg(cfg: Any) -> Any:
    getattr_bool(cfg, "complement")
    return cfg


def width(cfg: Any) -> int:
    return 16


def init(*, cfg: Any) -> Acc:
    return 0, None


def update(acc: Acc, data: bytes, *, cfg: Any) -> Acc:
    total, pending = acc
    if not data:
        return acc

    if pending is not None:
        total += (pending << 8) | data[0]
        data = data[1:]
        pending = None

    n_even = len(data) - (len(data) % 2)
    total += word16_sum(data[:n_even])
    if n_even < len(data):
        pending = data[-1]
    return total, pending


def final(acc: Acc, *, cfg: Any) -> int:
    total, pending = acc
    if pending is not None:
        total += pending << 8
    s = fold_end_around(total, 16)
    if cfg.complement:
        return ~s & 0xFFFF
    return s

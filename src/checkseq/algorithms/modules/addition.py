from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from checkseq.algorithms.accumulate import byte_sum, get_width
from checkseq.utils.bitops import truncate


@dataclass(frozen=True)
class Config:
    """
    Integer-addition checksum: sum of byte values, truncated to `width` bits.

    Carries that overflow `width` are discarded at finalize, so two errors
    whose effect lands entirely above the truncation boundary cancel. Byte
    order never matters, and compensating flips (0->1 and 1->0 at the same bit
    position) always cancel.
    """
    width: int = 8

    def __post_init__(self) -> None:
        resolve_cfg(self)


def resolve_cfg(cfg: Any) -> Any:
    get_width(cfg)
    return cfg


def width(cfg: Any) -> int:
    return get_width(cfg)


def init(*, cfg: Any) -> int:
    return 0


def update(acc: int, data: bytes, *, cfg: Any) -> int:
    return acc + byte_sum(data)


def final(acc: int, *, cfg: Any) -> int:
    return truncate(acc, get_width(cfg))

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from checkseq.algorithms.accumulate import byte_sum, get_width
from checkseq.utils.bitops import fold_end_around


@dataclass(frozen=True)
class Config:
    """
    One's-complement addition checksum.

    Accumulates exactly like the integer-addition checksum, but finalize folds
    every bit above `width` back into the low bits (end-around carry) instead
    of dropping it. No carry is lost; compensating flips still cancel.
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
    return fold_end_around(acc, get_width(cfg))

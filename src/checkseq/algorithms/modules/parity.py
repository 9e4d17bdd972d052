from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np

from checkseq.algorithms._cfg import getattr_bool
from checkseq.utils.bitops import parity_of


@dataclass(frozen=True)
class Config:
    """
    Single parity bit over the whole data word.

    odd: if True, return the odd-parity bit (complement of the XOR of all bits).

    Detects every odd-weight error pattern; every even-weight pattern
    (2, 4, ... flipped bits) cancels and goes unnoticed.
    """
    odd: bool = False

    def __post_init__(self) -> None:
        resolve_cfg(self)


def resolve_cfg(cfg: Any) -> Any:
    getattr_bool(cfg, "odd")
    return cfg


def width(cfg: Any) -> int:
    return 1


def init(*, cfg: Any) -> int:
    return 0


def update(acc: int, data: bytes, *, cfg: Any) -> int:
    if not data:
        return acc
    folded = int(np.bitwise_xor.reduce(np.frombuffer(data, dtype=np.uint8)))
    return acc ^ parity_of(folded)


def update_bits(acc: int, bits: Iterable[int], *, cfg: Any) -> int:
    for bit in bits:
        acc ^= bit & 1
    return acc


def final(acc: int, *, cfg: Any) -> int:
    return acc ^ (1 if cfg.odd else 0)

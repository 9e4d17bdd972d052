from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class Config:
    """
    Longitudinal redundancy check: XOR of all bytes.

    Bit i of the result is the running parity of bit i across every byte,
    i.e. eight independent parity checks side by side. Any single-byte
    corruption is caught; two flips at the same bit position cancel.
    """


def resolve_cfg(cfg: Any) -> Any:
    return cfg


def width(cfg: Any) -> int:
    return 8


def init(*, cfg: Any) -> int:
    return 0


def update(acc: int, data: bytes, *, cfg: Any) -> int:
    if not data:
        return acc
    return acc ^ int(np.bitwise_xor.reduce(np.frombuffer(data, dtype=np.uint8)))


def final(acc: int, *, cfg: Any) -> int:
    return acc & 0xFF

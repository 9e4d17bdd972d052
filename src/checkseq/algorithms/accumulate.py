"""
Wide accumulator shared by the addition-style checksums.

The running sum is a plain Python int, so no carry is ever lost while
accumulating; each variant decides how to squeeze it into its output width
at finalize time (truncate, or fold end-around).
"""
from __future__ import annotations

from typing import Any

import numpy as np

from checkseq.algorithms._cfg import getattr_int


def byte_sum(data: bytes) -> int:
    """Unsigned sum of all bytes."""
    if not data:
        return 0
    arr = np.frombuffer(data, dtype=np.uint8)
    return int(arr.sum(dtype=np.uint64))


def word16_sum(data: bytes) -> int:
    """Sum of big-endian 16-bit words. len(data) must be even."""
    if len(data) % 2:
        raise ValueError("word16_sum: data length must be even")
    if not data:
        return 0
    arr = np.frombuffer(data, dtype=">u2")
    return int(arr.sum(dtype=np.uint64))


def get_width(cfg: Any) -> int:
    return getattr_int(cfg, "width", 1)

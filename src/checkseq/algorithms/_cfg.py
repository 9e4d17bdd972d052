"""
getattr-based config validation shared by the algorithm modules.

Modules accept any object exposing the right attributes (their own frozen
Config, or a duck-typed stand-in), so every attribute is checked on use.
"""
from __future__ import annotations

from typing import Any, Sequence

from checkseq.errors import InvalidConfig


def getattr_int(cfg: Any, name: str, lo: int, hi: int | None = None) -> int:
    v = getattr(cfg, name, None)
    if v is None:
        raise InvalidConfig(f"cfg missing required int attribute: {name}")
    if not isinstance(v, int) or isinstance(v, bool):
        raise InvalidConfig(f"cfg.{name} must be int")
    if v < lo or (hi is not None and v > hi):
        rng = f"[{lo},{hi}]" if hi is not None else f">= {lo}"
        raise InvalidConfig(f"cfg.{name} out of range {rng}: {v}")
    return v


def getattr_bool(cfg: Any, name: str) -> bool:
    v = getattr(cfg, name, None)
    if v is None:
        raise InvalidConfig(f"cfg missing required bool attribute: {name}")
    if not isinstance(v, bool):
        raise InvalidConfig(f"cfg.{name} must be bool")
    return v


def getattr_choice(cfg: Any, name: str, choices: Sequence[str]) -> str:
    v = getattr(cfg, name, None)
    if v is None:
        raise InvalidConfig(f"cfg missing required attribute: {name}")
    if v not in choices:
        raise InvalidConfig(f"cfg.{name} must be one of {list(choices)}, got {v!r}")
    return v

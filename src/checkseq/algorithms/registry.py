from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import ModuleType
from typing import Any, Tuple, Union
import importlib
import pkgutil

from checkseq.algorithms.state import ChecksumState
from checkseq.errors import InvalidConfig, UnknownAlgorithm
from checkseq.utils.bitops import value_from_bytes, width_bytes
from checkseq.utils.logger import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """
    Algorithm selection.

    algorithm: algorithm module name (e.g. "crc", "adler", "lrc")
    algorithm_cfg: instance of that module's Config (or None -> defaults).
        "crc" has no defaults: pass a crc.Config or a catalog name such as
        "CRC-32/ISO-HDLC".
    """
    algorithm: str
    algorithm_cfg: Any = None


AlgorithmRef = Union[str, Config, ChecksumState]


def available_algorithms() -> list[str]:
    """
    Enumerate available algorithm modules under algorithms/modules.
    """
    return list(_discover_algorithms())


@lru_cache(maxsize=None)
def _discover_algorithms() -> Tuple[str, ...]:
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return tuple(sorted(n for n in names if not n.startswith("_")))


def _import_algorithm_module(name: str) -> ModuleType:
    if not isinstance(name, str) or not name:
        raise UnknownAlgorithm("algorithm must be a non-empty string")
    known = _discover_algorithms()
    if name not in known:
        log.debug("unknown algorithm requested: %r", name)
        raise UnknownAlgorithm(f"unknown algorithm: {name!r} (available: {list(known)})")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_module_and_cfg(algorithm: Union[str, Config], cfg: Any) -> Tuple[str, ModuleType, Any]:
    if isinstance(algorithm, Config):
        if cfg is not None:
            raise TypeError("pass either a registry Config or cfg=, not both")
        algorithm, cfg = algorithm.algorithm, algorithm.algorithm_cfg

    mod = _import_algorithm_module(algorithm)
    for attr in ("Config", "resolve_cfg", "width", "init", "update", "final"):
        if not hasattr(mod, attr):
            raise AttributeError(f"algorithm module '{algorithm}' missing {attr}")

    if cfg is None:
        if getattr(mod, "REQUIRES_CFG", False):
            raise InvalidConfig(f"algorithm '{algorithm}' has no default configuration; pass cfg=")
        cfg = mod.Config()
    return algorithm, mod, mod.resolve_cfg(cfg)


def new(algorithm: Union[str, Config], *, cfg: Any = None) -> ChecksumState:
    """
    Fresh, identity-initialized state for `algorithm`.
    Raises UnknownAlgorithm / InvalidConfig.
    """
    name, mod, module_cfg = _resolve_module_and_cfg(algorithm, cfg)
    log.debug("new %s state, cfg=%r", name, module_cfg)
    return ChecksumState(name, mod, module_cfg)


def _state_for(algorithm: AlgorithmRef, cfg: Any) -> ChecksumState:
    if isinstance(algorithm, ChecksumState):
        if cfg is not None:
            raise TypeError("cfg= cannot be combined with an existing ChecksumState")
        return algorithm.spawn()
    return new(algorithm, cfg=cfg)


def _check_data(data: Any, fn: str) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{fn}: data must be bytes-like")
    return bytes(data)


def compute(algorithm: Union[str, Config], data: bytes, *, cfg: Any = None) -> int:
    """
    Single-pass checksum of `data`.
    """
    data = _check_data(data, "compute")
    return new(algorithm, cfg=cfg).absorb(data).finalize()


def verify(algorithm: AlgorithmRef, data: bytes, expected: Union[int, bytes], *, cfg: Any = None) -> bool:
    """
    True iff the checksum of `data` equals `expected`.

    `algorithm` may be an existing ChecksumState; only its algorithm and
    config are used, its accumulator is left untouched. `expected` may be the
    integer value or its big-endian serialization.
    """
    data = _check_data(data, "verify")
    state = _state_for(algorithm, cfg)
    if isinstance(expected, (bytes, bytearray, memoryview)):
        try:
            expected = value_from_bytes(bytes(expected), state.width)
        except ValueError:
            return False
    elif not isinstance(expected, int) or isinstance(expected, bool):
        raise TypeError("verify: expected must be an int or bytes-like")
    return state.absorb(data).finalize() == expected


def codeword(algorithm: AlgorithmRef, data: bytes, *, cfg: Any = None) -> bytes:
    """
    Data word followed by its big-endian check sequence.
    """
    data = _check_data(data, "codeword")
    return data + _state_for(algorithm, cfg).absorb(data).digest()


def verify_codeword(algorithm: AlgorithmRef, cw: bytes, *, cfg: Any = None) -> bool:
    """
    Split a code word produced by codeword() and check it.
    Raises ValueError if `cw` is shorter than the check sequence.
    """
    cw = _check_data(cw, "verify_codeword")
    state = _state_for(algorithm, cfg)
    n = width_bytes(state.width)
    if len(cw) < n:
        raise ValueError(f"verify_codeword: code word shorter than {n}-byte check sequence")
    data, check = cw[:len(cw) - n], cw[len(cw) - n:]
    return state.absorb(data).digest() == check

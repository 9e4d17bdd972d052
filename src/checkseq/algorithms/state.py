from __future__ import annotations

from types import ModuleType
from typing import Any, Iterable, Optional

from checkseq.errors import StateReuseError
from checkseq.utils.bitops import value_to_bytes


class ChecksumState:
    """
    One in-flight checksum computation.

    Holds the accumulator of a single algorithm module together with its
    resolved config. Lifecycle:
      absorb(...) any number of times -> finalize() -> reset() before reuse

    finalize() is idempotent; absorbing after it raises StateReuseError.
    Not safe to share between threads; configs are, states are not.
    """

    def __init__(self, algorithm: str, mod: ModuleType, cfg: Any):
        self.algorithm = algorithm
        self.cfg = cfg
        self._mod = mod
        self.width: int = mod.width(cfg)
        self._acc: Any = mod.init(cfg=cfg)
        self._value: Optional[int] = None

    def __repr__(self) -> str:
        status = "finalized" if self.finalized else "open"
        return f"ChecksumState(algorithm={self.algorithm!r}, width={self.width}, {status})"

    @property
    def finalized(self) -> bool:
        return self._value is not None

    @property
    def accepts_bits(self) -> bool:
        return hasattr(self._mod, "update_bits")

    def _check_open(self) -> None:
        if self._value is not None:
            raise StateReuseError(f"{self.algorithm}: absorb after finalize; call reset() first")

    def absorb(self, data: Any) -> "ChecksumState":
        """
        Feed a bytes-like chunk, or a single byte given as an int in [0, 255].
        Splitting the input across calls never changes the result.
        """
        self._check_open()
        if isinstance(data, int) and not isinstance(data, bool):
            if not (0 <= data <= 0xFF):
                raise ValueError(f"absorb: byte value out of range [0,255]: {data}")
            data = bytes((data,))
        elif isinstance(data, (bytes, bytearray, memoryview)):
            data = bytes(data)
        else:
            raise TypeError("absorb: data must be bytes-like or an int in [0, 255]")

        if data:
            self._acc = self._mod.update(self._acc, data, cfg=self.cfg)
        return self

    def absorb_bits(self, bits: Iterable[int]) -> "ChecksumState":
        """
        Feed individual bits (0/1) in transmission order. Only algorithms with
        bit granularity (parity, crc) support this.
        """
        self._check_open()
        if not self.accepts_bits:
            raise TypeError(f"{self.algorithm}: bit-level input is not supported")
        bits = list(bits)
        for bit in bits:
            if bit not in (0, 1) or isinstance(bit, bool):
                raise ValueError(f"absorb_bits: bits must be 0 or 1, got {bit!r}")
        self._acc = self._mod.update_bits(self._acc, bits, cfg=self.cfg)
        return self

    def finalize(self) -> int:
        if self._value is None:
            self._value = self._mod.final(self._acc, cfg=self.cfg)
        return self._value

    def digest(self) -> bytes:
        """Big-endian check sequence, ceil(width/8) bytes."""
        return value_to_bytes(self.finalize(), self.width)

    def reset(self) -> "ChecksumState":
        self._acc = self._mod.init(cfg=self.cfg)
        self._value = None
        return self

    def spawn(self) -> "ChecksumState":
        """Fresh state with the same algorithm and config."""
        return ChecksumState(self.algorithm, self._mod, self.cfg)

from __future__ import annotations


class ChecksumError(Exception):
    """Base class for checksum misuse errors."""


class UnknownAlgorithm(ChecksumError, ValueError):
    """Algorithm identifier does not name an algorithm module."""


class InvalidConfig(ChecksumError, ValueError):
    """
    Malformed algorithm configuration: non-positive width, polynomial wider
    than its declared width, zero polynomial, non-prime modulus, ...
    """


class StateReuseError(ChecksumError, RuntimeError):
    """Absorb after finalize without an explicit reset()."""

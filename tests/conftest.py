from __future__ import annotations

import random

import pytest


SAMPLE_PAYLOADS = [
    b"",
    b"\x00",
    b"stack",
    b"123456789",
    bytes(range(256)),
    b"\xff" * 513,
    b"\x00\x01\x02hello\xff\x10\x20" * 37,
]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def random_payload(rng: random.Random) -> bytes:
    return bytes(rng.randrange(256) for _ in range(1000))


def random_splits(data: bytes, rng: random.Random, n_cuts: int = 5) -> list[bytes]:
    """
    Split `data` into consecutive chunks at random cut points (empty chunks allowed).
    """
    cuts = sorted(rng.randrange(len(data) + 1) for _ in range(n_cuts))
    chunks = []
    prev = 0
    for c in cuts + [len(data)]:
        chunks.append(data[prev:c])
        prev = c
    return chunks

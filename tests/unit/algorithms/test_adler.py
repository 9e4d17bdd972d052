import zlib

import pytest

from checkseq.algorithms import registry
from checkseq.algorithms.modules import adler
from checkseq.algorithms.modules.adler import ADLER32, Config
from checkseq.errors import InvalidConfig


def _per_byte(data: bytes, modulus: int, width: int) -> int:
    a, b = 1, 0
    for byte in data:
        a = (a + byte) % modulus
        b = (b + a) % modulus
    return (b << (width // 2)) | a


def test_stack_value():
    # A: 116, 232, 78, 177, 33 ; B: 116, 97, 175, 101, 134
    assert registry.compute("adler", b"stack") == (134 << 8) | 33


def test_order_sensitivity():
    assert registry.compute("adler", b"stack") != registry.compute("adler", b"stcak")
    assert registry.compute("addition", b"stack") == registry.compute("addition", b"stcak")


def test_empty_input_is_a_equals_one():
    assert registry.compute("adler", b"") == 1


def test_block_update_matches_per_byte_recurrence(rng):
    data = bytes(rng.randrange(256) for _ in range(9000))
    assert registry.compute("adler", data) == _per_byte(data, 251, 16)


def test_saturated_input_crosses_block_boundaries():
    data = b"\xff" * 20000
    assert registry.compute("adler", data) == _per_byte(data, 251, 16)
    assert registry.compute("adler", data, cfg=ADLER32) == zlib.adler32(data)


def test_adler32_matches_zlib(random_payload):
    assert registry.compute("adler", random_payload, cfg=ADLER32) == zlib.adler32(random_payload)
    assert registry.compute("adler", b"Wikipedia", cfg=ADLER32) == 0x11E60398


def test_chunked_adler32_matches_zlib(rng):
    data = bytes(rng.randrange(256) for _ in range(5000))
    st = registry.new("adler", cfg=ADLER32)
    for off in range(0, len(data), 333):
        st.absorb(data[off:off + 333])
    assert st.finalize() == zlib.adler32(data)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(modulus=250),              # not prime
        dict(modulus=257),              # does not fit in 8 bits
        dict(modulus=1),
        dict(modulus=251, width=15),    # odd width
        dict(modulus=251, width=0),
    ],
)
def test_invalid_configs(kwargs):
    with pytest.raises(InvalidConfig):
        Config(**kwargs)


def test_small_prime_accepted():
    cfg = Config(modulus=13, width=8)
    assert adler.width(cfg) == 8
    assert registry.compute("adler", b"stack", cfg=cfg) == _per_byte(b"stack", 13, 8)


def test_large_prime_modulus_accepted():
    m = (1 << 61) - 1
    cfg = Config(modulus=m, width=128)
    data = b"large moduli stay exact" * 50
    assert registry.compute("adler", data, cfg=cfg) == _per_byte(data, m, 128)


@pytest.mark.parametrize("modulus", [561, 41041, (1 << 61) + 1, 3215031751])
def test_composites_rejected(modulus: int):
    # Carmichael numbers and strong pseudoprimes to small bases included
    with pytest.raises(InvalidConfig):
        Config(modulus=modulus, width=128)


@pytest.mark.parametrize("n, expected", [(2, True), (41, True), (43, True), (65521, True), (1, False), (49, False)])
def test_is_prime_edges(n: int, expected: bool):
    assert adler._is_prime(n) is expected

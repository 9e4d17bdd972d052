import itertools

import pytest

from checkseq.algorithms import registry
from checkseq.algorithms.modules.parity import Config
from checkseq.errors import InvalidConfig
from checkseq.utils.bitops import bits_from_str
from checkseq.verify.corrupt import flip_bits


def test_parity_of_stack():
    # 0x6E has five ones
    assert registry.compute("parity", b"stack") == 1
    assert registry.compute("parity", b"stack", cfg=Config(odd=True)) == 0


def test_parity_empty_is_zero():
    assert registry.compute("parity", b"") == 0


def test_parity_bit_level_matches_bytes():
    bits = bits_from_str("0111 0011")  # 's'
    st = registry.new("parity").absorb_bits(bits)
    assert st.finalize() == registry.compute("parity", b"s")


def test_parity_catches_every_odd_weight_error():
    data = b"stack"
    base = registry.compute("parity", data)
    for k in (1, 3, 5):
        for positions in itertools.islice(itertools.combinations(range(40), k), 200):
            assert registry.compute("parity", flip_bits(data, positions)) != base


def test_parity_misses_every_even_weight_error():
    data = b"stack"
    base = registry.compute("parity", data)
    for k in (2, 4):
        for positions in itertools.islice(itertools.combinations(range(40), k), 200):
            assert registry.compute("parity", flip_bits(data, positions)) == base


def test_parity_config_validation():
    with pytest.raises(InvalidConfig):
        Config(odd="yes")  # type: ignore[arg-type]

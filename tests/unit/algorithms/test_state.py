import pytest

from checkseq.algorithms import registry
from checkseq.errors import InvalidConfig, StateReuseError


def test_finalize_is_idempotent():
    st = registry.new("crc", cfg="CRC-16/IBM-3740").absorb(b"123456789")
    assert st.finalize() == 0x29B1
    assert st.finalize() == 0x29B1
    assert st.finalized


def test_absorb_after_finalize_rejected():
    st = registry.new("lrc").absorb(b"abc")
    st.finalize()
    with pytest.raises(StateReuseError):
        st.absorb(b"d")
    with pytest.raises(RuntimeError):
        st.absorb(b"d")
    # the rejected absorb did not change the value
    assert st.finalize() == registry.compute("lrc", b"abc")


def test_reset_returns_to_initial_condition():
    st = registry.new("adler")
    first = st.absorb(b"stack").finalize()
    st.reset()
    assert not st.finalized
    assert st.finalize() == registry.compute("adler", b"")
    st.reset()
    assert st.absorb(b"stack").finalize() == first


def test_absorb_single_byte_ints():
    st = registry.new("addition")
    for b in b"stack":
        st.absorb(b)
    assert st.finalize() == registry.compute("addition", b"stack")


def test_absorb_rejects_bad_input():
    st = registry.new("addition")
    with pytest.raises(ValueError):
        st.absorb(256)
    with pytest.raises(ValueError):
        st.absorb(-1)
    with pytest.raises(TypeError):
        st.absorb("abc")
    with pytest.raises(TypeError):
        st.absorb(True)


def test_absorb_bits_only_for_bit_granular_algorithms():
    assert registry.new("parity").accepts_bits
    assert registry.new("crc", cfg="CRC-8/SMBUS").accepts_bits
    with pytest.raises(TypeError):
        registry.new("lrc").absorb_bits([1, 0, 1])
    with pytest.raises(ValueError):
        registry.new("parity").absorb_bits([1, 2])


def test_independent_states_do_not_interfere():
    a = registry.new("crc", cfg="CRC-32/ISO-HDLC")
    b = registry.new("crc", cfg="CRC-32/ISO-HDLC")
    a.absorb(b"1234")
    b.absorb(b"abcd")
    a.absorb(b"56789")
    assert a.finalize() == 0xCBF43926
    assert b.cfg.table is a.cfg.table


def test_spawn_is_fresh():
    st = registry.new("lrc").absorb(b"abc")
    fresh = st.spawn()
    assert fresh.finalize() == 0
    assert st.finalize() == registry.compute("lrc", b"abc")


def test_repr_mentions_algorithm():
    assert "crc" in repr(registry.new("crc", cfg="CRC-8/SMBUS"))


def test_crc_state_needs_explicit_parameters():
    with pytest.raises(InvalidConfig):
        registry.new("crc")

import pytest

from checkseq.verify.corrupt import detects, flip_bits, flip_burst


def test_flip_bits_msb_numbering():
    assert flip_bits(b"\x00\x00", [0]) == b"\x80\x00"
    assert flip_bits(b"\x00\x00", [15]) == b"\x00\x01"


def test_flip_bits_lsb_numbering():
    assert flip_bits(b"\x00\x00", [0], msb_first=False) == b"\x01\x00"
    assert flip_bits(b"\x00\x00", [15], msb_first=False) == b"\x00\x80"


def test_flip_twice_restores():
    data = b"stack"
    assert flip_bits(data, [3, 3]) == data
    assert flip_bits(flip_bits(data, [1, 20]), [20, 1]) == data


def test_flip_bits_out_of_range():
    with pytest.raises(ValueError):
        flip_bits(b"ab", [16])
    with pytest.raises(ValueError):
        flip_bits(b"ab", [-1])


def test_flip_burst():
    assert flip_burst(b"\x00\x00", 4, 8) == b"\x0f\xf0"
    with pytest.raises(ValueError):
        flip_burst(b"\x00", 0, 0)


def test_detects():
    data = b"stack"
    two_same_column = flip_bits(data, [2, 10])
    assert not detects("lrc", data, two_same_column)
    assert detects("crc", data, two_same_column, cfg="CRC-8/SMBUS")
    assert detects("adler", b"stack", b"stcak")
    assert not detects("addition", b"stack", b"stcak")
    assert not detects("crc", data, data, cfg="CRC-32/ISO-HDLC")

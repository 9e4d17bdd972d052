from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple

from checkseq.algorithms._cfg import getattr_bool, getattr_choice, getattr_int
from checkseq.errors import InvalidConfig
from checkseq.utils.bitops import bytes_to_bits, mask, reflect_bits
from checkseq.utils.logger import get_logger

log = get_logger(__name__)

MSB_FIRST = "msb"
LSB_FIRST = "lsb"

# The registry refuses to guess a polynomial.
REQUIRES_CFG = True


@dataclass(frozen=True)
class Config:
    """
    Polynomial-division checksum (Williams / "Rocksoft" parameter model).

    width: register width k, i.e. the degree of the generator polynomial
    polynomial: generator without the implicit x**k term (k bits). The full
        k+1 bit pattern with the leading 1 is accepted too and normalized.
    initial_value: register seed, highest-order term in the MSB
    bit_order: order in which the bits of each input byte enter the divider
    input_reflected: bit-reverse each input byte before feeding it. The
        effective feed is LSB-first iff exactly one of bit_order == "lsb"
        and input_reflected holds.
    output_reflected: reverse the register over `width` bits before final_xor
    final_xor: XORed into the result last

    The 256-entry lookup table is derived once here and shared read-only by
    every computation using this config.

    width and polynomial have no defaults: there is no "usual" CRC, pick one
    explicitly or take a named entry from CATALOG.

    Error-detection strength beyond "every single-bit error and every burst of
    length <= width" depends on the specific polynomial and data length; look
    up the polynomial's published Hamming-distance table rather than assuming
    it from the width.
    """
    width: int
    polynomial: int
    initial_value: int = 0
    bit_order: str = MSB_FIRST
    input_reflected: bool = False
    output_reflected: bool = False
    final_xor: int = 0x0000
    name: Optional[str] = field(default=None, compare=False)
    table: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        poly = _check_params(self)
        if poly != self.polynomial:
            object.__setattr__(self, "polynomial", poly)
        object.__setattr__(self, "table", _build_table(self.width, poly, lsb_first=self.lsb_first))
        log.debug("crc table built: %s width=%d poly=%#x lsb_first=%s",
                  self.name or "custom", self.width, poly, self.lsb_first)

    @property
    def lsb_first(self) -> bool:
        return (self.bit_order == LSB_FIRST) != self.input_reflected


def _check_params(cfg: Any) -> int:
    """
    Validate raw CRC parameters; return the polynomial without its leading 1.
    """
    w = getattr_int(cfg, "width", 1)
    poly = getattr_int(cfg, "polynomial", 0)
    if poly == 0:
        raise InvalidConfig("cfg.polynomial must be non-zero")
    if poly >> w > 1:
        raise InvalidConfig(f"cfg.polynomial {poly:#x} is wider than width={w}")
    poly &= mask(w)
    if poly == 0:
        # only the x**k term: every remainder is the register itself
        raise InvalidConfig("cfg.polynomial has no terms below x**width")
    getattr_int(cfg, "initial_value", 0, mask(w))
    getattr_int(cfg, "final_xor", 0, mask(w))
    getattr_choice(cfg, "bit_order", (MSB_FIRST, LSB_FIRST))
    getattr_bool(cfg, "input_reflected")
    getattr_bool(cfg, "output_reflected")
    return poly


def _build_table(width: int, poly: int, *, lsb_first: bool) -> Tuple[int, ...]:
    table = []
    if lsb_first:
        rpoly = reflect_bits(poly, width)
        for i in range(256):
            r = i
            for _ in range(8):
                if r & 1:
                    r = (r >> 1) ^ rpoly
                else:
                    r >>= 1
            table.append(r)
        return tuple(table)

    # MSB-first registers narrower than a byte are left-aligned into 8 bits.
    w = max(width, 8)
    top = 1 << (w - 1)
    m = mask(w)
    p = poly << (w - width)
    for i in range(256):
        r = i << (w - 8)
        for _ in range(8):
            if r & top:
                r = ((r << 1) ^ p) & m
            else:
                r = (r << 1) & m
        table.append(r)
    return tuple(table)


# ============================
# Catalog
# ============================
#
# Parameters and check values from the reveng CRC catalogue.
# check = CRC over b"123456789".

_CATALOG_PARAMS = [
    # name, width, poly, init, refin, refout, xorout, check
    ("CRC-3/GSM", 3, 0x3, 0x0, False, False, 0x7, 0x4),
    ("CRC-4/G-704", 4, 0x3, 0x0, True, True, 0x0, 0x7),
    ("CRC-5/USB", 5, 0x05, 0x1F, True, True, 0x1F, 0x19),
    ("CRC-8/SMBUS", 8, 0x07, 0x00, False, False, 0x00, 0xF4),
    ("CRC-16/ARC", 16, 0x8005, 0x0000, True, True, 0x0000, 0xBB3D),
    ("CRC-16/IBM-3740", 16, 0x1021, 0xFFFF, False, False, 0x0000, 0x29B1),
    ("CRC-16/XMODEM", 16, 0x1021, 0x0000, False, False, 0x0000, 0x31C3),
    ("CRC-16/MODBUS", 16, 0x8005, 0xFFFF, True, True, 0x0000, 0x4B37),
    ("CRC-16/KERMIT", 16, 0x1021, 0x0000, True, True, 0x0000, 0x2189),
    ("CRC-32/ISO-HDLC", 32, 0x04C11DB7, 0xFFFFFFFF, True, True, 0xFFFFFFFF, 0xCBF43926),
    ("CRC-32/ISCSI", 32, 0x1EDC6F41, 0xFFFFFFFF, True, True, 0xFFFFFFFF, 0xE3069283),
    ("CRC-32/BZIP2", 32, 0x04C11DB7, 0xFFFFFFFF, False, False, 0xFFFFFFFF, 0xFC891918),
    ("CRC-64/XZ", 64, 0x42F0E1EBA9EA3693, 0xFFFFFFFFFFFFFFFF, True, True,
     0xFFFFFFFFFFFFFFFF, 0x995DC9BBDF1939FA),
]

_ALIASES = {
    "CRC-16/CCITT-FALSE": "CRC-16/IBM-3740",
    "CRC-32": "CRC-32/ISO-HDLC",
    "CRC-32C": "CRC-32/ISCSI",
}

CATALOG: Dict[str, Config] = {}
CHECK_VALUES: Dict[str, int] = {}

for _name, _w, _poly, _init, _refin, _refout, _xorout, _check in _CATALOG_PARAMS:
    CATALOG[_name] = Config(
        width=_w,
        polynomial=_poly,
        initial_value=_init,
        input_reflected=_refin,
        output_reflected=_refout,
        final_xor=_xorout,
        name=_name,
    )
    CHECK_VALUES[_name] = _check


def lookup(name: str) -> Config:
    key = name.upper()
    key = _ALIASES.get(key, key)
    try:
        return CATALOG[key]
    except KeyError:
        raise InvalidConfig(f"unknown CRC catalog entry: {name!r}") from None


def resolve_cfg(cfg: Any) -> Config:
    """
    Accept a Config, a catalog name, or any object with the Config attributes.
    """
    if isinstance(cfg, Config):
        return cfg
    if isinstance(cfg, str):
        return lookup(cfg)
    _check_params(cfg)
    return Config(
        width=cfg.width,
        polynomial=cfg.polynomial,
        initial_value=cfg.initial_value,
        bit_order=cfg.bit_order,
        input_reflected=cfg.input_reflected,
        output_reflected=cfg.output_reflected,
        final_xor=cfg.final_xor,
        name=getattr(cfg, "name", None),
    )


# ============================
# Uniform algorithm API
# ============================
#
# The register is kept reflected (highest-order term in bit 0) while the feed
# is LSB-first, and in natural orientation otherwise.

def width(cfg: Any) -> int:
    return cfg.width


def init(*, cfg: Config) -> int:
    if cfg.lsb_first:
        return reflect_bits(cfg.initial_value, cfg.width)
    return cfg.initial_value


def update(reg: int, data: bytes, *, cfg: Config) -> int:
    """
    Table-driven update, one byte per step.
    """
    table = cfg.table
    if cfg.lsb_first:
        for b in data:
            reg = (reg >> 8) ^ table[(reg ^ b) & 0xFF]
        return reg

    w = max(cfg.width, 8)
    shift = w - cfg.width
    top_shift = w - 8
    m = mask(w)
    reg <<= shift
    for b in data:
        reg = ((reg << 8) & m) ^ table[((reg >> top_shift) ^ b) & 0xFF]
    return reg >> shift


def update_bits(reg: int, bits: Iterable[int], *, cfg: Config) -> int:
    """
    Bit-by-bit division. Bits enter in the order given; bit_order only
    governs how whole bytes are serialized, so it is not consulted here.
    """
    if cfg.lsb_first:
        rpoly = reflect_bits(cfg.polynomial, cfg.width)
        for bit in bits:
            fb = (reg ^ bit) & 1
            reg >>= 1
            if fb:
                reg ^= rpoly
        return reg

    top = cfg.width - 1
    m = mask(cfg.width)
    for bit in bits:
        fb = ((reg >> top) ^ bit) & 1
        reg = (reg << 1) & m
        if fb:
            reg ^= cfg.polynomial
    return reg


def update_bitwise(reg: int, data: bytes, *, cfg: Config) -> int:
    """
    Reference path: serialize bytes in feed order and divide bit by bit.
    Must agree with update() for every config.
    """
    return update_bits(reg, bytes_to_bits(data, msb_first=not cfg.lsb_first), cfg=cfg)


def final(reg: int, *, cfg: Config) -> int:
    if cfg.lsb_first != cfg.output_reflected:
        reg = reflect_bits(reg, cfg.width)
    return (reg ^ cfg.final_xor) & mask(cfg.width)


# ============================
# Convenience
# ============================

def crc(data: bytes, cfg: Any) -> int:
    c = resolve_cfg(cfg)
    return final(update(init(cfg=c), bytes(data), cfg=c), cfg=c)


def check(cfg: Any) -> int:
    """CRC of b"123456789", the customary parameter-set check value."""
    return crc(b"123456789", cfg)


def crc16_ccitt_false(data: bytes) -> int:
    """
    CRC-16/CCITT-FALSE
      width=16 poly=0x1021 init=0xFFFF refin=false refout=false xorout=0x0000
      Check("123456789") = 0x29B1
    """
    return crc(data, CATALOG["CRC-16/IBM-3740"])


def crc32_ieee(data: bytes) -> int:
    """
    CRC-32/ISO-HDLC (aka "IEEE 802.3")
      width=32 poly=0x04C11DB7 init=0xFFFFFFFF refin=true refout=true xorout=0xFFFFFFFF
      Check("123456789") = 0xCBF43926
    """
    return crc(data, CATALOG["CRC-32/ISO-HDLC"])

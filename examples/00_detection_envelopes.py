from checkseq.algorithms import registry
from checkseq.algorithms.modules.adler import Config as AdlerConfig
from checkseq.utils.logger import setup_logger
from checkseq.verify.corrupt import detects, flip_bits, flip_burst


def error_patterns(payload: bytes) -> dict[str, bytes]:
    return {
        "1 bit": flip_bits(payload, [3]),
        "2 bits, same column": flip_bits(payload, [3, 3 + 8]),
        "2 bits, diff column": flip_bits(payload, [3, 12]),
        "3 bits": flip_bits(payload, [1, 9, 30]),
        "burst 12": flip_burst(payload, 5, 12),
        "burst 33": flip_burst(payload, 0, 33),
        "swap bytes 0/1": payload[1:2] + payload[0:1] + payload[2:],
    }


if __name__ == "__main__":
    setup_logger()

    payload = b"The quick brown fox jumps over the lazy dog"
    algorithms = [
        ("parity", None),
        ("lrc", None),
        ("addition", None),
        ("ones_complement", None),
        ("internet", None),
        ("adler", AdlerConfig()),
        ("crc", "CRC-16/IBM-3740"),
        ("crc", "CRC-32/ISO-HDLC"),
    ]

    patterns = error_patterns(payload)
    header = f"{'algorithm':<28}" + "".join(f"{name:>22}" for name in patterns)
    print(header)
    for algorithm, cfg in algorithms:
        label = algorithm if cfg is None or not isinstance(cfg, str) else f"{algorithm}:{cfg}"
        row = f"{label:<28}"
        for corrupted in patterns.values():
            row += f"{'caught' if detects(algorithm, payload, corrupted, cfg=cfg) else 'MISSED':>22}"
        print(row)

    cw = registry.codeword("crc", payload, cfg="CRC-32/ISO-HDLC")
    print(f"\ncode word tail: {cw[-4:].hex()}  verifies: {registry.verify_codeword('crc', cw, cfg='CRC-32/ISO-HDLC')}")

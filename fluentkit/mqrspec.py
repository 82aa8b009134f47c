"""Micro QR Code specification tables and the function-pattern frame."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "ECLevel",
    "EncodeMode",
    "VERSION_MAX",
    "WIDTH_MAX",
    "MODEID_NUM",
    "MODEID_AN",
    "MODEID_8",
    "MODEID_KANJI",
    "get_data_length_bit",
    "get_data_length",
    "get_ecc_length",
    "get_width",
    "length_indicator",
    "maximum_words",
    "get_format_info",
    "new_frame",
]

VERSION_MAX = 4
WIDTH_MAX = 17

MODEID_NUM = 0
MODEID_AN = 1
MODEID_8 = 2
MODEID_KANJI = 3


class ECLevel(IntEnum):
    """Error correction level."""

    L = 0
    M = 1
    Q = 2
    H = 3


class EncodeMode(IntEnum):
    """Data encoding mode."""

    NUM = 0
    AN = 1
    BYTE = 2
    KANJI = 3


# (width, ECC bytes per level L, M, Q, H), indexed by version.
_CAPACITY = (
    (0, (0, 0, 0, 0)),
    (11, (2, 0, 0, 0)),
    (13, (5, 6, 0, 0)),
    (15, (6, 8, 0, 0)),
    (17, (8, 10, 14, 0)),
)

_LENGTH_TABLE_BITS = (
    (3, 4, 5, 6),
    (0, 3, 4, 5),
    (0, 0, 4, 5),
    (0, 0, 3, 4),
)

_FORMAT_INFO = (
    (0x4445, 0x55AE, 0x6793, 0x7678, 0x06DE, 0x1735, 0x2508, 0x34E3),
    (0x4172, 0x5099, 0x62A4, 0x734F, 0x03E9, 0x1202, 0x203F, 0x31D4),
    (0x4E2B, 0x5FC0, 0x6DFD, 0x7C16, 0x0CB0, 0x1D5B, 0x2F66, 0x3E8D),
    (0x4B1C, 0x5AF7, 0x68CA, 0x7921, 0x0987, 0x186C, 0x2A51, 0x3BBA),
)

_TYPE_TABLE = (
    (-1, -1, -1),
    (0, -1, -1),
    (1, 2, -1),
    (3, 4, -1),
    (5, 6, 7),
)

_FINDER = (
    (0xC1, 0xC1, 0xC1, 0xC1, 0xC1, 0xC1, 0xC1),
    (0xC1, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC1),
    (0xC1, 0xC0, 0xC1, 0xC1, 0xC1, 0xC0, 0xC1),
    (0xC1, 0xC0, 0xC1, 0xC1, 0xC1, 0xC0, 0xC1),
    (0xC1, 0xC0, 0xC1, 0xC1, 0xC1, 0xC0, 0xC1),
    (0xC1, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC1),
    (0xC1, 0xC1, 0xC1, 0xC1, 0xC1, 0xC1, 0xC1),
)


def _check_version(version: int) -> None:
    if not 1 <= version <= VERSION_MAX:
        raise ValueError(f"Micro QR version must be 1..{VERSION_MAX}, got {version}")


def get_data_length_bit(version: int, level: ECLevel) -> int:
    """Maximum data code length in bits, or 0 if the level is unsupported."""
    _check_version(version)
    width, ecc_table = _CAPACITY[version]
    ecc = ecc_table[ECLevel(level)]
    if ecc == 0:
        return 0
    w = width - 1
    return w * w - 64 - ecc * 8


def get_data_length(version: int, level: ECLevel) -> int:
    """Maximum data code length in bytes."""
    return (get_data_length_bit(version, level) + 4) // 8


def get_ecc_length(version: int, level: ECLevel) -> int:
    """Error correction code length in bytes."""
    _check_version(version)
    return _CAPACITY[version][1][ECLevel(level)]


def get_width(version: int) -> int:
    """Edge length of the symbol in modules."""
    _check_version(version)
    return _CAPACITY[version][0]


def length_indicator(mode: EncodeMode, version: int) -> int:
    """Size in bits of the length indicator for a mode and version."""
    _check_version(version)
    return _LENGTH_TABLE_BITS[EncodeMode(mode)][version - 1]


def maximum_words(mode: EncodeMode, version: int) -> int:
    """Largest length the indicator can hold; in bytes for Kanji."""
    mode = EncodeMode(mode)
    words = (1 << length_indicator(mode, version)) - 1
    if mode is EncodeMode.KANJI:
        words *= 2
    return words


def get_format_info(mask: int, version: int, level: ECLevel) -> int:
    """BCH-encoded format information, or 0 for an unsupported combination."""
    if not 0 <= mask <= 3:
        return 0
    if not 1 <= version <= VERSION_MAX:
        return 0
    if level == ECLevel.H:
        return 0
    type_ = _TYPE_TABLE[version][ECLevel(level)]
    if type_ < 0:
        return 0
    return _FORMAT_INFO[mask][type_]


def new_frame(version: int) -> bytearray:
    """Return a row-major frame holding the finder, separator, format and timing areas."""
    _check_version(version)
    width = get_width(version)
    frame = bytearray(width * width)

    for y, row in enumerate(_FINDER):
        frame[y * width:y * width + 7] = bytes(row)

    for y in range(7):
        frame[y * width + 7] = 0xC0
    frame[width * 7:width * 7 + 8] = b"\xc0" * 8

    frame[width * 8 + 1:width * 8 + 9] = b"\x84" * 8
    for y in range(1, 8):
        frame[y * width + 8] = 0x84

    for offset, x in enumerate(range(1, width - 7)):
        value = 0x90 | (x & 1)
        frame[8 + offset] = value
        frame[width * (8 + offset)] = value

    return frame
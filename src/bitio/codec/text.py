"""Text codecs.

Four alphabets, each trading generality for size:

- Alpha: QR-code style alphanumeric set (lower case), 2 characters per 11 bits
- UTF8: modified UTF-8 with the redundant continuation bits removed
- Hex: 4 bits per hexadecimal digit
- 3B40: 40 symbols suited to file extensions, 3 characters per 16 bits

Each ``make_*`` returns a bit string; each ``read_*`` takes the character
count and consumes the matching bits from a stream.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..exceptions import InsufficientDataError, InvalidInputError
from .primitives import read_int

if TYPE_CHECKING:
    from .bitstream import BitStream

ALPHA_CHARSET = "0123456789abcdefghijklmnopqrstuvwxyz $%*+-./:"
B40_CHARSET = "0123456789abcdefghijklmnopqrstuvwxyz#$&."
HEX_CHARSET = "0123456789abcdef"

_ALPHA_INDEX = {ch: i for i, ch in enumerate(ALPHA_CHARSET)}
_B40_INDEX = {ch: i for i, ch in enumerate(B40_CHARSET)}


def _index(table: dict[str, int], ch: str) -> int:
    try:
        return table[ch]
    except KeyError as err:
        raise InvalidInputError(f"Character {ch!r} cannot be encoded") from err


def _symbol(charset: str, index: int) -> str:
    if index >= len(charset):
        raise InvalidInputError(f"Decoded symbol {index} outside alphabet of {len(charset)}")
    return charset[index]


# Alpha


def make_alpha(message: str) -> str:
    """Encode message with the 45 character alphanumeric set.

    Pairs of characters take 11 bits (``c0 * 45 + c1``); an odd trailing
    character takes 6 bits.

    Raises:
        InvalidInputError: If a character is outside the alphabet
    """
    values = [_index(_ALPHA_INDEX, ch) for ch in message]
    parts = []
    for i in range(0, len(values) - 1, 2):
        parts.append(format(values[i] * 45 + values[i + 1], "011b"))
    if len(values) % 2:
        parts.append(format(values[-1], "06b"))
    return "".join(parts)


def read_alpha(stream: BitStream, length: int) -> str:
    """Read length characters encoded with :func:`make_alpha`."""
    chars = []
    for _ in range(length // 2):
        pair = read_int(stream, 11)
        chars.append(_symbol(ALPHA_CHARSET, pair // 45))
        chars.append(_symbol(ALPHA_CHARSET, pair % 45))
    if length % 2:
        chars.append(_symbol(ALPHA_CHARSET, read_int(stream, 6)))
    return "".join(chars)


# UTF8

# (header, payload bits, exclusive upper bound)
_UTF8_WIDTHS = (
    ("0", 7, 0x80),
    ("10", 11, 0x800),
    ("110", 16, 0x10000),
    ("111", 21, 0x200000),
)


def make_utf8(message: str) -> str:
    """Encode message as modified UTF-8.

    Not true UTF-8: the continuation markers are dropped and only a short
    header announces the width of each code point:

    - ``0``   + 7 bits  for U+0000 to U+007F
    - ``10``  + 11 bits for U+0080 to U+07FF
    - ``110`` + 16 bits for U+0800 to U+FFFF
    - ``111`` + 21 bits for everything above
    """
    parts = []
    for ch in message:
        code_point = ord(ch)
        for header, width, limit in _UTF8_WIDTHS:
            if code_point < limit:
                parts.append(header + format(code_point, f"0{width}b"))
                break
    return "".join(parts)


def read_utf8(stream: BitStream, length: int) -> str:
    """Read length characters (not bits) encoded with :func:`make_utf8`."""
    chars = []
    for _ in range(length):
        if stream.get_bits(1) == "0":
            code_point = read_int(stream, 7)
        elif stream.get_bits(1) == "0":
            code_point = read_int(stream, 11)
        elif stream.get_bits(1) == "0":
            code_point = read_int(stream, 16)
        else:
            code_point = read_int(stream, 21)
        if code_point > 0x10FFFF:
            raise InvalidInputError(f"Decoded code point {code_point:#x} is out of range")
        chars.append(chr(code_point))
    return "".join(chars)


# Hex


def make_hex(value: str) -> str:
    """Encode a non-empty hexadecimal string, 4 bits per digit.

    Upper and lower case digits are accepted. Digits are stored by value, so
    reading them back always yields lower case.

    Raises:
        InvalidInputError: If value is empty or has a non-hex character
    """
    if not isinstance(value, str) or not value:
        raise InvalidInputError(f"Expected a hex string, got {value!r}")
    lowered = value.lower()
    if not set(lowered) <= set(HEX_CHARSET):
        raise InvalidInputError(f"Expected a hex string, got {value!r}")
    return "".join(format(int(ch, 16), "04b") for ch in lowered)


def read_hex(stream: BitStream, length: Optional[int] = None) -> str:
    """Read length hex digits, or every remaining whole nibble if length is None.

    Raises:
        InsufficientDataError: If no length is given and fewer than 4 bits remain
        InvalidInputError: If length is given and not positive
    """
    if length is None:
        length = stream.remaining // 4
        if length <= 0:
            raise InsufficientDataError("No whole nibbles left to read")
    elif length <= 0:
        raise InvalidInputError(f"Invalid hex length: {length}")
    return "".join(HEX_CHARSET[read_int(stream, 4)] for _ in range(length))


# 3B40


def make_3b40(value: str) -> str:
    """Encode value with the 40 symbol file-extension alphabet.

    Every 3 characters take 16 bits. A trailing single character takes 5 bits
    and a trailing pair takes 11 bits. The 5 bit tail only reaches index 31,
    so a lone trailing ``w x y z # $ & .`` cannot be encoded.

    Raises:
        InvalidInputError: If a character is outside ``0-9a-z#$&.``, or a lone
            trailing character is beyond index 31
    """
    values = [_index(_B40_INDEX, ch) for ch in value]
    parts = []
    full = len(values) - len(values) % 3
    for i in range(0, full, 3):
        parts.append(format((values[i] * 40 + values[i + 1]) * 40 + values[i + 2], "016b"))
    rest = values[full:]
    if len(rest) == 1:
        if rest[0] >= 32:
            raise InvalidInputError(
                f"Character {value[-1]!r} does not fit the 5 bit tail of a 3B40 string"
            )
        parts.append(format(rest[0], "05b"))
    elif len(rest) == 2:
        parts.append(format(rest[0] * 40 + rest[1], "011b"))
    return "".join(parts)


def read_3b40(stream: BitStream, length: int) -> str:
    """Read length characters encoded with :func:`make_3b40`."""
    chars = []
    for _ in range(length // 3):
        triple = read_int(stream, 16)
        chars.append(_symbol(B40_CHARSET, triple // 1600))
        chars.append(_symbol(B40_CHARSET, triple % 1600 // 40))
        chars.append(_symbol(B40_CHARSET, triple % 40))
    if length % 3 == 1:
        chars.append(_symbol(B40_CHARSET, read_int(stream, 5)))
    elif length % 3 == 2:
        pair = read_int(stream, 11)
        chars.append(_symbol(B40_CHARSET, pair // 40))
        chars.append(_symbol(B40_CHARSET, pair % 40))
    return "".join(chars)

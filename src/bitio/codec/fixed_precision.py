"""Fixed-precision decimal codec.

Non-negative integers up to 18,014,398,509,481,983 are stored as
``mantissa * 10**exponent`` in 1 to 7 bytes. The leading bits select the size:

========  =======  ===============  ==============
 bytes     header   mantissa bits    exponent bits
========  =======  ===============  ==============
 1         000      5                0
 2         001      9                4
 3         010      17               4
 4         011      25               4
 5         100      34               3
 6         101      42               3
 7         11       54               0
========  =======  ===============  ==============

All arithmetic is done on Python ints, so there is no rounding.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidInputError
from .primitives import as_integral, read_big_int, read_int

if TYPE_CHECKING:
    from .bitstream import BitStream

MAX_FIXED_PRECISION = 18_014_398_509_481_983

# Largest mantissa representable with no exponent field (42 bit, 6 byte layout)
_MAX_EXPONENT_MANTISSA = (1 << 42) - 1
# Largest mantissa representable with a 4 bit exponent field (25 bit, 4 byte layout)
_MAX_4BIT_EXPONENT_MANTISSA = (1 << 25) - 1

# (upper mantissa bound, header, mantissa bits, exponent bits), smallest first
_LAYOUTS = (
    ((1 << 9) - 1, "001", 9, 4),
    ((1 << 17) - 1, "010", 17, 4),
    ((1 << 25) - 1, "011", 25, 4),
    ((1 << 34) - 1, "100", 34, 3),
    ((1 << 42) - 1, "101", 42, 3),
)


def make_fixed_precision(value: Any) -> str:
    """Encode a whole number using the fewest bytes.

    Args:
        value: Integer in ``[0, 18_014_398_509_481_983]``

    Returns:
        Between 8 and 56 bits, always a whole number of bytes

    Raises:
        InvalidInputError: If value is not a whole number or is out of range

    Example:
        >>> make_fixed_precision(19)
        '00010011'
        >>> len(make_fixed_precision(5004000))
        24
    """
    if value is None:
        raise InvalidInputError("Expected an integer, got None")
    value = as_integral(value)
    if value < 0 or value > MAX_FIXED_PRECISION:
        raise InvalidInputError(f"Value {value} outside [0, {MAX_FIXED_PRECISION}]")

    if value < 32:
        return format(value, "08b")

    mantissa, exponent = value, 0
    while mantissa % 10 == 0:
        mantissa //= 10
        exponent += 1

    if mantissa > _MAX_EXPONENT_MANTISSA:
        mantissa, exponent = value, 0
    elif mantissa > _MAX_4BIT_EXPONENT_MANTISSA and exponent > 7:
        mantissa *= 10 ** (exponent - 7)
        exponent = 7
    elif exponent > 15:
        # 4 bit exponent fields top out at 15
        mantissa *= 10 ** (exponent - 15)
        exponent = 15

    for limit, header, mantissa_bits, exponent_bits in _LAYOUTS:
        if mantissa <= limit:
            return (
                header
                + format(mantissa, f"0{mantissa_bits}b")
                + format(exponent, f"0{exponent_bits}b")
            )
    return "11" + format(mantissa, "054b")


def read_fixed_precision(stream: BitStream) -> int:
    """Read a number encoded with :func:`make_fixed_precision`."""
    length = read_int(stream, 3) + 1

    # a 7 byte value only has a 2 bit header, the third bit belongs to the mantissa
    if length >= 7:
        stream.move_pointer(-1)
        length = 7

    exponent = 0
    if length == 1:
        mantissa = read_big_int(stream, 5)
    elif length < 5:
        mantissa = read_big_int(stream, length * 8 - 7)
        exponent = read_big_int(stream, 4)
    elif length < 7:
        mantissa = read_big_int(stream, length * 8 - 6)
        exponent = read_big_int(stream, 3)
    else:
        mantissa = read_big_int(stream, 54)

    return mantissa * 10**exponent

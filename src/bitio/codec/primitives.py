"""Byte arrays and unsigned integers.

Integers are written big-endian and zero-padded to an exact bit width. The
``int`` variant keeps the historical 31-bit ceiling; the ``big_int`` variant
has no ceiling and is used for wide fields such as 32-bit lengths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidInputError, LengthExceededError

if TYPE_CHECKING:
    from .bitstream import BitStream

MAX_INT_BITS = 31


def as_integral(value: Any) -> int:
    """Return value as an int if it is a whole number.

    Accepts ints and integral floats. Booleans are rejected.

    Raises:
        InvalidInputError: If value is not a whole number
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"Expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidInputError(f"Expected an integer, got {value!r}")


def _to_bits(value: int, length: int) -> str:
    if length < 0:
        raise InvalidInputError(f"Bit width must be >= 0, got {length}")
    if value < 0:
        raise InvalidInputError(f"Expected a non-negative integer, got {value}")
    if value >= 1 << length:
        raise LengthExceededError(f"Value {value} requires more than {length} bits")
    return format(value, f"0{length}b") if length else ""


def make_int(value: int, length: int) -> str:
    """Return the bits of an unsigned integer.

    Args:
        value: Integer to encode (0 to 2**length - 1)
        length: Field width in bits (at most 31)

    Returns:
        Exactly length bits, most significant first

    Raises:
        InvalidInputError: If value is negative or not a whole number
        LengthExceededError: If length exceeds 31 or value does not fit
    """
    if length > MAX_INT_BITS:
        raise LengthExceededError(f"Max length exceeded: {length} > {MAX_INT_BITS} bits")
    return _to_bits(as_integral(value), length)


def read_int(stream: BitStream, length: int) -> int:
    """Read an unsigned integer of at most 31 bits."""
    if length > MAX_INT_BITS:
        raise LengthExceededError(f"Max length exceeded: {length} > {MAX_INT_BITS} bits")
    bits = stream.get_bits(length)
    return int(bits, 2) if bits else 0


def make_big_int(value: int, length: int) -> str:
    """Return the bits of an unsigned integer of any width.

    Raises:
        InvalidInputError: If value is negative or not an int
        LengthExceededError: If value does not fit in length bits
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"Expected an int, got {value!r}")
    return _to_bits(value, length)


def read_big_int(stream: BitStream, length: int) -> int:
    """Read an unsigned integer of any width."""
    bits = stream.get_bits(length)
    return int(bits, 2) if bits else 0


def make_buffer(data: bytes) -> str:
    """Return the bits of a byte string, 8 bits per byte, MSB first."""
    return "".join(format(byte, "08b") for byte in data)


def read_buffer(stream: BitStream, length: int) -> bytes:
    """Read length whole bytes (not necessarily byte-aligned in the stream)."""
    bits = stream.get_bits(length * 8)
    return int(bits, 2).to_bytes(length, "big") if length else b""

"""Exception hierarchy for bitio.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BitIOError for easy catching of any bitio-specific error.
Each one also derives from the closest built-in exception so generic handlers keep working.
"""

from __future__ import annotations


class BitIOError(Exception):
    """Base exception for all bitio errors."""

    pass


class RangeError(BitIOError, IndexError):
    """Raised when the cursor is moved or set outside ``[0, length]``."""

    pass


class InsufficientDataError(BitIOError, EOFError):
    """Raised when a read needs more bits than remain after the cursor.

    Examples:
        - ``get_bits(8)`` with only 5 bits left
        - A length prefix announcing more bytes than the stream holds
        - ``get_hex()`` with fewer than 4 bits left
    """

    pass


class InvalidInputError(BitIOError, ValueError):
    """Raised when a value cannot be represented by the requested encoding.

    Examples:
        - Bit string containing characters other than 0 and 1
        - Character outside a text codec's alphabet
        - Malformed address or failed address checksum
        - Unknown opcode name or text codec name
        - Negative or non-integral number
    """

    pass


class LengthExceededError(BitIOError, OverflowError):
    """Raised when a value is too large for its fixed-width field.

    Examples:
        - ``make_int(256, 8)``
        - A message longer than the best-fit length field can describe
        - Integer widths above the 31-bit machine-integer limit
    """

    pass


class AlignmentError(BitIOError):
    """Raised when converting to bytes and the bit length is not a multiple of 8."""

    pass


class InvalidOpCodeError(BitIOError):
    """Raised when a decoded script opcode has no meaning (opcode 80 or unnamed)."""

    pass


class InvalidKeyError(BitIOError):
    """Raised when an encrypted payload fails authentication with the given key."""

    pass

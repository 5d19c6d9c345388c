"""Bit-level storage with a movable cursor.

This module provides the growable bit vector every codec writes into and reads
from. Bits are exchanged as strings of ``"0"``/``"1"`` characters and stored
packed, most significant bit first, in a ``bytearray``.

Appending is amortized O(1) per bit. Inserting in the middle of the stream
rewrites everything after the cursor, so it costs O(length) in the worst case.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol

from ..exceptions import AlignmentError, InsufficientDataError, InvalidInputError, RangeError

_BINARY_CHARS = frozenset("01")


class RandomSource(Protocol):
    """Anything that can produce random bits (``random.Random`` qualifies)."""

    def getrandbits(self, k: int) -> int: ...


def is_binary(value: object) -> bool:
    """Return True if value is a non-empty string of 0 and 1 characters."""
    return isinstance(value, str) and bool(value) and set(value) <= _BINARY_CHARS


def check_binary(value: object) -> str:
    """Validate a bit string, allowing the empty string.

    Raises:
        InvalidInputError: If value is not a string made only of 0 and 1
    """
    if not isinstance(value, str) or not set(value) <= _BINARY_CHARS:
        raise InvalidInputError(f"Expected a binary string, got {value!r}")
    return value


class BitStream:
    """Ordered sequence of bits plus a cursor.

    Reads (``get_*``) start at the cursor and advance it. Inserts splice data in
    at the cursor and by default move the cursor past it. Appends add to the end
    and never move the cursor.

    Example:
        >>> stream = BitStream.from_bytes(b"\\x94")
        >>> stream.get_bits(6)
        '100101'
        >>> stream.insert_bits("1001")
        >>> stream.pointer
        10
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        """Initialize an empty stream.

        Args:
            rng: Source of random bits for :meth:`pad_random`. Defaults to
                ``random.SystemRandom()``; pass a seeded ``random.Random`` for
                reproducible padding.
        """
        self._data = bytearray()
        self._length = 0
        self._pointer = 0
        self._rng: RandomSource = rng if rng is not None else random.SystemRandom()

    @classmethod
    def from_bytes(cls, data: bytes, rng: Optional[RandomSource] = None):
        """Create a stream holding the bits of data with the cursor at 0."""
        stream = cls(rng=rng)
        stream._data.extend(data)
        stream._length = len(data) * 8
        return stream

    # Cursor

    @property
    def pointer(self) -> int:
        """Current bit offset of the cursor."""
        return self._pointer

    @pointer.setter
    def pointer(self, location: int) -> None:
        if location < 0 or location > self._length:
            raise RangeError(f"Pointer {location} out of range [0, {self._length}]")
        self._pointer = location

    def move_pointer(self, amount: int) -> None:
        """Move the cursor by amount bits (negative moves backwards).

        Raises:
            RangeError: If the new position would fall outside the stream
        """
        new_point = self._pointer + amount
        if new_point < 0 or new_point > self._length:
            raise RangeError(f"Pointer moved out of range: {new_point} not in [0, {self._length}]")
        self._pointer = new_point

    @property
    def length(self) -> int:
        """Total number of bits in the stream."""
        return self._length

    @property
    def remaining(self) -> int:
        """Number of bits after the cursor."""
        return self._length - self._pointer

    # Raw storage

    def _bit(self, index: int) -> int:
        return (self._data[index >> 3] >> (7 - (index & 7))) & 1

    def _slice(self, start: int, stop: int) -> str:
        return "".join("1" if self._bit(i) else "0" for i in range(start, stop))

    def _push(self, bits: str) -> None:
        for ch in bits:
            offset = self._length & 7
            if offset == 0:
                self._data.append(0)
            if ch == "1":
                self._data[-1] |= 0x80 >> offset
            self._length += 1

    def _truncate(self, length: int) -> None:
        del self._data[(length + 7) >> 3 :]
        if length & 7:
            self._data[-1] &= (0xFF << (8 - (length & 7))) & 0xFF
        self._length = length

    # Bits

    def get_bits(self, length: int) -> str:
        """Read length bits and advance the cursor.

        Raises:
            InsufficientDataError: If fewer than length bits remain
        """
        if length < 0:
            raise InvalidInputError(f"Bit count must be >= 0, got {length}")
        if self.remaining < length:
            raise InsufficientDataError(
                f"Not enough bits: need {length}, have {self.remaining}"
            )
        value = self._slice(self._pointer, self._pointer + length)
        self._pointer += length
        return value

    def append_bits(self, value: str) -> None:
        """Add bits to the end of the stream. Does not move the cursor.

        Raises:
            InvalidInputError: If value contains anything other than 0 and 1
        """
        self._push(check_binary(value))

    def insert_bits(self, value: str, update_pointer: bool = True) -> None:
        """Splice bits in at the cursor.

        Args:
            value: Bits to insert
            update_pointer: If True, move the cursor past the inserted bits

        Raises:
            InvalidInputError: If value contains anything other than 0 and 1
        """
        check_binary(value)
        if self._pointer == self._length:
            self._push(value)
        else:
            tail = self._slice(self._pointer, self._length)
            self._truncate(self._pointer)
            self._push(value)
            self._push(tail)
        if update_pointer:
            self._pointer += len(value)

    def check_bits(self, check: str) -> bool:
        """Return True if the bits after the cursor start with check.

        The cursor is not moved and running out of bits simply yields False.
        """
        if len(check) > self.remaining:
            return False
        return self._slice(self._pointer, self._pointer + len(check)) == check

    # Padding

    def _pad_needed(self, multiple: int) -> int:
        if multiple <= 0:
            raise InvalidInputError(f"Padding multiple must be > 0, got {multiple}")
        needed = multiple - (self.remaining % multiple)
        return 0 if needed == multiple else needed

    def pad_zero(self, multiple: int) -> None:
        """Append zeros until the bits after the cursor are a multiple of multiple."""
        self._push("0" * self._pad_needed(multiple))

    def pad_one(self, multiple: int) -> None:
        """Pad exactly like :meth:`pad_zero`.

        Despite the name this appends zero bits. Existing payloads depend on
        the zero fill.
        """
        self._push("0" * self._pad_needed(multiple))

    def pad_random(self, multiple: int) -> None:
        """Append random bits until the bits after the cursor are a multiple of multiple."""
        needed = self._pad_needed(multiple)
        if needed:
            self._push(format(self._rng.getrandbits(needed), f"0{needed}b"))

    # Bytes

    def to_bytes(self) -> bytes:
        """Return the whole stream as bytes.

        Raises:
            AlignmentError: If the length is not a multiple of 8 bits
        """
        if self._length % 8 != 0:
            raise AlignmentError(
                f"Must be a multiple of 8 bits to convert to bytes, have {self._length}"
            )
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={self._length}, pointer={self._pointer})"

"""Typed read/write surface over a bit stream.

Every field type comes in three flavours:

- ``get_*``: read at the cursor and advance it
- ``append_*``: write at the end of the stream, cursor untouched
- ``insert_*``: write at the cursor, by default moving the cursor past the new data

The pure ``make_*`` functions in :mod:`bitio.codec` produce the same bits
without touching a stream. Writes validate before mutating, and reads put the
cursor back if they fail part way, so a failed call leaves the stream as it was.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional, TypeVar

from .codec import address, best_fit, encrypted, fixed_precision, primitives, script, text, varlen
from .codec.bitstream import BitStream
from .network import NetworkParams

F = TypeVar("F", bound=Callable[..., Any])


def _atomic_read(method: F) -> F:
    """Restore the cursor if a multi-part read fails."""

    @functools.wraps(method)
    def wrapper(self: BitIO, *args: Any, **kwargs: Any) -> Any:
        start = self._pointer
        try:
            return method(self, *args, **kwargs)
        except Exception:
            self._pointer = start
            raise

    return wrapper  # type: ignore[return-value]


class BitIO(BitStream):
    """Bit stream with typed field codecs.

    Example:
        >>> io = BitIO()
        >>> io.insert_int(99, 7)
        >>> io.append_fixed_precision(5004000)
        >>> io.insert_3b40("exe")
        >>> io.pointer = 0
        >>> io.get_int(7)
        99
    """

    def _write(self, bits: str, update_pointer: Optional[bool]) -> None:
        # None appends, a bool inserts at the cursor
        if update_pointer is None:
            self.append_bits(bits)
        else:
            self.insert_bits(bits, update_pointer)

    # Buffer

    def get_buffer(self, length: int) -> bytes:
        """Read length bytes."""
        return primitives.read_buffer(self, length)

    def append_buffer(self, data: bytes) -> None:
        self._write(primitives.make_buffer(data), None)

    def insert_buffer(self, data: bytes, update_pointer: bool = True) -> None:
        self._write(primitives.make_buffer(data), update_pointer)

    # Variable length

    @_atomic_read
    def get_x_bit_variable_length(self, x: int) -> str:
        """Read x bit chunks until one contains a 1."""
        return varlen.read_x_bit_variable_length(self, x)

    def append_x_bit_variable_length(self, value: str, x: int) -> None:
        self._write(varlen.make_x_bit_variable_length(value, x), None)

    def insert_x_bit_variable_length(self, value: str, x: int, update_pointer: bool = True) -> None:
        self._write(varlen.make_x_bit_variable_length(value, x), update_pointer)

    # Integers

    def get_int(self, length: int) -> int:
        """Read an unsigned integer of at most 31 bits."""
        return primitives.read_int(self, length)

    def append_int(self, value: int, length: int) -> None:
        self._write(primitives.make_int(value, length), None)

    def insert_int(self, value: int, length: int, update_pointer: bool = True) -> None:
        self._write(primitives.make_int(value, length), update_pointer)

    def get_big_int(self, length: int) -> int:
        """Read an unsigned integer of any width."""
        return primitives.read_big_int(self, length)

    def append_big_int(self, value: int, length: int) -> None:
        self._write(primitives.make_big_int(value, length), None)

    def insert_big_int(self, value: int, length: int, update_pointer: bool = True) -> None:
        self._write(primitives.make_big_int(value, length), update_pointer)

    # Text

    @_atomic_read
    def get_alpha(self, length: int) -> str:
        return text.read_alpha(self, length)

    def append_alpha(self, message: str) -> None:
        self._write(text.make_alpha(message), None)

    def insert_alpha(self, message: str, update_pointer: bool = True) -> None:
        self._write(text.make_alpha(message), update_pointer)

    @_atomic_read
    def get_utf8(self, length: int) -> str:
        """Read length characters of modified UTF-8."""
        return text.read_utf8(self, length)

    def append_utf8(self, message: str) -> None:
        self._write(text.make_utf8(message), None)

    def insert_utf8(self, message: str, update_pointer: bool = True) -> None:
        self._write(text.make_utf8(message), update_pointer)

    @_atomic_read
    def get_hex(self, length: Optional[int] = None) -> str:
        """Read length hex digits, or all remaining whole nibbles when length is None."""
        return text.read_hex(self, length)

    def append_hex(self, value: str) -> None:
        self._write(text.make_hex(value), None)

    def insert_hex(self, value: str, update_pointer: bool = True) -> None:
        self._write(text.make_hex(value), update_pointer)

    @_atomic_read
    def get_3b40(self, length: int) -> str:
        return text.read_3b40(self, length)

    def append_3b40(self, value: str) -> None:
        self._write(text.make_3b40(value), None)

    def insert_3b40(self, value: str, update_pointer: bool = True) -> None:
        self._write(text.make_3b40(value), update_pointer)

    # Best fit string

    def append_best_string(
        self, message: str, length_bits: int, options: best_fit.BestStringOptions
    ) -> None:
        """Append message using the smallest codec in options."""
        self._write(best_fit.make_best_string(message, length_bits, options), None)

    def insert_best_string(
        self,
        message: str,
        length_bits: int,
        options: best_fit.BestStringOptions,
        update_pointer: bool = True,
    ) -> None:
        """Insert message using the smallest codec in options."""
        self._write(best_fit.make_best_string(message, length_bits, options), update_pointer)

    # Address

    @_atomic_read
    def get_address(self, network: Optional[NetworkParams] = None) -> str:
        """Read an address for network (DigiByte by default)."""
        return address.read_address(self, network)

    def append_address(self, value: str, network: Optional[NetworkParams] = None) -> None:
        self._write(address.make_address(value, network), None)

    def insert_address(
        self, value: str, network: Optional[NetworkParams] = None, update_pointer: bool = True
    ) -> None:
        self._write(address.make_address(value, network), update_pointer)

    # Fixed precision

    @_atomic_read
    def get_fixed_precision(self) -> int:
        return fixed_precision.read_fixed_precision(self)

    def append_fixed_precision(self, value: int) -> None:
        self._write(fixed_precision.make_fixed_precision(value), None)

    def insert_fixed_precision(self, value: int, update_pointer: bool = True) -> None:
        self._write(fixed_precision.make_fixed_precision(value), update_pointer)

    # Script primitives

    @_atomic_read
    def get_bitcoin(self) -> script.ScriptValue:
        """Read one script element (bytes, small int, or opcode name)."""
        return script.read_bitcoin(self)

    def append_bitcoin(self, value: Any) -> None:
        self._write(script.make_bitcoin(value), None)

    def insert_bitcoin(self, value: Any, update_pointer: bool = True) -> None:
        self._write(script.make_bitcoin(value), update_pointer)

    # Encrypted

    def get_encrypted(self, recipient_private_key: encrypted.PrivateKeyLike) -> bytes:
        """Read and decrypt an envelope; the cursor is restored if decryption fails."""
        return encrypted.read_encrypted(self, recipient_private_key)

    def append_encrypted(
        self,
        data: bytes,
        recipient_public_key: encrypted.PublicKeyLike,
        sender_private_key: Optional[encrypted.PrivateKeyLike] = None,
    ) -> None:
        self._write(encrypted.make_encrypted(data, recipient_public_key, sender_private_key), None)

    def insert_encrypted(
        self,
        data: bytes,
        recipient_public_key: encrypted.PublicKeyLike,
        sender_private_key: Optional[encrypted.PrivateKeyLike] = None,
        update_pointer: bool = True,
    ) -> None:
        self._write(
            encrypted.make_encrypted(data, recipient_public_key, sender_private_key),
            update_pointer,
        )

"""Variable-length continuation codec.

The value is read ``x`` bits at a time. All-zero chunks mean "keep reading";
the first chunk containing a 1 bit ends the value. A valid value is therefore
any number of zero chunks followed by exactly one non-zero chunk.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import InvalidInputError
from .bitstream import is_binary

if TYPE_CHECKING:
    from .bitstream import BitStream


def make_x_bit_variable_length(value: str, x: int) -> str:
    """Validate a variable-length value and return its bits unchanged.

    Args:
        value: Bit string whose length is a multiple of x
        x: Chunk size in bits

    Raises:
        InvalidInputError: If the length is not a multiple of x, value is not
            binary, a chunk before the last one contains a 1, or the last chunk
            is all zeros
    """
    if x <= 0:
        raise InvalidInputError(f"Chunk size must be > 0, got {x}")
    if not is_binary(value) or len(value) % x != 0:
        raise InvalidInputError(f"Invalid {x}-bit variable length value: {value!r}")
    if "1" in value[:-x] or "1" not in value[-x:]:
        raise InvalidInputError(f"Invalid {x}-bit variable length value: {value!r}")
    return value


def read_x_bit_variable_length(stream: BitStream, x: int) -> str:
    """Read chunks of x bits until one contains a 1 bit."""
    if x <= 0:
        raise InvalidInputError(f"Chunk size must be > 0, got {x}")
    bits = ""
    while "1" not in bits:
        bits += stream.get_bits(x)
    return bits

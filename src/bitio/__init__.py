"""bitio: Bit-granularity binary codec

A Python library for packing heterogeneous values into a single contiguous
bit sequence with no byte alignment between fields. Designed for metadata
embedded in blockchain transactions, where every bit has a cost.

Key Features:
- Cursor-addressable bit stream with get/insert/append semantics
- Fixed-width and arbitrary-precision integers
- Four compact text alphabets and a best-fit selector across them
- Fixed-precision decimal amounts, script primitives and addresses
- NaCl box encrypted payloads

Quick Start:
    >>> from bitio import BitIO
    >>>
    >>> io = BitIO()
    >>> io.append_address("DUBhARNpy4WYCEWoFQsgeFeYZxQjzQadpv")
    >>> io.append_fixed_precision(5004000)
    >>> io.append_best_string("exe", 5, {"01": "Alpha", "10": "3B40"})
    >>> io.pad_zero(8)
    >>> data = io.to_bytes()
    >>>
    >>> decoded = BitIO.from_bytes(data)
    >>> decoded.get_address()
    'DUBhARNpy4WYCEWoFQsgeFeYZxQjzQadpv'
"""

from __future__ import annotations

from .codec import (
    MAX_FIXED_PRECISION,
    BitStream,
    OpCode,
    TextCodec,
    make_3b40,
    make_address,
    make_alpha,
    make_best_string,
    make_big_int,
    make_bitcoin,
    make_buffer,
    make_encrypted,
    make_fixed_precision,
    make_hex,
    make_int,
    make_utf8,
    make_x_bit_variable_length,
)
from .exceptions import (
    AlignmentError,
    BitIOError,
    InsufficientDataError,
    InvalidInputError,
    InvalidKeyError,
    InvalidOpCodeError,
    LengthExceededError,
    RangeError,
)
from .io import BitIO
from .network import DIGIBYTE, Bip32Versions, NetworkParams

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BitIO",
    "BitStream",
    # Pure encoders
    "make_3b40",
    "make_address",
    "make_alpha",
    "make_best_string",
    "make_big_int",
    "make_bitcoin",
    "make_buffer",
    "make_encrypted",
    "make_fixed_precision",
    "make_hex",
    "make_int",
    "make_utf8",
    "make_x_bit_variable_length",
    # Tables and limits
    "TextCodec",
    "OpCode",
    "MAX_FIXED_PRECISION",
    # Network configuration
    "NetworkParams",
    "Bip32Versions",
    "DIGIBYTE",
    # Exceptions
    "BitIOError",
    "RangeError",
    "InsufficientDataError",
    "InvalidInputError",
    "LengthExceededError",
    "AlignmentError",
    "InvalidOpCodeError",
    "InvalidKeyError",
    # Version
    "__version__",
]

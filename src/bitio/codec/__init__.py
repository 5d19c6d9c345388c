"""Bit-granular codecs for bitio.

This module provides the bit stream core plus the pure ``make_*`` encoders
for every supported field type. Each ``make_*`` returns a string of ``0``/``1``
characters that can be appended or inserted into a :class:`BitStream`.
"""

from __future__ import annotations

from .address import make_address
from .best_fit import TextCodec, make_best_string
from .bitstream import BitStream
from .encrypted import make_encrypted
from .fixed_precision import MAX_FIXED_PRECISION, make_fixed_precision
from .primitives import make_big_int, make_buffer, make_int
from .script import OpCode, make_bitcoin
from .text import make_3b40, make_alpha, make_hex, make_utf8
from .varlen import make_x_bit_variable_length

__all__ = [
    "BitStream",
    "TextCodec",
    "OpCode",
    "MAX_FIXED_PRECISION",
    "make_address",
    "make_best_string",
    "make_big_int",
    "make_bitcoin",
    "make_buffer",
    "make_encrypted",
    "make_fixed_precision",
    "make_int",
    "make_3b40",
    "make_alpha",
    "make_hex",
    "make_utf8",
    "make_x_bit_variable_length",
]

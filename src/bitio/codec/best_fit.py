"""Smallest-encoding selection across text codecs.

The output layout is ``{header}{length}{encoded text}``. Callers map each
header bit pattern to a text codec; every codec is tried and the shortest
successful encoding wins. Ties go to the header listed first.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Mapping, Union

from ..exceptions import BitIOError, InvalidInputError, LengthExceededError
from .bitstream import is_binary
from .text import make_3b40, make_alpha, make_hex, make_utf8

logger = logging.getLogger(__name__)


class TextCodec(str, enum.Enum):
    """Text codecs available to :func:`make_best_string`."""

    ALPHA = "Alpha"
    UTF8 = "UTF8"
    HEX = "Hex"
    B40 = "3B40"

    @property
    def encoder(self) -> Callable[[str], str]:
        return _ENCODERS[self]


_ENCODERS: dict[TextCodec, Callable[[str], str]] = {
    TextCodec.ALPHA: make_alpha,
    TextCodec.UTF8: make_utf8,
    TextCodec.HEX: make_hex,
    TextCodec.B40: make_3b40,
}

BestStringOptions = Mapping[str, Union[TextCodec, str]]


def resolve_options(options: BestStringOptions) -> list[tuple[str, TextCodec]]:
    """Validate a header to codec mapping.

    Raises:
        InvalidInputError: If a header is not a bit string or a codec name is unknown
    """
    resolved = []
    for header, name in options.items():
        if not is_binary(header):
            raise InvalidInputError(f"Header must be a binary string, got {header!r}")
        try:
            codec = TextCodec(name)
        except ValueError as err:
            raise InvalidInputError(f"Unknown encoder: {name!r}") from err
        resolved.append((header, codec))
    return resolved


def make_best_string(message: str, length_bits: int, options: BestStringOptions) -> str:
    """Encode message with whichever configured codec gives the fewest bits.

    Args:
        message: Text to encode
        length_bits: Width of the character-count field
        options: Mapping of header bit pattern to codec, e.g.
            ``{"01": "Alpha", "10": "3B40", "11": "UTF8", "0001": "Hex"}``

    Returns:
        Header, zero-padded character count and encoded text

    Raises:
        LengthExceededError: If the message length does not fit in length_bits
        InvalidInputError: If options or length_bits are malformed, or no codec
            accepts message

    Example:
        >>> make_best_string("exe", 5, {"01": "Alpha", "10": "3B40"})
        '10000110101110010110110'
    """
    candidates = resolve_options(options)

    if length_bits < 0:
        raise InvalidInputError(f"Length field width must be >= 0, got {length_bits}")
    if len(message) >= 1 << length_bits:
        raise LengthExceededError(
            f"Max length exceeded: {len(message)} characters do not fit in {length_bits} bits"
        )
    bin_length = format(len(message), f"0{length_bits}b") if length_bits else ""

    best = None
    best_codec = None
    for header, codec in candidates:
        try:
            option = header + bin_length + codec.encoder(message)
        except BitIOError as err:
            logger.debug("Codec %s rejected message: %s", codec.value, err)
            continue
        if best is None or len(option) < len(best):
            best = option
            best_codec = codec

    if best is None:
        raise InvalidInputError("No configured codec can encode the message")
    logger.debug("Selected codec %s (%d bits)", best_codec.value, len(best))
    return best

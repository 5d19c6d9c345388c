"""Encrypted payload envelope.

Layout, in order:

1. ciphertext length, fixed-precision encoded
2. sender public key, 32 bytes
3. nonce, 24 bytes
4. ciphertext (NaCl box output, 16 byte MAC included)

Overhead is 73 bytes plus 0 to 3 bytes of length field growth. When no sender
key is given a fresh ephemeral key pair is generated for every envelope.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from nacl.exceptions import CryptoError
from nacl.public import Box, PrivateKey, PublicKey
from nacl.utils import random as random_bytes

from ..exceptions import InvalidInputError, InvalidKeyError
from .fixed_precision import make_fixed_precision, read_fixed_precision
from .primitives import make_buffer, read_buffer

if TYPE_CHECKING:
    from .bitstream import BitStream

logger = logging.getLogger(__name__)

KEY_BYTES = PublicKey.SIZE
NONCE_BYTES = Box.NONCE_SIZE

PublicKeyLike = Union[PublicKey, bytes, str]
PrivateKeyLike = Union[PrivateKey, bytes, str]


def _key_bytes(key: Union[bytes, str], what: str) -> bytes:
    if isinstance(key, str):
        try:
            key = bytes.fromhex(key)
        except ValueError as err:
            raise InvalidInputError(f"{what} is not valid hex") from err
    if not isinstance(key, (bytes, bytearray)) or len(key) != KEY_BYTES:
        raise InvalidInputError(f"{what} must be {KEY_BYTES} bytes")
    return bytes(key)


def to_public_key(key: PublicKeyLike) -> PublicKey:
    """Coerce raw bytes or hex into a NaCl public key."""
    if isinstance(key, PublicKey):
        return key
    return PublicKey(_key_bytes(key, "Public key"))


def to_private_key(key: PrivateKeyLike) -> PrivateKey:
    """Coerce raw bytes or hex into a NaCl private key."""
    if isinstance(key, PrivateKey):
        return key
    return PrivateKey(_key_bytes(key, "Private key"))


def make_encrypted(
    data: bytes,
    recipient_public_key: PublicKeyLike,
    sender_private_key: Optional[PrivateKeyLike] = None,
    nonce: Optional[bytes] = None,
) -> str:
    """Encrypt data for a recipient and return the envelope bits.

    Args:
        data: Plaintext
        recipient_public_key: Key of the party that will decrypt
        sender_private_key: Key to encrypt with; a random one is generated if omitted
        nonce: 24 byte nonce; a random one is generated if omitted

    Returns:
        Envelope bits, always a whole number of bytes

    Raises:
        InvalidInputError: If a key or the nonce is malformed
    """
    recipient = to_public_key(recipient_public_key)
    sender = PrivateKey.generate() if sender_private_key is None else to_private_key(sender_private_key)

    if nonce is None:
        nonce = random_bytes(NONCE_BYTES)
    elif len(nonce) != NONCE_BYTES:
        raise InvalidInputError(f"Nonce must be {NONCE_BYTES} bytes, got {len(nonce)}")

    ciphertext = Box(sender, recipient).encrypt(bytes(data), bytes(nonce)).ciphertext

    return (
        make_fixed_precision(len(ciphertext))
        + make_buffer(bytes(sender.public_key))
        + make_buffer(nonce)
        + make_buffer(ciphertext)
    )


def read_encrypted(stream: BitStream, recipient_private_key: PrivateKeyLike) -> bytes:
    """Read and decrypt an envelope built by :func:`make_encrypted`.

    On failure the cursor is put back where it was before the call.

    Raises:
        InvalidKeyError: If the ciphertext does not authenticate with this key
    """
    start = stream.pointer
    try:
        length = read_fixed_precision(stream)
        sender = PublicKey(read_buffer(stream, KEY_BYTES))
        nonce = read_buffer(stream, NONCE_BYTES)
        ciphertext = read_buffer(stream, length)
        recipient = to_private_key(recipient_private_key)
        try:
            return Box(recipient, sender).decrypt(ciphertext, nonce)
        except CryptoError as err:
            logger.debug("Encrypted payload at bit %d failed authentication", start)
            raise InvalidKeyError("Invalid key") from err
    except Exception:
        stream.pointer = start
        raise

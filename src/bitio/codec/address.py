"""Address codec.

An address is stored as a 2 bit type tag followed by its 160 bit hash:

- ``01``: pay to public key hash (base58check, ``network.pub_key_hash`` version)
- ``10``: pay to script hash (base58check, ``network.script_hash`` version)
- ``11``: segwit version 0 (bech32, ``network.bech32`` prefix)

Tag ``00`` is reserved. Checksums are not stored; they are recomputed when the
address is rebuilt.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import base58
import bech32

from ..exceptions import InvalidInputError
from ..network import DIGIBYTE, NetworkParams
from .primitives import make_buffer, read_buffer

if TYPE_CHECKING:
    from .bitstream import BitStream

logger = logging.getLogger(__name__)

HASH_BYTES = 20
BASE58_ADDRESS_LENGTH = 34

TAG_PUB_KEY_HASH = "01"
TAG_SCRIPT_HASH = "10"
TAG_SEGWIT = "11"


def make_address(address: str, network: Optional[NetworkParams] = None) -> str:
    """Encode an address as a type tag plus its hash.

    Addresses exactly 34 characters long are treated as base58check, all
    others as bech32.

    Args:
        address: Address string
        network: Network the address belongs to (defaults to DigiByte)

    Returns:
        162 bits

    Raises:
        InvalidInputError: If the address does not decode, has a bad checksum,
            or belongs to another network
    """
    network = network or DIGIBYTE
    if not isinstance(address, str):
        raise InvalidInputError(f"Expected an address string, got {type(address).__name__}")

    if len(address) == BASE58_ADDRESS_LENGTH:
        try:
            payload = base58.b58decode_check(address)
        except ValueError as err:
            raise InvalidInputError(f"Invalid base58 address {address!r}: {err}") from err
        if len(payload) != HASH_BYTES + 1:
            raise InvalidInputError(f"Invalid base58 address {address!r}: unexpected length")
        version, pubkey_hash = payload[0], payload[1:]
        if version == network.pub_key_hash:
            tag = TAG_PUB_KEY_HASH
        elif version == network.script_hash:
            tag = TAG_SCRIPT_HASH
        else:
            raise InvalidInputError(f"Address {address!r} has unknown version byte {version:#04x}")
        logger.debug("Address %s encoded as base58 type %s", address, tag)
        return tag + make_buffer(pubkey_hash)

    witness_version, program = bech32.decode(network.bech32, address)
    if witness_version is None:
        raise InvalidInputError(f"Invalid bech32 address {address!r}")
    if witness_version != 0 or len(program) != HASH_BYTES:
        raise InvalidInputError(
            f"Unsupported segwit address {address!r}: only version 0 key hashes are supported"
        )
    logger.debug("Address %s encoded as segwit", address)
    return TAG_SEGWIT + make_buffer(bytes(program))


def read_address(stream: BitStream, network: Optional[NetworkParams] = None) -> str:
    """Read an address encoded with :func:`make_address`.

    Raises:
        InvalidInputError: If the type tag is the reserved ``00``
    """
    network = network or DIGIBYTE
    tag = stream.get_bits(2)
    if tag == "00":
        raise InvalidInputError("Address type 00 is reserved")

    pubkey_hash = read_buffer(stream, HASH_BYTES)

    if tag == TAG_PUB_KEY_HASH:
        return base58.b58encode_check(bytes([network.pub_key_hash]) + pubkey_hash).decode("ascii")
    if tag == TAG_SCRIPT_HASH:
        return base58.b58encode_check(bytes([network.script_hash]) + pubkey_hash).decode("ascii")

    address = bech32.encode(network.bech32, 0, pubkey_hash)
    if address is None:
        raise InvalidInputError("Could not build bech32 address")
    return address

"""Network parameters used by the address codec.

A network is described by the prefix bytes and human-readable part that make
its addresses distinct from other chains. The record is immutable and passed
in per call; :data:`DIGIBYTE` is used when a caller does not supply one.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Bip32Versions(BaseModel):
    """Extended key version bytes."""

    model_config = ConfigDict(frozen=True)

    public: int = Field(ge=0, le=0xFFFFFFFF)
    private: int = Field(ge=0, le=0xFFFFFFFF)


class NetworkParams(BaseModel):
    """Address-relevant constants of a cryptocurrency network.

    Attributes:
        message_prefix: Prefix used when signing messages
        bech32: Human-readable part of segwit addresses (e.g. ``"dgb"``)
        bip32: Extended key version bytes
        pub_key_hash: Base58 version byte for pay-to-public-key-hash addresses
        script_hash: Base58 version byte for pay-to-script-hash addresses
        wif: Version byte of wallet-import-format private keys

    Example:
        >>> testnet = NetworkParams(
        ...     message_prefix="\\x19DigiByte Signed Message:\\n",
        ...     bech32="dgbt",
        ...     bip32=Bip32Versions(public=0x043587CF, private=0x04358394),
        ...     pub_key_hash=0x7E,
        ...     script_hash=0x8C,
        ...     wif=0xFE,
        ... )
    """

    model_config = ConfigDict(frozen=True)

    message_prefix: str
    bech32: str = Field(min_length=1)
    bip32: Bip32Versions
    pub_key_hash: int = Field(ge=0, le=255)
    script_hash: int = Field(ge=0, le=255)
    wif: int = Field(ge=0, le=255)


DIGIBYTE = NetworkParams(
    message_prefix="\x19DigiByte Signed Message:\n",
    bech32="dgb",
    bip32=Bip32Versions(public=0x049D7CB2, private=0x049D7878),
    pub_key_hash=0x1E,
    script_hash=0x3F,
    wif=0x80,
)

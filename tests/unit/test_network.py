"""Unit tests for network parameters."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bitio import DIGIBYTE, Bip32Versions, NetworkParams


class TestNetworkParams:
    """Test the network configuration record."""

    def test_digibyte_defaults(self) -> None:
        """Test the built-in DigiByte values."""
        assert DIGIBYTE.bech32 == "dgb"
        assert DIGIBYTE.pub_key_hash == 0x1E
        assert DIGIBYTE.script_hash == 0x3F
        assert DIGIBYTE.wif == 0x80
        assert DIGIBYTE.bip32.public == 0x049D7CB2

    def test_frozen(self) -> None:
        """Test parameters cannot be mutated."""
        with pytest.raises(ValidationError):
            DIGIBYTE.pub_key_hash = 0  # type: ignore[misc]

    def test_version_byte_range(self) -> None:
        """Test version bytes must fit in a byte."""
        with pytest.raises(ValidationError):
            NetworkParams(
                message_prefix="",
                bech32="xx",
                bip32=Bip32Versions(public=0, private=0),
                pub_key_hash=256,
                script_hash=5,
                wif=128,
            )

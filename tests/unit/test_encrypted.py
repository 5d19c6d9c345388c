"""Unit tests for the encrypted envelope."""

from __future__ import annotations

import os

import pytest
from nacl.public import PrivateKey

from bitio import BitIO, InvalidInputError, InvalidKeyError, make_encrypted


class TestEncrypted:
    """Test NaCl box envelopes."""

    def test_round_trip(self, key_pair: PrivateKey) -> None:
        """Test decrypting with the matching key."""
        message = os.urandom(100)
        io = BitIO()
        io.append_encrypted(message, key_pair.public_key)

        assert io.get_encrypted(key_pair) == message
        assert io.remaining == 0

    def test_wrong_key_restores_cursor(self, key_pair: PrivateKey) -> None:
        """Test a mismatched key leaves the cursor where it was."""
        io = BitIO()
        io.append_bits("101")
        io.append_encrypted(os.urandom(100), key_pair.public_key)
        io.pointer = 3

        with pytest.raises(InvalidKeyError):
            io.get_encrypted(PrivateKey.generate())
        assert io.pointer == 3

        assert len(io.get_encrypted(key_pair)) == 100

    def test_hex_keys(self, key_pair: PrivateKey) -> None:
        """Test keys given as hex strings."""
        sender = PrivateKey.generate()
        io = BitIO()
        io.insert_encrypted(
            b"hello",
            bytes(key_pair.public_key).hex(),
            bytes(sender).hex(),
        )
        io.pointer = 0

        assert io.get_encrypted(bytes(key_pair).hex()) == b"hello"

    def test_layout(self, key_pair: PrivateKey) -> None:
        """Test length, sender key, nonce and ciphertext fields."""
        sender = PrivateKey.generate()
        nonce = bytes(range(24))
        bits = make_encrypted(bytes(100), key_pair.public_key, sender, nonce=nonce)

        # 116 byte ciphertext needs a 2 byte length
        assert len(bits) == (2 + 32 + 24 + 116) * 8

        io = BitIO()
        io.append_bits(bits)
        assert io.get_fixed_precision() == 116
        assert io.get_buffer(32) == bytes(sender.public_key)
        assert io.get_buffer(24) == nonce

    def test_deterministic_with_nonce(self, key_pair: PrivateKey) -> None:
        """Test the same sender key and nonce give the same envelope."""
        sender = PrivateKey.generate()
        nonce = os.urandom(24)

        first = make_encrypted(b"data", key_pair.public_key, sender, nonce=nonce)
        second = make_encrypted(b"data", key_pair.public_key, sender, nonce=nonce)
        assert first == second

    def test_ephemeral_sender(self, key_pair: PrivateKey) -> None:
        """Test a fresh sender key is used when none is given."""
        first = make_encrypted(b"data", key_pair.public_key)
        second = make_encrypted(b"data", key_pair.public_key)

        # 20 byte ciphertext needs a 1 byte length
        assert first[8 : 8 + 256] != second[8 : 8 + 256]

    @pytest.mark.parametrize("key", [b"short", "zz" * 32, "ab" * 31])
    def test_bad_public_key(self, key: object) -> None:
        """Test malformed recipient keys."""
        with pytest.raises(InvalidInputError):
            make_encrypted(b"data", key)  # type: ignore[arg-type]

    def test_bad_nonce(self, key_pair: PrivateKey) -> None:
        """Test nonce length."""
        with pytest.raises(InvalidInputError):
            make_encrypted(b"data", key_pair.public_key, nonce=b"\x00" * 8)

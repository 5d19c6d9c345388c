"""Unit tests for the bit stream core."""

from __future__ import annotations

import random

import pytest

from bitio import AlignmentError, BitIO, InsufficientDataError, InvalidInputError, RangeError
from bitio.codec.bitstream import BitStream


class TestBits:
    """Test raw bit access."""

    def test_get_insert_append(self) -> None:
        """Test cursor movement across get/insert/append."""
        io = BitStream.from_bytes(b"\x94")

        assert io.pointer == 0
        assert io.get_bits(6) == "100101"
        assert io.pointer == 6
        io.insert_bits("1001")
        assert io.pointer == 10
        io.append_bits("1101")
        assert io.pointer == 10
        assert io.get_bits(3) == "001"
        assert io.pointer == 13

        io.pointer = 1
        assert io.get_bits(6) == "001011"
        assert io.pointer == 7

    def test_check_bits(self) -> None:
        """Test lookahead does not move the cursor."""
        io = BitStream()
        io.append_bits("1001011001001101")
        io.pointer = 7

        assert io.check_bits("001001") is True
        assert io.check_bits("001000") is False
        assert io.pointer == 7

    def test_check_bits_past_end(self) -> None:
        """Test lookahead past the end is simply False."""
        io = BitStream()
        io.append_bits("101")

        assert io.check_bits("1010") is False

    def test_insert_without_moving(self) -> None:
        """Test insert with update_pointer=False."""
        io = BitStream()
        io.append_bits("1111")
        io.pointer = 2
        io.insert_bits("00", update_pointer=False)

        assert io.pointer == 2
        assert io.length == 6
        io.pointer = 0
        assert io.get_bits(6) == "110011"

    def test_insert_non_binary(self) -> None:
        """Test invalid bit strings are rejected without mutation."""
        io = BitStream()
        io.append_bits("10")

        with pytest.raises(InvalidInputError):
            io.insert_bits("f6")
        with pytest.raises(InvalidInputError):
            io.append_bits("012")

        assert io.length == 2
        assert io.pointer == 0

    def test_read_past_end(self) -> None:
        """Test error on reading past end."""
        io = BitStream.from_bytes(b"\xff")
        io.get_bits(6)

        with pytest.raises(InsufficientDataError):
            io.get_bits(3)
        assert io.pointer == 6


class TestBuffers:
    """Test byte conversion."""

    def test_buffer_round_trip(self) -> None:
        """Test inserting and appending whole bytes."""
        io = BitIO.from_bytes(bytes.fromhex("940381"))
        io.insert_buffer(b"\x07")
        io.append_buffer(bytes.fromhex("7f13"))

        assert io.to_bytes().hex() == "079403817f13"

    def test_unaligned_buffer(self) -> None:
        """Test bytes may start at any bit offset."""
        io = BitIO()
        io.append_bits("101")
        io.append_buffer(b"\xab\xcd")

        io.pointer = 3
        assert io.get_buffer(2) == b"\xab\xcd"

    def test_to_bytes_requires_alignment(self) -> None:
        """Test to_bytes fails on a partial byte."""
        io = BitStream()
        io.append_bits("1")

        with pytest.raises(AlignmentError):
            io.to_bytes()

    def test_empty(self) -> None:
        """Test empty stream."""
        io = BitStream()
        assert io.length == 0
        assert io.remaining == 0
        assert io.to_bytes() == b""


class TestPointer:
    """Test cursor bounds."""

    def test_position_parameters(self) -> None:
        """Test moving, reading and padding from an offset cursor."""
        io = BitIO.from_bytes(b"DigiByte is an amazing coin")

        assert io.pointer == 0
        io.move_pointer(19)
        assert io.pointer == 19
        with pytest.raises(RangeError):
            io.move_pointer(-20)
        io.move_pointer(-17)
        assert io.pointer == 2
        assert io.get_hex(1) == "1"
        assert io.length == 216

        io.pad_random(40)
        assert io.length == 246

        io.pointer = 0
        io.pad_one(50)
        assert io.length == 250

    def test_set_out_of_range(self) -> None:
        """Test setting the cursor outside the stream."""
        io = BitStream.from_bytes(b"\x00")

        with pytest.raises(RangeError):
            io.pointer = 9
        with pytest.raises(RangeError):
            io.pointer = -1

        io.pointer = 8
        assert io.remaining == 0


class TestPadding:
    """Test padding helpers."""

    def test_pad_zero(self) -> None:
        """Test zero padding counts from the cursor."""
        io = BitStream()
        io.append_bits("111")
        io.pad_zero(8)

        assert io.to_bytes() == b"\xe0"

    def test_pad_noop(self) -> None:
        """Test padding when already a multiple."""
        io = BitStream()
        io.append_bits("11110000")
        io.pad_zero(4)

        assert io.length == 8

    def test_pad_one_fills_with_zeros(self) -> None:
        """Test pad_one keeps the historical zero fill."""
        io = BitStream()
        io.append_bits("1")
        io.pad_one(8)

        assert io.to_bytes() == b"\x80"

    def test_pad_random_is_seedable(self) -> None:
        """Test pad_random draws from the injected source."""
        first = BitStream(rng=random.Random(7))
        second = BitStream(rng=random.Random(7))
        for io in (first, second):
            io.append_bits("1")
            io.pad_random(64)

        assert first.length == 64
        assert first.to_bytes() == second.to_bytes()

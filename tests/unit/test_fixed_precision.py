"""Unit tests for the fixed-precision decimal codec."""

from __future__ import annotations

import pytest

from bitio import MAX_FIXED_PRECISION, BitIO, InvalidInputError, make_fixed_precision


class TestFixedPrecision:
    """Test mantissa/exponent packing."""

    def test_insert_append_get(self) -> None:
        """Test mixed sizes at the cursor and at the end."""
        io = BitIO()
        io.insert_fixed_precision(5004000)
        io.append_fixed_precision(19)
        assert io.pointer == 24
        io.insert_fixed_precision(90000000000)
        assert io.pointer == 40

        assert io.get_fixed_precision() == 19
        io.pointer = 0
        assert io.get_fixed_precision() == 5004000
        assert io.get_fixed_precision() == 90000000000

    @pytest.mark.parametrize(
        "value,size",
        [
            (0, 1),
            (19, 1),
            (31, 1),
            (32, 2),
            (500000000, 2),
            (5004000, 3),
            (90000000000, 2),
            (99994878, 5),
            (MAX_FIXED_PRECISION, 7),
            (10**16, 2),
        ],
    )
    def test_round_trip_sizes(self, value: int, size: int) -> None:
        """Test exact decoding and the chosen byte length."""
        bits = make_fixed_precision(value)
        assert len(bits) == size * 8

        io = BitIO()
        io.append_bits(bits)
        assert io.get_fixed_precision() == value
        assert io.remaining == 0

    def test_single_byte(self) -> None:
        """Test small values are stored bare."""
        assert make_fixed_precision(19) == "00010011"

    def test_largest_value(self) -> None:
        """Test the 7 byte layout has a 2 bit header."""
        io = BitIO()
        io.append_fixed_precision(MAX_FIXED_PRECISION)
        assert io.to_bytes() == b"\xff" * 7

    def test_known_stream(self) -> None:
        """Test decoding a 5 byte value produced elsewhere."""
        io = BitIO.from_bytes(bytes.fromhex("802fae67f0"))
        assert io.get_fixed_precision() == 99994878

    def test_integral_float(self) -> None:
        """Test whole floats are accepted."""
        assert make_fixed_precision(500000000.0) == make_fixed_precision(500000000)

    @pytest.mark.parametrize("value", ["s", None, 1.5, -1, MAX_FIXED_PRECISION + 1, 19000000000000000])
    def test_rejects(self, value: object) -> None:
        """Test invalid inputs."""
        io = BitIO()
        with pytest.raises(InvalidInputError):
            io.insert_fixed_precision(value)  # type: ignore[arg-type]
        assert io.length == 0

import string

import pytest

from pyedid.decoders.bits import decode_vendor, get_bit, get_bits, high_nibble, join_high, low_nibble, vendor_letter


class TestGetBits:
    """Tests for the shift/mask primitives."""

    @pytest.mark.parametrize(
        "value,shift,width,expected",
        [
            (0b1110_0101, 5, 3, 0b111),
            (0b1110_0101, 0, 5, 0b00101),
            (0xF1, 4, 4, 0xF),
            (0x80, 7, 1, 1),
            (0x7F, 7, 1, 0),
        ],
    )
    def test_get_bits(self, value, shift, width, expected):
        assert get_bits(value, shift, width) == expected

    @pytest.mark.parametrize("shift,width", [(-1, 2), (0, 0)])
    def test_invalid_range(self, shift, width):
        with pytest.raises(ValueError):
            get_bits(0xFF, shift, width)

    def test_get_bit(self):
        assert [get_bit(0b1010_0000, bit) for bit in range(4, 8)] == [0, 1, 0, 1]

    def test_nibbles(self):
        assert high_nibble(0x62) == 6
        assert low_nibble(0x62) == 2


class TestJoinHigh:

    def test_all_pairs_cover_12_bits_without_aliasing(self):
        seen = set()
        for hi in range(16):
            for lo in range(256):
                value = join_high(lo, hi)
                assert value == lo | (hi << 8)
                seen.add(value)
        assert seen == set(range(4096))


class TestVendor:

    def test_letters_are_bijective(self):
        letters = [vendor_letter(n, 0) for n in range(1, 27)]
        assert letters == list(string.ascii_uppercase)

    @pytest.mark.parametrize("n,expected", [(0, "@"), (27, "["), (31, "_")])
    def test_out_of_alphabet_values_do_not_fail(self, n, expected):
        assert vendor_letter(n, 0) == expected
        assert vendor_letter(n, 0) not in string.ascii_uppercase

    @pytest.mark.parametrize(
        "code,expected",
        [
            ((19 << 10) | (1 << 5) | 13, "SAM"),
            ((4 << 10) | (5 << 5) | 12, "DEL"),
            ((1 << 10) | (2 << 5) | 3, "ABC"),
        ],
    )
    def test_decode_vendor(self, code, expected):
        assert decode_vendor(code) == expected

    def test_msb_is_ignored(self):
        assert decode_vendor(0x8000 | (1 << 10) | (1 << 5) | 1) == "AAA"

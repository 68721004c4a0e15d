import pytest
from pydantic import ValidationError

from edid_samples import build_base_block
from pyedid.decoders.header import parse_display, parse_header
from pyedid.decoders.reader import ByteReader
from pyedid.exceptions import MagicMismatchError, UnexpectedEndError


class TestParseHeader:

    def test_fields(self):
        blob = build_base_block(vendor="SAM", product=596, serial=1146106418, week=27, year=17, version=1, revision=3)
        reader = ByteReader(blob)
        header = parse_header(reader)

        assert header.vendor == "SAM"
        assert header.product == 596
        assert header.serial == 1146106418
        assert (header.week, header.year, header.version, header.revision) == (27, 17, 1, 3)
        assert header.manufacture_year == 2007
        assert reader.position == 20

    @pytest.mark.parametrize(
        "magic",
        [
            b"\xff\xff\xff\xff\xff\xff\xff\x00",
            b"\x00\xff\xff\xff\xff\xff\xff\xff",
            bytes(8),
        ],
    )
    def test_magic_mismatch(self, magic):
        blob = build_base_block(magic=magic)
        with pytest.raises(MagicMismatchError) as excinfo:
            parse_header(ByteReader(blob))
        assert excinfo.value.position == 0
        assert excinfo.value.actual == magic

    def test_truncated(self):
        blob = build_base_block()[:15]
        with pytest.raises(UnexpectedEndError):
            parse_header(ByteReader(blob))


class TestParseDisplay:

    def test_raw_bytes(self):
        reader = ByteReader(bytes([14, 47, 30, 120, 42]))
        display = parse_display(reader)

        assert display.video_input == 14
        assert display.width == 47
        assert display.height == 30
        assert display.gamma == 120
        assert display.features == 42
        assert display.gamma_value == pytest.approx(2.2)

    def test_is_immutable(self):
        display = parse_display(ByteReader(bytes(5)))
        with pytest.raises(ValidationError):
            display.width = 10

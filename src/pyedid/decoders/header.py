from pyedid.decoders.bits import decode_vendor
from pyedid.decoders.reader import ByteReader
from pyedid.models.header_models import Display, Header

EDID_MAGIC = b"\x00\xff\xff\xff\xff\xff\xff\x00"


def parse_header(reader: ByteReader) -> Header:
    # Magic, manufacturer ID, product code, serial number, week, year, version, revision.
    reader.tag(EDID_MAGIC)
    return Header(
        vendor=decode_vendor(reader.be_u16()),
        product=reader.le_u16(),
        serial=reader.le_u32(),
        week=reader.u8(),
        year=reader.u8(),
        version=reader.u8(),
        revision=reader.u8(),
    )


def parse_display(reader: ByteReader) -> Display:
    return Display(
        video_input=reader.u8(),
        width=reader.u8(),
        height=reader.u8(),
        gamma=reader.u8(),
        features=reader.u8(),
    )

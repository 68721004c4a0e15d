import logging

from pyedid.decoders.reader import ByteReader
from pyedid.decoders.timing import parse_detailed_timing
from pyedid.models.descriptor_models import (
    ColorManagement,
    DetailedTimingDescriptor,
    Dummy,
    EstablishedTimings,
    ProductName,
    RangeLimits,
    SerialNumber,
    StandardTiming,
    TimingCodes,
    UnknownDescriptor,
    UnspecifiedText,
    WhitePoint,
)
from pyedid.util.codepage import decode_text

logger = logging.getLogger(__name__)

DESCRIPTOR_COUNT = 4
DESCRIPTOR_PAYLOAD_SIZE = 13
LINE_FEED = 0x0A

# Descriptors whose payload is text
TEXT_DESCRIPTOR_ENUM = {
    0xFF: SerialNumber,
    0xFE: UnspecifiedText,
    0xFC: ProductName,
}

# Descriptors whose payload is consumed but not decoded
OPAQUE_DESCRIPTOR_ENUM = {
    0xFD: RangeLimits,
    0xFB: WhitePoint,
    0xFA: StandardTiming,
    0xF9: ColorManagement,
    0xF8: TimingCodes,
    0xF7: EstablishedTimings,
    0x10: Dummy,
}


def decode_descriptor_text(data: bytes) -> str:
    # Line feeds terminate the string and are dropped; padding is whitespace.
    return decode_text(bytes(b for b in data if b != LINE_FEED)).strip()


def parse_descriptor(reader: ByteReader):
    """
    Decode one 18-byte descriptor slot.

    A slot whose first two bytes are zero is a monitor descriptor:
    3 reserved bytes, a 1-byte tag, 1 reserved byte, then 13 bytes of payload.
    Any other slot is a detailed timing descriptor.
    """
    if reader.peek(2) != b"\x00\x00":
        return DetailedTimingDescriptor(timing=parse_detailed_timing(reader))

    reader.skip(3)
    tag = reader.u8()
    reader.skip(1)
    payload = reader.take(DESCRIPTOR_PAYLOAD_SIZE)

    if tag in TEXT_DESCRIPTOR_ENUM:
        return TEXT_DESCRIPTOR_ENUM[tag](text=decode_descriptor_text(payload))
    if tag in OPAQUE_DESCRIPTOR_ENUM:
        return OPAQUE_DESCRIPTOR_ENUM[tag]()

    logger.debug("Unknown descriptor tag 0x%02X", tag)
    return UnknownDescriptor(tag=tag, data=tuple(payload))


def parse_descriptors(reader: ByteReader) -> list:
    descriptors = []
    for index in range(DESCRIPTOR_COUNT):
        with reader.context(f"descriptor {index}"):
            descriptors.append(parse_descriptor(reader))
    return descriptors

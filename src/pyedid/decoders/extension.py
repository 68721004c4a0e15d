import logging
from typing import List

from pyedid.decoders.bits import get_bit, low_nibble
from pyedid.decoders.data_blocks import parse_data_blocks
from pyedid.decoders.reader import ByteReader
from pyedid.decoders.timing import parse_detailed_timing
from pyedid.exceptions import InvalidLengthError
from pyedid.models.extension_models import CtaExtensions, NativeDTDs
from pyedid.models.timing_models import DetailedTiming

logger = logging.getLogger(__name__)

# Skipped, counted from after the tag, revision and offset bytes, when the block has no DTD offset.
EMPTY_EXTENSION_SKIP = 128
# Tag, revision, DTD offset and native DTD bytes precede the data block collection.
DATA_BLOCK_OFFSET = 4
TIMING_SENTINEL = b"\x00\x00"


def parse_native_dtds(value: int) -> NativeDTDs:
    return NativeDTDs(
        underscan=get_bit(value, 7),
        basic_audio=get_bit(value, 6),
        ycbcr444=get_bit(value, 5),
        ycbcr422=get_bit(value, 4),
        native_count=low_nibble(value),
    )


def parse_trailing_timings(reader: ByteReader) -> List[DetailedTiming]:
    # Runs until two zero bytes (start of the padding) or the end of the span.
    timings = []
    while reader.remaining >= len(TIMING_SENTINEL) and reader.peek(len(TIMING_SENTINEL)) != TIMING_SENTINEL:
        timings.append(parse_detailed_timing(reader))
    return timings


def parse_extension(reader: ByteReader) -> CtaExtensions:
    """
    Decode a CTA-861 extension block.

    Byte 2 is the offset at which detailed timings start. When it is zero the
    block carries neither data blocks nor timings. Otherwise the data block
    collection fills the bytes between the native DTD byte and that offset,
    and every remaining byte but the last is scanned for detailed timings.
    The last byte is the checksum, which is consumed without being verified.
    """
    extension_tag = reader.u8()
    reserved = reader.u8()
    dtd_offset = reader.u8()
    logger.debug("Extension tag 0x%02X, DTD offset %d", extension_tag, dtd_offset)

    if dtd_offset == 0:
        reader.skip(EMPTY_EXTENSION_SKIP)
        return CtaExtensions(extension_tag=extension_tag, reserved=reserved)

    if dtd_offset < DATA_BLOCK_OFFSET:
        raise InvalidLengthError(f"DTD offset {dtd_offset} overlaps the extension header", reader.position - 1)

    native_dtds = parse_native_dtds(reader.u8())

    with reader.context("data blocks"):
        blocks = parse_data_blocks(reader.window(dtd_offset - DATA_BLOCK_OFFSET))

    with reader.context("detailed timings"):
        timings = parse_trailing_timings(reader.window(max(reader.remaining - 1, 0)))

    checksum = reader.u8()
    logger.debug("Extension checksum 0x%02X (not verified)", checksum)

    return CtaExtensions(
        extension_tag=extension_tag,
        reserved=reserved,
        native_dtds=native_dtds,
        blocks=blocks,
        timings=timings,
    )

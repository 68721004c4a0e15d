import logging
from typing import List

from pyedid.decoders.bits import FIVE_BIT_MASK, SEVEN_BIT_MASK, THREE_BIT_MASK, get_bit, get_bits
from pyedid.decoders.reader import ByteReader
from pyedid.models.extension_models import (
    AudioBlock,
    DataBlockHeader,
    ReservedBlock,
    ShortAudioDescriptor,
    ShortVideoDescriptor,
    SpeakerAllocation,
    VendorSpecific,
    VideoBlock,
)

logger = logging.getLogger(__name__)

AUDIO_BLOCK = 0b001
VIDEO_BLOCK = 0b010
VENDOR_SPECIFIC_BLOCK = 0b011
SPEAKER_ALLOCATION_BLOCK = 0b100

SHORT_AUDIO_DESCRIPTOR_SIZE = 3
VENDOR_IDENTIFIER_SIZE = 3


def parse_data_block_header(value: int) -> DataBlockHeader:
    return DataBlockHeader(type_tag=get_bits(value, 5, 3), length=value & FIVE_BIT_MASK)


def parse_short_audio_descriptor(data: bytes) -> ShortAudioDescriptor:
    format_and_channels, sampling_frequencies, format_details = data
    return ShortAudioDescriptor(
        format=get_bits(format_and_channels, 3, 4),
        channels=(format_and_channels & THREE_BIT_MASK) + 1,
        sampling_frequencies=sampling_frequencies,
        extended_format_code=get_bits(format_details, 3, 5),
        format_dependent_value=format_details & THREE_BIT_MASK,
    )


def parse_short_video_descriptor(value: int) -> ShortVideoDescriptor:
    return ShortVideoDescriptor(native=get_bit(value, 7), cea861_index=value & SEVEN_BIT_MASK)


def parse_audio_block(header: DataBlockHeader, payload: ByteReader) -> AudioBlock:
    descriptors = []
    # A trailing partial descriptor is dropped.
    while payload.remaining >= SHORT_AUDIO_DESCRIPTOR_SIZE:
        descriptors.append(parse_short_audio_descriptor(payload.take(SHORT_AUDIO_DESCRIPTOR_SIZE)))
    return AudioBlock(header=header, descriptors=descriptors)


def parse_video_block(header: DataBlockHeader, payload: ByteReader) -> VideoBlock:
    descriptors = [parse_short_video_descriptor(value) for value in payload.rest()]
    return VideoBlock(header=header, descriptors=descriptors)


def parse_vendor_specific(header: DataBlockHeader, payload: ByteReader) -> VendorSpecific:
    identifier = payload.take(VENDOR_IDENTIFIER_SIZE)
    return VendorSpecific(header=header, identifier=tuple(identifier), payload=tuple(payload.rest()))


def parse_speaker_allocation(header: DataBlockHeader, payload: ByteReader) -> SpeakerAllocation:
    speakers = payload.u8()
    reserved = payload.take(2)
    return SpeakerAllocation(header=header, speakers=speakers, reserved=tuple(reserved))


def parse_reserved_block(header: DataBlockHeader, payload: ByteReader) -> ReservedBlock:
    return ReservedBlock(header=header, payload=tuple(payload.rest()))


# type tag -> (context label, parser)
DATA_BLOCK_ENUM = {
    AUDIO_BLOCK: ("audio data blocks", parse_audio_block),
    VIDEO_BLOCK: ("video data blocks", parse_video_block),
    VENDOR_SPECIFIC_BLOCK: ("vendor specific data block", parse_vendor_specific),
    SPEAKER_ALLOCATION_BLOCK: ("speaker allocation data block", parse_speaker_allocation),
}


def parse_data_block(reader: ByteReader):
    """
    Decode one data block: a header byte (type in bits 7-5, payload length in
    bits 4-0) followed by its payload. The reader always advances by exactly
    ``1 + length`` bytes.
    """
    label, parser = DATA_BLOCK_ENUM.get(reader.peek(1)[0] >> 5, ("reserved data block", parse_reserved_block))
    with reader.context(label):
        header = parse_data_block_header(reader.u8())
        payload = reader.window(header.length)
        return parser(header, payload)


def parse_data_blocks(reader: ByteReader) -> List:
    blocks = []
    while reader.remaining > 0:
        block = parse_data_block(reader)
        logger.debug("Data block %s, %d byte(s)", block.kind, block.header.length)
        blocks.append(block)
    return blocks

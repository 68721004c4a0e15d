from typing import Annotated, ClassVar, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from pyedid.models.timing_models import DetailedTiming


class NativeDTDs(BaseModel):
    """Capability flags and native timing count packed into extension byte 3."""
    model_config = ConfigDict(frozen=True)

    underscan: int = 0
    basic_audio: int = 0
    ycbcr444: int = 0
    ycbcr422: int = 0
    #: Number of native detailed timing descriptors.
    native_count: int = 0


class DataBlockHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    #: 3-bit block type.
    type_tag: int
    #: Payload length in bytes (0-31), not counting the header byte.
    length: int


class ShortAudioDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    #: Audio format code (1 = LPCM).
    format: int
    #: Channel count, 1-based.
    channels: int
    #: Bitmask of supported sampling frequencies.
    sampling_frequencies: int
    extended_format_code: int
    #: Bit depths for LPCM, max bitrate / 8 kHz for compressed formats.
    format_dependent_value: int


class ShortVideoDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    native: int
    #: Video identification code from CEA-861.
    cea861_index: int


class AudioBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["audio"] = "audio"
    header: DataBlockHeader
    descriptors: Tuple[ShortAudioDescriptor, ...] = ()


class VideoBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["video"] = "video"
    header: DataBlockHeader
    descriptors: Tuple[ShortVideoDescriptor, ...] = ()


class VendorSpecific(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["vendor_specific"] = "vendor_specific"
    header: DataBlockHeader
    #: IEEE OUI, least significant byte first.
    identifier: Tuple[int, int, int]
    payload: Tuple[int, ...] = ()


class SpeakerAllocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    FRONT_LEFT_RIGHT: ClassVar[int] = 1 << 0
    LFE: ClassVar[int] = 1 << 1
    FRONT_CENTER: ClassVar[int] = 1 << 2
    REAR_LEFT_RIGHT: ClassVar[int] = 1 << 3
    REAR_CENTER: ClassVar[int] = 1 << 4
    FRONT_LEFT_RIGHT_CENTER: ClassVar[int] = 1 << 5
    REAR_LEFT_RIGHT_CENTER: ClassVar[int] = 1 << 6

    kind: Literal["speaker_allocation"] = "speaker_allocation"
    header: DataBlockHeader
    speakers: int
    reserved: Tuple[int, int]

    def has_speaker(self, flag: int) -> bool:
        return bool(self.speakers & flag)


class ReservedBlock(BaseModel):
    """Data block of a type this decoder does not interpret."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["reserved"] = "reserved"
    header: DataBlockHeader
    payload: Tuple[int, ...] = ()


DataBlock = Annotated[
    Union[AudioBlock, VideoBlock, VendorSpecific, SpeakerAllocation, ReservedBlock],
    Field(discriminator="kind"),
]


class CtaExtensions(BaseModel):
    """The first (CTA-861) extension block. The checksum byte is not kept."""
    model_config = ConfigDict(frozen=True)

    # Native DTD information bits
    DTD_UNDERSCAN: ClassVar[int] = 1 << 7
    DTD_BASIC_AUDIO: ClassVar[int] = 1 << 6
    DTD_YUV444: ClassVar[int] = 1 << 5
    DTD_YUV422: ClassVar[int] = 1 << 4

    extension_tag: int
    reserved: int
    native_dtds: NativeDTDs = Field(default_factory=NativeDTDs)
    blocks: Tuple[DataBlock, ...] = ()
    #: Detailed timings following the data block collection.
    timings: Tuple[DetailedTiming, ...] = ()

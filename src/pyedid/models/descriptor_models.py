from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from pyedid.models.timing_models import DetailedTiming


class DescriptorModel(BaseModel):
    """Base class for the four 18-byte descriptor slots of the base block."""
    model_config = ConfigDict(frozen=True)


class DetailedTimingDescriptor(DescriptorModel):
    kind: Literal["detailed_timing"] = "detailed_timing"
    timing: DetailedTiming


class SerialNumber(DescriptorModel):
    kind: Literal["serial_number"] = "serial_number"
    text: str


class UnspecifiedText(DescriptorModel):
    kind: Literal["unspecified_text"] = "unspecified_text"
    text: str


class ProductName(DescriptorModel):
    kind: Literal["product_name"] = "product_name"
    text: str


# Monitor descriptors whose payload is consumed but not decoded.

class RangeLimits(DescriptorModel):
    kind: Literal["range_limits"] = "range_limits"


class WhitePoint(DescriptorModel):
    kind: Literal["white_point"] = "white_point"


class StandardTiming(DescriptorModel):
    kind: Literal["standard_timing"] = "standard_timing"


class ColorManagement(DescriptorModel):
    kind: Literal["color_management"] = "color_management"


class TimingCodes(DescriptorModel):
    kind: Literal["timing_codes"] = "timing_codes"


class EstablishedTimings(DescriptorModel):
    kind: Literal["established_timings"] = "established_timings"


class Dummy(DescriptorModel):
    kind: Literal["dummy"] = "dummy"


class UnknownDescriptor(DescriptorModel):
    """Monitor descriptor with an unrecognised tag; the 13 payload bytes are kept."""
    kind: Literal["unknown"] = "unknown"
    tag: int
    data: Tuple[int, ...]


Descriptor = Annotated[
    Union[
        DetailedTimingDescriptor,
        SerialNumber,
        UnspecifiedText,
        RangeLimits,
        ProductName,
        WhitePoint,
        StandardTiming,
        ColorManagement,
        TimingCodes,
        EstablishedTimings,
        Dummy,
        UnknownDescriptor,
    ],
    Field(discriminator="kind"),
]

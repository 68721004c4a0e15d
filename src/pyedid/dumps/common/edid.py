import math
from typing import Optional

from pyedid.decoders.bits import get_bit, get_bits
from pyedid.models.descriptor_models import DetailedTimingDescriptor, ProductName, SerialNumber
from pyedid.models.display_models import DisplayModuleInfo, ResolutionInfo
from pyedid.models.edid_models import EDID

BIT_DEPTH_ENUM = {
    1: 6,
    2: 8,
    3: 10,
    4: 12,
    5: 14,
    6: 16
}

INTERFACE_ENUM = {
    0: "Undefined",
    1: "DVI",
    2: "HDMI",  # Standard HDMI-A
    3: "HDMI (B)",
    4: "MDDI",
    5: "DisplayPort"
}

CM_PER_INCH = 2.54


def _descriptor_text(edid: EDID, kind) -> Optional[str]:
    for descriptor in edid.descriptors:
        if isinstance(descriptor, kind):
            return descriptor.text
    return None


def _best_resolution(edid: EDID) -> Optional[ResolutionInfo]:
    timings = [d.timing for d in edid.descriptors if isinstance(d, DetailedTimingDescriptor)]
    if edid.extensions:
        timings.extend(edid.extensions.timings)

    resolution = (0, 0, 0)  # Width, Height, Refresh Rate
    # We will use this tuple to find the max resolution and refresh rate.
    for timing in timings:
        if timing.refresh_rate is None:
            continue
        resolution = max(
            resolution,
            (timing.h_active, timing.v_active, round(timing.refresh_rate, 2)),
            key=lambda x: (x[0] * x[1], x[2])
        )

    if resolution == (0, 0, 0):
        return None
    return ResolutionInfo(width=resolution[0], height=resolution[1], refresh_rate=resolution[2])


def summarize_edid(edid: EDID) -> DisplayModuleInfo:
    """Condense a decoded EDID into the fields most tools want to show."""
    # todo: EDID 1.3 and older encode the analog/digital input byte differently.
    module = DisplayModuleInfo(edid=edid)

    module.name = _descriptor_text(edid, ProductName)
    module.serial_number = _descriptor_text(edid, SerialNumber)
    module.manufacturer_code = edid.header.vendor
    module.year = edid.header.manufacture_year

    display = edid.display
    if display.width and display.height:
        module.inches = round(math.hypot(display.width, display.height) / CM_PER_INCH)

    module.resolution = _best_resolution(edid)

    input_type = display.video_input
    if get_bit(input_type, 7) == 1:  # MSB is 1 => Digital input
        if module.resolution is None:
            module.resolution = ResolutionInfo()
        module.resolution.bit_depth = BIT_DEPTH_ENUM.get(get_bits(input_type, 4, 3))
        module.interface = INTERFACE_ENUM.get(input_type & 0x0F, "Unknown")

    return module

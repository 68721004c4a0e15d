from typing import List, Optional

from pydantic import BaseModel, Field

from pyedid.models.edid_models import EDID
from pyedid.models.status_models import StatusModel, SuccessStatus


class ResolutionInfo(BaseModel):
    """Resolution information for a Display."""

    #: Horizontal resolution in pixels.
    width: Optional[int] = None
    #: Vertical resolution in pixels.
    height: Optional[int] = None
    #: Refresh rate in Hz.
    refresh_rate: Optional[float] = None
    #: Bit depth in bits per color.
    bit_depth: Optional[int] = None


class DisplayModuleInfo(BaseModel):
    """Information for one Display is stored here"""
    status: StatusModel = Field(default_factory=SuccessStatus)

    #: DRM connector name, e.g. ``card0-HDMI-A-1``.
    connector: Optional[str] = None

    #: Path the EDID was read from.
    path: Optional[str] = None

    name: Optional[str] = None

    #: Year it was manufactured.
    year: Optional[int] = None

    resolution: Optional[ResolutionInfo] = None

    # Diagonal size in inches
    inches: Optional[int] = None

    # Display Interface (HDMI, DP, etc), digital inputs only
    interface: Optional[str] = None

    # Serial Number
    serial_number: Optional[str] = None

    #: Three-letter code assigned to each manufacturer.
    manufacturer_code: Optional[str] = None

    #: The decoded EDID, when decoding succeeded.
    edid: Optional[EDID] = None


class DisplayInfo(BaseModel):
    """Contains a list of ``DisplayModuleInfo`` objects."""
    status: StatusModel = Field(default_factory=SuccessStatus)

    #: List of displays found.
    modules: List[DisplayModuleInfo] = Field(default_factory=list)

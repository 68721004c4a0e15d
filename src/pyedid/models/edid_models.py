from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from pyedid.models.descriptor_models import Descriptor
from pyedid.models.extension_models import CtaExtensions
from pyedid.models.header_models import Display, Header


class EDID(BaseModel):
    """A decoded base block, plus its first extension when one is declared."""
    model_config = ConfigDict(frozen=True)

    header: Header
    display: Display

    # These sections are consumed but not decoded into fields.
    chromaticity: None = None
    established_timing: None = None
    standard_timing: None = None

    #: Exactly four descriptor slots, in wire order.
    descriptors: Tuple[Descriptor, ...] = Field(min_length=4, max_length=4)

    extensions: Optional[CtaExtensions] = None

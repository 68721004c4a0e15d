from pydantic import BaseModel, ConfigDict


class Header(BaseModel):
    """Identification fields at the start of the base block."""
    model_config = ConfigDict(frozen=True)

    #: Three-letter code assigned to each manufacturer.
    vendor: str
    #: Manufacturer product code.
    product: int
    #: 32-bit serial number (0 when unused).
    serial: int
    #: Week of manufacture (0 or 255 when unspecified).
    week: int
    #: Year of manufacture, as an offset from 1990.
    year: int
    version: int
    revision: int

    @property
    def manufacture_year(self) -> int:
        return 1990 + self.year


class Display(BaseModel):
    """Basic display parameters, kept as raw bytes."""
    model_config = ConfigDict(frozen=True)

    video_input: int
    #: Physical width in centimeters.
    width: int
    #: Physical height in centimeters.
    height: int
    #: Stored as (gamma * 100) - 100.
    gamma: int
    features: int

    @property
    def gamma_value(self) -> float:
        return (self.gamma + 100) / 100

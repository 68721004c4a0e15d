from typing import Optional

from pydantic import BaseModel, ConfigDict


class DetailedTiming(BaseModel):
    """One 18-byte detailed timing descriptor."""
    model_config = ConfigDict(frozen=True)

    #: Pixel clock in kHz.
    pixel_clock: int
    h_active: int
    h_blank: int
    v_active: int
    v_blank: int
    h_front_porch: int
    h_sync: int
    v_front_porch: int
    v_sync: int
    #: Horizontal image size in millimeters.
    h_size: int
    #: Vertical image size in millimeters.
    v_size: int
    #: Border pixels on one side of the screen (the total is twice this).
    h_border: int
    v_border: int
    features: int

    @property
    def refresh_rate(self) -> Optional[float]:
        total = (self.h_active + self.h_blank) * (self.v_active + self.v_blank)
        if total == 0:
            return None
        return self.pixel_clock * 1000 / total

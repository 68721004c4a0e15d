from pyedid.decoders.bits import TWO_BIT_MASK, high_nibble, join_high, low_nibble
from pyedid.decoders.reader import ByteReader
from pyedid.models.timing_models import DetailedTiming

DETAILED_TIMING_SIZE = 18

# Shifts of the 2-bit slices in the porch/sync high byte.
H_FRONT_PORCH_HI_SHIFT = 6
H_SYNC_HI_SHIFT = 4
V_FRONT_PORCH_HI_SHIFT = 2
V_SYNC_HI_SHIFT = 0


def pixel_clock_khz(raw: int) -> int:
    # Stored in units of 10 kHz.
    return raw * 10


def porch_sync_high(value: int, shift: int) -> int:
    return (value >> shift) & TWO_BIT_MASK


def parse_detailed_timing(reader: ByteReader) -> DetailedTiming:
    """
    Decode one 18-byte detailed timing descriptor.

    Counts wider than 8 bits are split into a low byte and a few high bits
    held in a byte shared with a neighbouring field:

    ====  ============================================================
    Byte  Content
    ====  ============================================================
    0-1   pixel clock, 10 kHz units, little endian
    2     horizontal active, low 8 bits
    3     horizontal blanking, low 8 bits
    4     horizontal active (high nibble) | horizontal blanking (low nibble)
    5     vertical active, low 8 bits
    6     vertical blanking, low 8 bits
    7     vertical active (high nibble) | vertical blanking (low nibble)
    8     horizontal front porch, low 8 bits
    9     horizontal sync width, low 8 bits
    10    vertical front porch (high nibble) | vertical sync width (low nibble)
    11    2-bit high parts: h porch 7-6, h sync 5-4, v porch 3-2, v sync 1-0
    12    horizontal image size (mm), low 8 bits
    13    vertical image size (mm), low 8 bits
    14    horizontal size (high nibble) | vertical size (low nibble)
    15    horizontal border
    16    vertical border
    17    features
    ====  ============================================================
    """
    pixel_clock = reader.le_u16()
    h_active_lo, h_blank_lo, h_hi = reader.take(3)
    v_active_lo, v_blank_lo, v_hi = reader.take(3)
    h_front_porch_lo, h_sync_lo, v_porch_sync_lo, porch_sync_hi = reader.take(4)
    h_size_lo, v_size_lo, size_hi = reader.take(3)
    h_border, v_border, features = reader.take(3)

    return DetailedTiming(
        pixel_clock=pixel_clock_khz(pixel_clock),
        h_active=join_high(h_active_lo, high_nibble(h_hi)),
        h_blank=join_high(h_blank_lo, low_nibble(h_hi)),
        v_active=join_high(v_active_lo, high_nibble(v_hi)),
        v_blank=join_high(v_blank_lo, low_nibble(v_hi)),
        h_front_porch=join_high(h_front_porch_lo, porch_sync_high(porch_sync_hi, H_FRONT_PORCH_HI_SHIFT)),
        h_sync=join_high(h_sync_lo, porch_sync_high(porch_sync_hi, H_SYNC_HI_SHIFT)),
        v_front_porch=join_high(high_nibble(v_porch_sync_lo), porch_sync_high(porch_sync_hi, V_FRONT_PORCH_HI_SHIFT)),
        v_sync=join_high(low_nibble(v_porch_sync_lo), porch_sync_high(porch_sync_hi, V_SYNC_HI_SHIFT)),
        h_size=join_high(h_size_lo, high_nibble(size_hi)),
        v_size=join_high(v_size_lo, low_nibble(size_hi)),
        h_border=h_border,
        v_border=v_border,
        features=features,
    )

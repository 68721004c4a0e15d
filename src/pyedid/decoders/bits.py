NIBBLE_MASK = 0x0F
TWO_BIT_MASK = 0x03
THREE_BIT_MASK = 0x07
FIVE_BIT_MASK = 0x1F
SEVEN_BIT_MASK = 0x7F

VENDOR_LETTER_SHIFTS = (10, 5, 0)
# 0x01 maps to "A"
VENDOR_LETTER_BASE = ord("A") - 1


def get_bits(value: int, shift: int, width: int) -> int:
    # Get ``width`` bits of ``value``, starting at bit ``shift`` (LSB = 0).

    if shift < 0 or width <= 0:
        raise ValueError("Invalid bit range")

    return (value >> shift) & ((1 << width) - 1)


def get_bit(value: int, bit: int) -> int:
    return get_bits(value, bit, 1)


def high_nibble(value: int) -> int:
    return get_bits(value, 4, 4)


def low_nibble(value: int) -> int:
    return value & NIBBLE_MASK


def join_high(low: int, high: int) -> int:
    """Rebuild a field split into a low byte and a few high bits."""
    return low | (high << 8)


def vendor_letter(code: int, shift: int) -> str:
    # Values outside 1..26 fall outside A-Z; kept as-is.
    return chr(((code >> shift) & FIVE_BIT_MASK) + VENDOR_LETTER_BASE)


def decode_vendor(code: int) -> str:
    """Three-letter manufacturer ID packed into a big-endian 16-bit word."""
    return "".join(vendor_letter(code, shift) for shift in VENDOR_LETTER_SHIFTS)

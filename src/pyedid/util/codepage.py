"""Byte to character table used to render text descriptors (IBM code page 437)."""

CODEPAGE = "cp437"

_TABLE = bytes(range(256)).decode(CODEPAGE)


def forward(byte: int) -> str:
    return _TABLE[byte]


def decode_text(data: bytes) -> str:
    return "".join(forward(byte) for byte in data)

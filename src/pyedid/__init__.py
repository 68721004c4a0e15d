from pyedid.decoders.edid import parse, parse_base_block
from pyedid.exceptions import EdidParseError, InvalidLengthError, MagicMismatchError, UnexpectedEndError
from pyedid.models.edid_models import EDID
from pyedid.util.checksum import verify_checksums

__all__ = [
    "EDID",
    "EdidParseError",
    "InvalidLengthError",
    "MagicMismatchError",
    "UnexpectedEndError",
    "parse",
    "parse_base_block",
    "verify_checksums",
]

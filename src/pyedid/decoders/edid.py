import logging
from typing import Tuple

from pyedid.decoders.descriptors import parse_descriptors
from pyedid.decoders.extension import parse_extension
from pyedid.decoders.header import parse_display, parse_header
from pyedid.decoders.reader import ByteReader
from pyedid.models.edid_models import EDID

logger = logging.getLogger(__name__)

CHROMATICITY_SIZE = 10
ESTABLISHED_TIMING_SIZE = 3
STANDARD_TIMING_SIZE = 16


def _parse_base(reader: ByteReader) -> Tuple[EDID, int]:
    with reader.context("header"):
        header = parse_header(reader)
    with reader.context("display"):
        display = parse_display(reader)

    # Not modelled yet
    with reader.context("chromaticity"):
        reader.skip(CHROMATICITY_SIZE)
    with reader.context("established timing"):
        reader.skip(ESTABLISHED_TIMING_SIZE)
    with reader.context("standard timing"):
        reader.skip(STANDARD_TIMING_SIZE)

    descriptors = parse_descriptors(reader)

    with reader.context("extension count"):
        extension_count = reader.u8()
    with reader.context("checksum"):
        reader.u8()

    edid = EDID(header=header, display=display, descriptors=descriptors)
    return edid, extension_count


def parse(data: bytes) -> Tuple[EDID, bytes]:
    """
    Decode an EDID base block and its first extension block, if any.

    Returns the decoded record and the bytes left unconsumed, which are empty
    for a well-formed blob. Raises :class:`~pyedid.exceptions.EdidParseError`
    on malformed input; no partial record is returned. Checksums are not
    verified, see :mod:`pyedid.util.checksum`.
    """
    reader = ByteReader(data)
    edid, extension_count = _parse_base(reader)

    if extension_count:
        if extension_count > 1:
            logger.debug("%d extensions declared, only the first is decoded", extension_count)
        with reader.context("extension"):
            edid = edid.model_copy(update={"extensions": parse_extension(reader)})

    return edid, reader.rest()


def parse_base_block(data: bytes) -> Tuple[EDID, bytes]:
    """
    Decode only the 128-byte base block.

    The extension count is read but ignored: any extension bytes are returned
    unconsumed, so a caller holding only the first 128 bytes can decode them.
    """
    reader = ByteReader(data)
    edid, _ = _parse_base(reader)
    return edid, reader.rest()

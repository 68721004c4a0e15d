import argparse
import json
import logging
import sys
from typing import List, Optional

from pyedid.decoders.edid import parse
from pyedid.dumps.common.edid import summarize_edid
from pyedid.dumps.linux.display import DRM_ROOT, fetch_display_info
from pyedid.exceptions import EdidParseError
from pyedid.util.checksum import verify_checksums

logger = logging.getLogger("pyedid")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyedid", description="Decode EDID blobs into JSON.")
    parser.add_argument("files", nargs="*", metavar="FILE",
                        help="raw EDID file to decode ('-' reads standard input)")
    parser.add_argument("--sysfs", action="store_true",
                        help="decode the EDID of every connector found under --drm-root")
    parser.add_argument("--drm-root", default=DRM_ROOT,
                        help="DRM class directory to scan (default: %(default)s)")
    parser.add_argument("--summary", action="store_true",
                        help="print a display summary instead of the full record")
    parser.add_argument("--verify-checksum", action="store_true",
                        help="report whether each block's checksum is valid")
    parser.add_argument("--indent", type=int, default=2,
                        help="JSON indentation (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log decoding steps")
    return parser


def _read(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _decode_file(path: str, options) -> dict:
    data = _read(path)
    edid, remaining = parse(data)

    if options.summary:
        result = json.loads(summarize_edid(edid).model_dump_json(exclude={"edid"}))
    else:
        result = json.loads(edid.model_dump_json())
    if remaining:
        result["unconsumed"] = len(remaining)
    if options.verify_checksum:
        result["checksums"] = verify_checksums(data)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    options = parser.parse_args(argv)

    log_format = "%(levelname)s "
    log_verbosity = logging.WARNING
    if options.verbose:
        log_format += "(%(name)s) "
        log_verbosity = logging.DEBUG
    log_format += "%(message)s"
    logging.basicConfig(level=log_verbosity, format=log_format)

    if options.sysfs:
        info = fetch_display_info(options.drm_root)
        exclude = {"modules": {"__all__": {"edid"}}} if options.summary else None
        print(info.model_dump_json(indent=options.indent, exclude=exclude))
        return 0

    if not options.files:
        parser.error("no input: pass FILE arguments or --sysfs")

    results = {}
    failed = False
    for path in options.files:
        try:
            results[path] = _decode_file(path, options)
        except (OSError, EdidParseError) as error:
            logger.error("%s: %s", path, error)
            failed = True

    output = results[options.files[0]] if len(options.files) == 1 and results else results
    if results:
        print(json.dumps(output, indent=options.indent))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

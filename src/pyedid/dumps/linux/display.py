import logging
import os
import re
from typing import Optional

from pyedid.decoders.edid import parse
from pyedid.dumps.common.edid import summarize_edid
from pyedid.exceptions import EdidParseError
from pyedid.models.display_models import DisplayInfo, DisplayModuleInfo
from pyedid.models.status_models import FailedStatus, PartialStatus
from pyedid.util.checksum import verify_checksums

logger = logging.getLogger(__name__)

DRM_ROOT = "/sys/class/drm"


def _add_issue(module: DisplayModuleInfo, message: str):
    if not isinstance(module.status, PartialStatus):
        module.status = PartialStatus(messages=module.status.messages)
    module.status.messages.append(message)


def decode_edid_blob(edid_data: bytes, connector: Optional[str] = None, path: Optional[str] = None) -> DisplayModuleInfo:
    """Decode one raw EDID blob into a ``DisplayModuleInfo`` carrying a status."""
    try:
        edid, remaining = parse(edid_data)
    except EdidParseError as error:
        logger.debug("Failed to decode EDID of %s: %s", connector or path, error)
        return DisplayModuleInfo(connector=connector, path=path, status=FailedStatus(str(error)))

    module = summarize_edid(edid)
    module.connector = connector
    module.path = path

    if remaining:
        _add_issue(module, f"{len(remaining)} trailing byte(s) after the decoded blocks")

    for index, valid in enumerate(verify_checksums(edid_data)):
        if not valid:
            _add_issue(module, f"Checksum mismatch in block {index}")

    return module


def _fetch_individual_monitor_info(device_path: str) -> Optional[DisplayModuleInfo]:
    path = os.path.join(device_path, "edid")
    if not os.path.exists(path): return None
    try:
        with open(path, "rb") as f:
            edid_data = f.read()
    except OSError as error:
        logger.debug("Could not read %s: %s", path, error)
        return None
    # Disconnected connectors expose an empty file
    if len(edid_data) == 0: return None
    return decode_edid_blob(edid_data, connector=os.path.basename(device_path), path=path)


def fetch_display_info(root_path: str = DRM_ROOT) -> DisplayInfo:
    display_info = DisplayInfo()
    if not os.path.isdir(root_path):
        display_info.status = FailedStatus(f"{root_path} does not exist")
        return display_info

    pattern = re.compile(r"^card\d+$")
    parent_devices = sorted(os.listdir(root_path))
    parent_devices = [os.path.join(root_path, device) for device in parent_devices if pattern.match(device)]

    for parent_path in parent_devices:
        card = os.path.basename(parent_path)
        try:
            entries = os.listdir(parent_path)
        except OSError as error:
            logger.debug("Could not list %s: %s", parent_path, error)
            continue
        children = sorted(x for x in entries if x.startswith(card + "-"))
        for child in children:
            response = _fetch_individual_monitor_info(os.path.join(parent_path, child))
            if response:
                display_info.modules.append(response)

    return display_info

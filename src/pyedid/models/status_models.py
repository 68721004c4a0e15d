from typing import List, Optional

from pydantic import BaseModel, Field


# A display that picks up an issue is upgraded to PartialStatus, keeping earlier
# messages; see pyedid.dumps.linux.display._add_issue.
class StatusModel(BaseModel):
    """This is the base class for all status models.
    Every discovered display will have a ``status`` attribute,
    which is one of ``SuccessStatus``, ``PartialStatus`` or ``FailedStatus``.
    This class will not be used by any display as is."""
    string: str
    messages: List[str] = Field(default_factory=list)


class SuccessStatus(StatusModel):
    """StatusModel used when the EDID was decoded without issues."""
    string: str = "success"
    messages: List[str] = Field(default_factory=list)


class PartialStatus(StatusModel):
    """
    StatusModel used when the EDID was decoded, but something about it is off:
    trailing bytes after the decoded blocks, or a block whose checksum does not match.
    Messages describe each issue.
    """
    string: str = "partial"
    messages: List[str] = Field(default_factory=list)


class FailedStatus(StatusModel):
    """
    StatusModel used when the EDID could not be decoded at all.
    Messages contain the parse error, with the stack of decoding stages it went through.
    """
    string: str = "failed"
    messages: List[str] = Field(default_factory=list)

    def __init__(self, message: Optional[str] = None, messages: Optional[List[str]] = None):
        # Ensure each instance gets its own list
        base_messages = list(messages) if messages else []
        if message:
            base_messages.append(message)
        super().__init__(string="failed", messages=base_messages)

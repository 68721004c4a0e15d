from typing import List


class EdidParseError(Exception):
    """Base class for every failure raised while decoding an EDID blob.

    ``position`` is the absolute byte offset at which decoding stopped.
    ``contexts`` holds the labels of the decoding stages the failure
    propagated through, innermost first.
    """

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.message = message
        self.position = position
        self.contexts: List[str] = []

    def add_context(self, label: str):
        self.contexts.append(label)

    def __str__(self):
        text = f"{self.message} at byte {self.position}"
        if self.contexts:
            text += " (in " + " > ".join(reversed(self.contexts)) + ")"
        return text


class MagicMismatchError(EdidParseError):
    """The fixed 8-byte header did not match."""

    def __init__(self, expected: bytes, actual: bytes, position: int):
        super().__init__(f"expected header {expected.hex(' ')}, found {actual.hex(' ')}", position)
        self.expected = expected
        self.actual = actual


class UnexpectedEndError(EdidParseError):
    """Fewer bytes remain than a field requires."""

    def __init__(self, needed: int, available: int, position: int):
        super().__init__(f"needed {needed} byte(s), {available} available", position)
        self.needed = needed
        self.available = available


class InvalidLengthError(EdidParseError):
    """A declared length or offset that no well-formed block can carry."""

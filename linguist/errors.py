"""
Error types raised by Linguist.

Every failure is local to the action that triggered it; callers catch
LinguistError and show its message.
"""


class LinguistError(Exception):
    """Base class for user-facing failures."""


class RemoteCallError(LinguistError):
    """The remote model failed, timed out, or returned nothing usable."""


class EmptyResponseError(RemoteCallError):
    """The remote call succeeded but carried no text or audio."""


class DeviceAccessError(LinguistError):
    """Microphone or audio output could not be opened."""


class SizeLimitExceeded(LinguistError):
    """An uploaded artifact is larger than the configured limit."""

    def __init__(self, name: str, size: int, limit: int):
        self.name = name
        self.size = size
        self.limit = limit
        super().__init__(
            f"File is too large ({format_file_size(size)}). "
            f"Max allowed size is {format_file_size(limit)}."
        )


class ReadError(LinguistError):
    """Local file content could not be decoded as text."""


class ExportError(LinguistError):
    """Translated text could not be rendered in the requested format."""


def format_file_size(size: int) -> str:
    """Format a byte count like '1.5 MB'."""
    if size <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{round(value, 2):g} {units[index]}"

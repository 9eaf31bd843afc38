from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

_SIZE_UNITS = ("B", "KB", "MB", "GB")


def format_file_size(size_bytes: float) -> str:
    """Human-readable size using 1024-based units, e.g. ``1.5 KB``."""
    if size_bytes <= 0:
        return "0 B"
    value = float(size_bytes)
    unit = 0
    while value >= 1024 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{round(value, 2):g} {_SIZE_UNITS[unit]}"


@dataclass(slots=True)
class ImageDescriptor:
    """Normalized metadata for one candidate image file.

    Produced once per file per run. ``code`` is replaced with the canonical
    institution code after a successful registry match; nothing else changes.
    """

    path: Path
    name: str
    code: str | None
    extension: str
    size_bytes: int
    mime_type: str
    is_supported_format: bool
    is_valid_size: bool
    created: datetime
    modified: datetime

    @property
    def size_formatted(self) -> str:
        return format_file_size(self.size_bytes)

import os
from datetime import datetime
from pathlib import Path

from logo_ingest.inspection.models import ImageDescriptor
from logo_ingest.logging.logger import Log

UNKNOWN_MIME_TYPE = "unknown"

MIME_TYPES: dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
    ".bmp": "image/bmp",
    ".ico": "image/x-icon",
    ".tiff": "image/tiff",
    ".tif": "image/tiff",
}


def extract_code(filename: str) -> str | None:
    """Return the filename stem when it is a non-negative integer string.

    ``"123.png"`` gives ``"123"``; ``"logo-a.png"`` gives ``None``.
    """
    stem = Path(filename).stem
    if stem.isascii() and stem.isdigit():
        return stem
    return None


class FileInspector:
    """Stats a file and derives its ImageDescriptor."""

    def __init__(
        self,
        supported_formats: list[str],
        min_file_size: int,
        max_file_size: int,
    ) -> None:
        self._supported_formats = {ext.lower() for ext in supported_formats}
        self._min_file_size = min_file_size
        self._max_file_size = max_file_size

    def is_supported(self, extension: str) -> bool:
        return extension.lower() in self._supported_formats

    def inspect(self, path: Path) -> ImageDescriptor | None:
        """Build the descriptor for ``path``.

        Returns None (after logging) when the file cannot be stat'ed; the file
        is then left out of the run.
        """
        try:
            stats = path.stat()
        except OSError as exc:
            Log.error(f"Error processing {path}: {exc}")
            return None

        extension = path.suffix.lower()
        size = stats.st_size
        return ImageDescriptor(
            path=path,
            name=path.name,
            code=extract_code(path.name),
            extension=extension,
            size_bytes=size,
            mime_type=MIME_TYPES.get(extension, UNKNOWN_MIME_TYPE),
            is_supported_format=self.is_supported(extension),
            is_valid_size=self._min_file_size <= size <= self._max_file_size,
            created=_created_at(stats),
            modified=datetime.fromtimestamp(stats.st_mtime),
        )


def _created_at(stats: os.stat_result) -> datetime:
    # st_birthtime is only reported on some platforms.
    return datetime.fromtimestamp(getattr(stats, "st_birthtime", stats.st_ctime))

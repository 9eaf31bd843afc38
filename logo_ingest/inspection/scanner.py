import os
from pathlib import Path

from logo_ingest.logging.logger import Log
from logo_ingest.report.models import OutcomeReport


class DirectoryScanner:
    """Lists the candidate image files of a directory in entry order."""

    def __init__(self, supported_formats: list[str]) -> None:
        self._supported_formats = {ext.lower() for ext in supported_formats}

    def scan(self, directory: Path, report: OutcomeReport) -> list[Path]:
        """Return regular files with a supported extension.

        Unsupported regular files are added to ``report`` as skipped.
        Directories and other non-regular entries are ignored. A directory
        read failure is logged and yields an empty list.
        """
        image_files: list[Path] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if not entry.is_file(follow_symlinks=False):
                        continue
                    extension = Path(entry.name).suffix.lower()
                    if extension in self._supported_formats:
                        image_files.append(Path(directory) / entry.name)
                    else:
                        report.add_skipped(entry.name, f"Unsupported format: {extension}")
        except OSError as exc:
            Log.error(f"Error reading directory {directory}: {exc}")
            return []
        return image_files

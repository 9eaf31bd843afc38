from logo_ingest.inspection.models import ImageDescriptor
from logo_ingest.processor.exceptions import FileReadError


class FileLoader:
    """Reads the bytes of an inspected image file."""

    def load(self, descriptor: ImageDescriptor) -> bytes:
        """Read image bytes from disk.

        Raises:
            FileReadError: if the file is missing or unreadable.
        """
        try:
            return descriptor.path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Could not read {descriptor.name}: {exc}") from exc

from logo_ingest.inspection.models import ImageDescriptor
from logo_ingest.logging.logger import Log
from logo_ingest.processor.exceptions import FileReadError
from logo_ingest.processor.file_loader import FileLoader
from logo_ingest.processor.results import Failure, FailureKind, ProcessingResult, Resolved
from logo_ingest.registry.store import RegistryStore
from logo_ingest.storage.base import BaseUploader
from logo_ingest.storage.exceptions import StorageError
from logo_ingest.storage.models import is_placeholder_icon, logo_key


class ImageMatcher:
    """Validates one image, matches it to a bank and publishes its logo.

    Rules run in order and the first failing rule decides the result:
    format, code, size, registry match, existing icon, CI mode, upload.
    Nothing here raises for a bad image; every outcome is a ProcessingResult.
    """

    def __init__(
        self,
        registry: RegistryStore,
        uploader: BaseUploader,
        max_file_size: int,
        is_ci: bool = False,
        file_loader: FileLoader | None = None,
    ) -> None:
        self._registry = registry
        self._uploader = uploader
        self._max_file_size = max_file_size
        self._is_ci = is_ci
        self._file_loader = file_loader if file_loader is not None else FileLoader()

    def match(self, descriptor: ImageDescriptor) -> ProcessingResult:
        if not descriptor.is_supported_format:
            return self._reject(
                FailureKind.VALIDATION, f"Unsupported format: {descriptor.mime_type}"
            )

        if descriptor.code is None:
            return self._reject(FailureKind.MATCH, f"No code found: {descriptor.name}")

        if not descriptor.is_valid_size:
            problem = (
                "too large" if descriptor.size_bytes > self._max_file_size else "too small"
            )
            Log.warning(f"File {problem}: {descriptor.name} ({descriptor.size_formatted})")
            return self._reject(
                FailureKind.VALIDATION,
                f"Invalid size ({problem}): {descriptor.name} ({descriptor.size_formatted})",
            )

        index = self._registry.find_index(descriptor.code)
        if index is None:
            return self._reject(FailureKind.MATCH, f"No bank found: {descriptor.name}")

        bank = self._registry.get(index)
        descriptor.code = bank.nip_code

        if bank.icon and not is_placeholder_icon(bank.icon):
            Log.info(f"{bank.name} already has an icon")
            return Resolved(icon_url=bank.icon)

        if self._is_ci:
            return Resolved(icon_url=bank.icon)

        try:
            data = self._file_loader.load(descriptor)
            icon_url = self._uploader.upload(data, logo_key(bank.nip_code), descriptor.mime_type)
        except (FileReadError, StorageError) as exc:
            Log.error(str(exc))
            return Failure(kind=FailureKind.UPLOAD, message=str(exc))

        self._registry.set_icon(index, icon_url)
        return Resolved(icon_url=icon_url)

    def _reject(self, kind: FailureKind, message: str) -> Failure:
        Log.warning(message)
        return Failure(kind=kind, message=message)

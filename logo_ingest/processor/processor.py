from pathlib import Path

from logo_ingest.config.settings import Settings
from logo_ingest.inspection.inspector import FileInspector
from logo_ingest.inspection.models import ImageDescriptor
from logo_ingest.inspection.scanner import DirectoryScanner
from logo_ingest.logging.logger import Log
from logo_ingest.processor.engine import ImageMatcher
from logo_ingest.processor.file_loader import FileLoader
from logo_ingest.processor.models import ProcessingRun
from logo_ingest.processor.results import Resolved
from logo_ingest.registry.store import RegistryStore
from logo_ingest.storage.base import BaseUploader
from logo_ingest.storage.factory import UploaderFactory


class ImageProcessor:
    """Orchestrates one pass over an image directory.

    Pipeline: scan -> inspect -> match/upload -> record outcome, one file at a
    time in directory-entry order.
    """

    def __init__(
        self,
        scanner: DirectoryScanner,
        inspector: FileInspector,
        matcher: ImageMatcher,
    ) -> None:
        self._scanner = scanner
        self._inspector = inspector
        self._matcher = matcher

    def process_directory(self, directory: Path, verbose: bool = False) -> ProcessingRun:
        Log.info(f"Scanning directory: {directory}")
        run = ProcessingRun(directory=directory)

        image_files = self._scanner.scan(directory, run.report)
        run.total = len(image_files)
        if not image_files:
            Log.info("No supported image files found")
            return run

        Log.info(f"Found {len(image_files)} supported image files")
        for path in image_files:
            descriptor = self._inspector.inspect(path)
            if descriptor is None:
                continue
            run.descriptors.append(descriptor)
            if verbose:
                _log_descriptor(descriptor)

            result = self._matcher.match(descriptor)
            run.report.record(descriptor.name, result)
            if isinstance(result, Resolved):
                run.processed += 1

        Log.info(f"Processed {run.processed} images successfully")
        return run


def _log_descriptor(descriptor: ImageDescriptor) -> None:
    ok = descriptor.is_supported_format and descriptor.is_valid_size
    status = "OK" if ok else "WARN"
    Log.info(
        f"{status} {descriptor.name} | {descriptor.mime_type} | {descriptor.size_formatted}"
    )


def build_processor(
    settings: Settings,
    registry: RegistryStore,
    *,
    is_ci: bool | None = None,
    max_file_size: int | None = None,
    uploader: BaseUploader | None = None,
) -> ImageProcessor:
    """Build an ImageProcessor wired from settings.

    ``is_ci`` and ``max_file_size`` override the settings values; the check
    command uses them to run with the stricter CI size bound.
    """
    ci_mode = settings.ci if is_ci is None else is_ci
    max_size = settings.max_file_size_bytes if max_file_size is None else max_file_size
    matcher = ImageMatcher(
        registry=registry,
        uploader=uploader if uploader is not None else UploaderFactory.create(settings),
        max_file_size=max_size,
        is_ci=ci_mode,
        file_loader=FileLoader(),
    )
    return ImageProcessor(
        scanner=DirectoryScanner(settings.supported_formats),
        inspector=FileInspector(
            settings.supported_formats,
            min_file_size=settings.min_file_size_bytes,
            max_file_size=max_size,
        ),
        matcher=matcher,
    )

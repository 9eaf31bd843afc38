from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

from logo_ingest.config.settings import Settings
from logo_ingest.inspection.inspector import FileInspector
from logo_ingest.inspection.scanner import DirectoryScanner
from logo_ingest.processor.engine import ImageMatcher
from logo_ingest.processor.processor import ImageProcessor, build_processor
from logo_ingest.processor.results import Failure, FailureKind, Resolved
from logo_ingest.registry.store import RegistryStore
from logo_ingest.storage.base import BaseUploader

SUPPORTED = [".jpg", ".jpeg", ".png", ".gif", ".svg"]


def _make_processor() -> tuple[ImageProcessor, MagicMock]:
    matcher = MagicMock(spec=ImageMatcher)
    processor = ImageProcessor(
        scanner=DirectoryScanner(SUPPORTED),
        inspector=FileInspector(SUPPORTED, min_file_size=1024, max_file_size=4096),
        matcher=matcher,
    )
    return processor, matcher


class TestProcessDirectory:
    def test_every_file_lands_in_exactly_one_bucket(
        self, image_dir: Path, write_image: Callable[[str, int], Path]
    ) -> None:
        names = ["1.png", "2.png", "3.png", "4.png"]
        for name in names:
            write_image(name, 2048)
        write_image("5.bmp", 2048)
        processor, matcher = _make_processor()
        outcomes = {
            "1.png": Resolved(icon_url="https://cdn/logo/1"),
            "2.png": Failure(FailureKind.VALIDATION, "Invalid size"),
            "3.png": Failure(FailureKind.MATCH, "No bank found: 3.png"),
            "4.png": Failure(FailureKind.UPLOAD, "boom"),
        }
        matcher.match.side_effect = lambda d: outcomes[d.name]

        run = processor.process_directory(image_dir)

        report = run.report
        bucketed = (
            [s.name for s in report.skipped] + report.failed_upload + report.completed
        )
        assert sorted(bucketed) == sorted([*names, "5.bmp"])
        assert len(bucketed) == len(set(bucketed))
        assert report.completed == ["1.png"]
        assert report.failed_upload == ["4.png"]
        assert run.processed == 1
        assert run.total == 4
        assert len(run.descriptors) == 4

    def test_matches_in_scan_order(
        self, image_dir: Path, write_image: Callable[[str, int], Path]
    ) -> None:
        for name in ("30.png", "10.png", "20.png"):
            write_image(name, 2048)
        processor, matcher = _make_processor()
        matcher.match.return_value = Resolved(icon_url=None)
        scanned = [p.name for p in DirectoryScanner(SUPPORTED).scan(image_dir, MagicMock())]

        run = processor.process_directory(image_dir)

        matched = [c.args[0].name for c in matcher.match.call_args_list]
        assert matched == scanned
        assert run.report.completed == scanned

    def test_empty_directory_yields_empty_run(self, image_dir: Path) -> None:
        processor, matcher = _make_processor()

        run = processor.process_directory(image_dir)

        assert run.descriptors == []
        assert run.report.completed == []
        assert run.report.skipped == []
        assert run.report.failed_upload == []
        matcher.match.assert_not_called()

    def test_uninspectable_file_is_left_out(
        self, image_dir: Path, write_image: Callable[[str, int], Path]
    ) -> None:
        write_image("1.png", 2048)
        processor, matcher = _make_processor()
        processor._inspector = MagicMock(spec=FileInspector)
        processor._inspector.inspect.return_value = None

        run = processor.process_directory(image_dir)

        assert run.total == 1
        assert run.descriptors == []
        matcher.match.assert_not_called()


class TestBuildProcessor:
    def test_wires_ci_size_override(self, registry: RegistryStore) -> None:
        settings = Settings(max_file_size_bytes=5000, ci=False)
        uploader = MagicMock(spec=BaseUploader)

        processor = build_processor(
            settings, registry, is_ci=True, max_file_size=100, uploader=uploader
        )

        assert processor._matcher._is_ci is True
        assert processor._matcher._max_file_size == 100
        assert processor._inspector._max_file_size == 100
        assert processor._matcher._uploader is uploader

    def test_defaults_come_from_settings(self, registry: RegistryStore) -> None:
        settings = Settings(max_file_size_bytes=5000, ci=True)

        processor = build_processor(settings, registry)

        assert processor._matcher._is_ci is True
        assert processor._matcher._max_file_size == 5000

import argparse
from collections.abc import Sequence
from pathlib import Path

from logo_ingest.cleanup.coordinator import CleanupCoordinator
from logo_ingest.config.settings import Settings
from logo_ingest.logging.logger import Log
from logo_ingest.processor.processor import build_processor
from logo_ingest.registry.exceptions import RegistryLoadError
from logo_ingest.registry.store import RegistryStore
from logo_ingest.report.aggregator import ReportAggregator
from logo_ingest.report.models import OutcomeReport

PLACEHOLDER_IMAGE_NAME = "default-image.png"


def run_sync(settings: Settings, directory: Path) -> int:
    """Validate, upload and clean up. Returns the process exit code."""
    r2_config = settings.r2_config()
    if not settings.ci and not r2_config.is_complete:
        Log.error("Missing R2 configuration. Please set environment variables:")
        Log.error(", ".join(r2_config.missing_fields()))
        return 1

    try:
        registry = RegistryStore.load(settings.banks_file_path)
    except RegistryLoadError as exc:
        Log.error(f"Script failed: {exc}")
        return 1

    processor = build_processor(settings, registry)
    run = processor.process_directory(directory, verbose=not settings.ci)
    ReportAggregator().log_report(run.descriptors, run.report)

    if settings.ci:
        return 0

    coordinator = CleanupCoordinator(
        registry,
        settings.banks_file_path,
        r2_config.placeholder_icon_url,
    )
    cleanup = coordinator.run(run.report.completed, directory)
    if not cleanup.ok:
        Log.error(f"Cleanup failed: {cleanup.error_message}")
        return 1
    return 0


def run_check(settings: Settings, directory: Path) -> int:
    """Validation-only pass for pull requests. Never writes to storage."""
    try:
        registry = RegistryStore.load(settings.banks_file_path)
    except RegistryLoadError as exc:
        Log.error(f"CI script failed: {exc}")
        return 1

    processor = build_processor(
        settings,
        registry,
        is_ci=True,
        max_file_size=settings.ci_max_file_size_bytes,
    )
    run = processor.process_directory(directory)
    return check_exit_code(run.report)


def check_exit_code(report: OutcomeReport) -> int:
    invalid = [item for item in report.skipped if item.name != PLACEHOLDER_IMAGE_NAME]
    if invalid:
        Log.error("Some images failed validation:")
        for item in invalid:
            Log.error(f"  - {item.name}: {item.reason}")
        return 1
    if not report.completed:
        Log.error("No new images to process")
        return 1
    Log.info("All images are valid.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logo-ingest",
        description="Validate bank logo images and publish them to R2.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("sync", "validate, upload new logos and clean up the image directory"),
        ("check", "validate images only, without uploading (CI)"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument(
            "directory",
            nargs="?",
            type=Path,
            help="image directory (defaults to IMAGE_DIRECTORY)",
        )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse args -> load settings -> run the chosen command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    directory = args.directory or settings.image_directory
    if args.command == "check":
        return run_check(settings, directory)
    return run_sync(settings, directory)


if __name__ == "__main__":
    raise SystemExit(main())

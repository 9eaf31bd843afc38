from collections.abc import Sequence

from logo_ingest.inspection.models import ImageDescriptor, format_file_size
from logo_ingest.logging.logger import Log
from logo_ingest.report.models import OutcomeReport, ReportSummary


class ReportAggregator:
    """Builds the end-of-run summary. Never mutates descriptors."""

    def summarize(self, descriptors: Sequence[ImageDescriptor]) -> ReportSummary:
        by_type: dict[str, int] = {}
        largest: ImageDescriptor | None = None
        smallest: ImageDescriptor | None = None
        total_size = 0
        for descriptor in descriptors:
            by_type[descriptor.mime_type] = by_type.get(descriptor.mime_type, 0) + 1
            total_size += descriptor.size_bytes
            if largest is None or descriptor.size_bytes > largest.size_bytes:
                largest = descriptor
            if smallest is None or descriptor.size_bytes < smallest.size_bytes:
                smallest = descriptor

        return ReportSummary(
            total=len(descriptors),
            by_type=by_type,
            total_size=total_size,
            average_size=total_size / len(descriptors) if descriptors else 0.0,
            largest=largest,
            smallest=smallest,
            unsupported=sum(1 for d in descriptors if not d.is_supported_format),
            invalid_size=sum(1 for d in descriptors if not d.is_valid_size),
        )

    def render(
        self,
        descriptors: Sequence[ImageDescriptor],
        report: OutcomeReport,
    ) -> list[str]:
        """Format the summary and the outcome buckets as report lines."""
        summary = self.summarize(descriptors)
        lines = [
            "PROCESSING REPORT",
            "=================",
            f"Total files processed: {summary.total}",
            f"Completed: {len(report.completed)}",
            f"Skipped: {len(report.skipped)}",
            f"Failed upload: {len(report.failed_upload)}",
            f"Total size: {format_file_size(summary.total_size)}",
            f"Average size: {format_file_size(summary.average_size)}",
        ]
        if summary.largest is not None:
            lines.append(
                f"Largest file: {summary.largest.name} ({summary.largest.size_formatted})"
            )
        if summary.smallest is not None:
            lines.append(
                f"Smallest file: {summary.smallest.name} ({summary.smallest.size_formatted})"
            )

        lines.append("By file type:")
        lines.extend(f"  {mime}: {count} files" for mime, count in summary.by_type.items())

        if summary.unsupported:
            lines.append(f"Unsupported files: {summary.unsupported}")
        if summary.invalid_size:
            lines.append(f"Invalid size files: {summary.invalid_size}")

        if report.skipped:
            lines.append(f"Skipped: {len(report.skipped)} files")
            lines.extend(f"  - {item.name}: {item.reason}" for item in report.skipped)
        if report.failed_upload:
            lines.append(f"Failed upload: {len(report.failed_upload)} files")
            lines.extend(f"  - {name}" for name in report.failed_upload)
        if report.completed:
            lines.append(f"Completed: {len(report.completed)} files")
            lines.extend(f"  - {name}" for name in report.completed)
        return lines

    def log_report(
        self,
        descriptors: Sequence[ImageDescriptor],
        report: OutcomeReport,
    ) -> None:
        for line in self.render(descriptors, report):
            Log.info(line)

from dataclasses import dataclass, field

from logo_ingest.inspection.models import ImageDescriptor
from logo_ingest.processor.results import Failure, FailureKind, ProcessingResult


@dataclass(frozen=True)
class SkippedImage:
    name: str
    reason: str


@dataclass
class OutcomeReport:
    """Per-run outcome buckets, appended to in encounter order."""

    skipped: list[SkippedImage] = field(default_factory=list)
    failed_upload: list[str] = field(default_factory=list)
    completed: list[str] = field(default_factory=list)

    def add_skipped(self, name: str, reason: str) -> None:
        self.skipped.append(SkippedImage(name=name, reason=reason))

    def add_failed_upload(self, name: str) -> None:
        self.failed_upload.append(name)

    def add_completed(self, name: str) -> None:
        self.completed.append(name)

    def record(self, name: str, result: ProcessingResult) -> None:
        """Route one image result into exactly one bucket."""
        if isinstance(result, Failure):
            if result.kind is FailureKind.UPLOAD:
                self.add_failed_upload(name)
            else:
                self.add_skipped(name, result.message)
            return
        self.add_completed(name)


@dataclass(frozen=True)
class ReportSummary:
    """Read-only statistics over the descriptors of one run."""

    total: int = 0
    by_type: dict[str, int] = field(default_factory=dict)
    total_size: int = 0
    average_size: float = 0.0
    largest: ImageDescriptor | None = None
    smallest: ImageDescriptor | None = None
    unsupported: int = 0
    invalid_size: int = 0

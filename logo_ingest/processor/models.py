from dataclasses import dataclass, field
from pathlib import Path

from logo_ingest.inspection.models import ImageDescriptor
from logo_ingest.report.models import OutcomeReport


@dataclass
class ProcessingRun:
    """Everything one directory pass produced."""

    directory: Path
    descriptors: list[ImageDescriptor] = field(default_factory=list)
    report: OutcomeReport = field(default_factory=OutcomeReport)
    processed: int = 0
    total: int = 0

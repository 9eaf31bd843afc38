from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    """Why an image was not completed."""

    VALIDATION = "validation_error"
    MATCH = "match_error"
    UPLOAD = "upload_error"


@dataclass(frozen=True)
class Resolved:
    """The image is matched and its bank has a usable icon URL.

    ``icon_url`` may still be None in CI mode when the bank has no icon yet.
    """

    icon_url: str | None


@dataclass(frozen=True)
class Failure:
    """The image was rejected or could not be uploaded."""

    kind: FailureKind
    message: str


ProcessingResult = Resolved | Failure

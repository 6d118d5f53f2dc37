from dataclasses import dataclass
from enum import Enum

from scholar_renamer.metadata.models import ExtractedMetadata

PDF_CONTENT_TYPE = "application/pdf"


class ProcessingStatus(str, Enum):
    IDLE = "idle"
    READING_DOCUMENT = "reading_document"
    ANALYZING_METADATA = "analyzing_metadata"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class UploadedFile:
    """A file as handed over by the user, before admission."""

    name: str
    content_type: str
    content: bytes


@dataclass(frozen=True)
class TrackedFile:
    """Snapshot of one queue entry.

    Entries are replaced, never mutated, so ``id``, ``original_name`` and
    ``content`` stay fixed for the entry's lifetime.
    """

    id: str
    original_name: str
    content: bytes
    status: ProcessingStatus = ProcessingStatus.IDLE
    metadata: ExtractedMetadata | None = None
    suggested_name: str | None = None
    error_message: str | None = None

    @property
    def download_name(self) -> str:
        return self.suggested_name or self.original_name

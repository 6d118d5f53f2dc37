import uuid
from collections.abc import Iterable, Iterator
from dataclasses import replace

from scholar_renamer.logging.logger import Log
from scholar_renamer.processor.models import (
    PDF_CONTENT_TYPE,
    ProcessingStatus,
    TrackedFile,
    UploadedFile,
)
from scholar_renamer.session.exceptions import AdmissionError

ADMISSION_ERROR_MESSAGE = "Please upload valid PDF files."


class FileQueue:
    """In-memory, insertion-ordered list of tracked files for one session."""

    def __init__(self) -> None:
        self._entries: dict[str, TrackedFile] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TrackedFile]:
        return iter(list(self._entries.values()))

    def __contains__(self, file_id: object) -> bool:
        return file_id in self._entries

    @property
    def files(self) -> list[TrackedFile]:
        return list(self._entries.values())

    def admit(self, uploads: Iterable[UploadedFile]) -> list[TrackedFile]:
        """Track every upload declared as PDF, each as a new IDLE entry.

        Raises:
            AdmissionError: if no upload is a PDF; the queue is left unchanged.
        """
        uploads = list(uploads)
        accepted = [u for u in uploads if u.content_type == PDF_CONTENT_TYPE]
        if not accepted:
            raise AdmissionError(ADMISSION_ERROR_MESSAGE)
        if len(accepted) < len(uploads):
            Log.warning(f"Ignored {len(uploads) - len(accepted)} non-PDF file(s)")

        admitted = [
            TrackedFile(id=uuid.uuid4().hex, original_name=u.name, content=u.content)
            for u in accepted
        ]
        for entry in admitted:
            self._entries[entry.id] = entry
        Log.info(f"Admitted {len(admitted)} file(s)")
        return admitted

    def get(self, file_id: str) -> TrackedFile | None:
        return self._entries.get(file_id)

    def update(self, file_id: str, **changes: object) -> bool:
        """Replace an entry with updated fields.

        Returns False, changing nothing, when the entry is gone; in-flight
        pipeline runs rely on this to stay silent after a removal.
        """
        entry = self._entries.get(file_id)
        if entry is None:
            return False
        self._entries[file_id] = replace(entry, **changes)  # type: ignore[arg-type]
        return True

    def remove(self, file_id: str) -> bool:
        return self._entries.pop(file_id, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def completed(self) -> list[TrackedFile]:
        return [e for e in self._entries.values() if e.status is ProcessingStatus.COMPLETED]

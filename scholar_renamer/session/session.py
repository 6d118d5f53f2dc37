"""The renaming session: everything a user can do with the file queue.

One session owns the queue, the naming configuration, the per-file pipeline
tasks and the exporter. All methods run on the event loop thread; pipeline
runs interleave with them only at their await points.
"""

import asyncio
from collections.abc import Iterable
from datetime import date

from scholar_renamer.config.settings import Settings
from scholar_renamer.export.exporter import BatchExporter
from scholar_renamer.export.models import DownloadItem, ExportedArchive
from scholar_renamer.export.zip_adapter import ZipArchiveBuilder
from scholar_renamer.logging.logger import Log
from scholar_renamer.naming.generator import (
    PDF_SUFFIX,
    generate_name,
    preview_name,
    sanitize_filename,
)
from scholar_renamer.naming.models import (
    Direction,
    MetadataField,
    NamingConfiguration,
    TitleLanguage,
)
from scholar_renamer.processor.exceptions import FileNotTrackedError, InvalidTransitionError
from scholar_renamer.processor.models import ProcessingStatus, TrackedFile, UploadedFile
from scholar_renamer.processor.processor import Processor, build_processor
from scholar_renamer.session.queue import FileQueue


class RenamerSession:
    def __init__(
        self,
        *,
        queue: FileQueue,
        config: NamingConfiguration,
        processor: Processor,
        exporter: BatchExporter,
    ) -> None:
        self._queue = queue
        self._config = config
        self._processor = processor
        self._exporter = exporter
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def config(self) -> NamingConfiguration:
        return self._config

    @property
    def files(self) -> list[TrackedFile]:
        return self._queue.files

    @property
    def can_export(self) -> bool:
        return bool(self._queue.completed())

    def get(self, file_id: str) -> TrackedFile:
        entry = self._queue.get(file_id)
        if entry is None:
            raise FileNotTrackedError(f"File {file_id} is not in the queue")
        return entry

    # --- queue ---

    def admit(self, uploads: Iterable[UploadedFile]) -> list[TrackedFile]:
        """Admit PDF uploads and start one pipeline run per new entry.

        Must be called from a running event loop.

        Raises:
            AdmissionError: if no upload is a PDF.
        """
        admitted = self._queue.admit(uploads)
        for entry in admitted:
            self._start(entry.id)
        return admitted

    def retry(self, file_id: str) -> None:
        """Re-run the full pipeline for a failed file."""
        entry = self.get(file_id)
        if entry.status is not ProcessingStatus.FAILED:
            raise InvalidTransitionError(
                f"Only failed files can be retried, file {file_id} is {entry.status.value}"
            )
        # leave FAILED now so a second retry cannot start a parallel run
        self._queue.update(
            file_id, status=ProcessingStatus.READING_DOCUMENT, error_message=None
        )
        Log.info(f"Retrying file {file_id}")
        self._start(file_id)

    def remove(self, file_id: str) -> bool:
        removed = self._queue.remove(file_id)
        if removed:
            Log.info(f"Removed file {file_id}")
        return removed

    def clear(self) -> None:
        self._queue.clear()
        Log.info("Cleared all files")

    async def wait_idle(self) -> None:
        """Wait until every outstanding pipeline run has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _start(self, file_id: str) -> None:
        task = asyncio.get_running_loop().create_task(self._processor.process(file_id))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    # --- naming configuration ---

    def move_field(self, index: int, direction: Direction | str) -> None:
        self._config.move_field(index, direction)
        self.refresh_names()

    def toggle_field(self, field_id: MetadataField | str) -> None:
        self._config.toggle_field(field_id)
        self.refresh_names()

    def set_separator(self, separator: str) -> None:
        self._config.set_separator(separator)
        self.refresh_names()

    def set_title_language(self, language: TitleLanguage | str) -> None:
        self._config.set_title_language(language)
        self.refresh_names()

    def preview(self) -> str:
        return preview_name(self._config)

    def refresh_names(self) -> None:
        """Recompute the name of every completed file from its stored metadata."""
        today = date.today()
        completed = self._queue.completed()
        for entry in completed:
            if entry.metadata is not None:
                self._queue.update(
                    entry.id,
                    suggested_name=generate_name(entry.metadata, self._config, today),
                )
        Log.debug(f"Recomputed names for {len(completed)} completed file(s)")

    # --- per-file actions ---

    def rename_file(self, file_id: str, name: str) -> str:
        """Set a user-chosen name on a completed file.

        Path separators and other characters illegal in file names are removed;
        ``.pdf`` is appended if missing.
        """
        entry = self.get(file_id)
        if entry.status is not ProcessingStatus.COMPLETED:
            raise InvalidTransitionError(
                f"Only completed files can be renamed, file {file_id} is {entry.status.value}"
            )
        cleaned = sanitize_filename(name).strip()
        if cleaned.lower().endswith(PDF_SUFFIX):
            cleaned = cleaned[: -len(PDF_SUFFIX)].strip()
        if not cleaned:
            raise ValueError("File name must not be blank")
        new_name = f"{cleaned}{PDF_SUFFIX}"
        self._queue.update(file_id, suggested_name=new_name)
        return new_name

    def download(self, file_id: str) -> DownloadItem:
        entry = self.get(file_id)
        return DownloadItem(filename=entry.download_name, content=entry.content)

    async def export_all(self) -> ExportedArchive | None:
        """Package every completed file; None when there is nothing to export.

        Raises:
            ExportError: if the archive cannot be assembled.
        """
        return await self._exporter.export(self._queue.files)


def build_session(settings: Settings) -> RenamerSession:
    """Build a session with adapters chosen by settings."""
    queue = FileQueue()
    config = NamingConfiguration(
        separator=settings.naming_separator,
        title_language=TitleLanguage(settings.naming_title_language),
    )
    processor = build_processor(settings, queue, config)
    exporter = BatchExporter(ZipArchiveBuilder(), prefix=settings.archive_prefix)
    return RenamerSession(
        queue=queue,
        config=config,
        processor=processor,
        exporter=exporter,
    )

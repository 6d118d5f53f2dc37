import asyncio
from collections.abc import Iterable
from datetime import date
from pathlib import PurePosixPath

from scholar_renamer.export.base import BaseArchiveBuilder
from scholar_renamer.export.exceptions import ExportError
from scholar_renamer.export.models import ExportedArchive
from scholar_renamer.logging.logger import Log
from scholar_renamer.processor.models import ProcessingStatus, TrackedFile

DEFAULT_ARCHIVE_PREFIX = "renamed_papers_"


def archive_filename(prefix: str, extension: str, today: date | None = None) -> str:
    """``{prefix}{YYYY-MM-DD}{extension}``"""
    return f"{prefix}{(today or date.today()).isoformat()}{extension}"


def unique_entry_names(names: list[str]) -> list[str]:
    """Suffix repeated names with `` (n)`` so no archive entry is shadowed."""
    seen: set[str] = set()
    result: list[str] = []
    for name in names:
        candidate = name
        counter = 2
        path = PurePosixPath(name)
        while candidate in seen:
            candidate = f"{path.stem} ({counter}){path.suffix}"
            counter += 1
        seen.add(candidate)
        result.append(candidate)
    return result


class BatchExporter:
    """Bundles every completed file, under its new name, into one archive."""

    def __init__(
        self,
        builder: BaseArchiveBuilder,
        prefix: str = DEFAULT_ARCHIVE_PREFIX,
    ) -> None:
        self._builder = builder
        self._prefix = prefix

    async def export(
        self,
        files: Iterable[TrackedFile],
        today: date | None = None,
    ) -> ExportedArchive | None:
        """Return the archive, or None when no file is completed.

        Raises:
            ExportError: if the archive cannot be assembled.
        """
        completed = [f for f in files if f.status is ProcessingStatus.COMPLETED]
        if not completed:
            Log.info("No completed files to export")
            return None

        names = unique_entry_names([f.download_name for f in completed])
        entries = [(name, f.content) for name, f in zip(names, completed)]
        try:
            content = await asyncio.to_thread(self._builder.build, entries)
        except Exception as exc:
            Log.error(f"Archive assembly failed: {exc}")
            raise ExportError(f"Archive assembly failed: {exc}") from exc

        filename = archive_filename(self._prefix, self._builder.extension, today)
        Log.info(f"Exported {len(entries)} file(s) to {filename}")
        return ExportedArchive(filename=filename, content=content, entry_names=names)

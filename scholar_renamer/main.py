import asyncio
import mimetypes
from pathlib import Path

from scholar_renamer.config.settings import Settings
from scholar_renamer.export.exceptions import ExportError
from scholar_renamer.export.models import ExportedArchive
from scholar_renamer.logging.logger import Log
from scholar_renamer.processor.models import ProcessingStatus, UploadedFile
from scholar_renamer.session.exceptions import AdmissionError
from scholar_renamer.session.session import build_session


def load_upload(path: Path) -> UploadedFile:
    """Read a file from disk, declaring its content type from the extension."""
    content_type, _ = mimetypes.guess_type(path.name)
    return UploadedFile(
        name=path.name,
        content_type=content_type or "application/octet-stream",
        content=path.read_bytes(),
    )


async def run(settings: Settings) -> ExportedArchive | None:
    """Admit every file in the inbox, wait for the pipelines, write the archive."""
    session = build_session(settings)
    Log.info(f"Naming preview: {session.preview()}")

    uploads = [load_upload(p) for p in sorted(settings.inbox_dir.iterdir()) if p.is_file()]
    try:
        session.admit(uploads)
    except AdmissionError as exc:
        Log.error(f"{exc} (inbox: {settings.inbox_dir})")
        return None

    await session.wait_idle()
    for entry in session.files:
        if entry.status is ProcessingStatus.COMPLETED:
            Log.info(f"{entry.original_name} -> {entry.suggested_name}")
        else:
            Log.warning(f"{entry.original_name}: {entry.error_message}")

    try:
        archive = await session.export_all()
    except ExportError as exc:
        Log.error(exc.user_message)
        return None
    if archive is None:
        return None

    settings.output_dir.mkdir(parents=True, exist_ok=True)
    target = settings.output_dir / archive.filename
    target.write_bytes(archive.content)
    Log.info(f"Wrote {target}")
    return archive


def main() -> None:
    """Entry point: load settings -> configure logging -> process the inbox."""
    settings = Settings()
    Log.configure(settings.log_level)
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()

import io
import zipfile

from scholar_renamer.export.base import BaseArchiveBuilder


class ZipArchiveBuilder(BaseArchiveBuilder):
    """Builds a DEFLATE-compressed ZIP archive in memory."""

    extension = ".zip"

    def build(self, entries: list[tuple[str, bytes]]) -> bytes:
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, mode="w", compression=zipfile.ZIP_DEFLATED) as archive:
            for name, content in entries:
                archive.writestr(name, content)
        return buf.getvalue()

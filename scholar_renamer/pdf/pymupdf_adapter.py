import threading

import pymupdf

from scholar_renamer.pdf.base import BasePdfExtractor, join_pages
from scholar_renamer.pdf.exceptions import (
    PdfCorruptError,
    PdfExtractionError,
    PdfPasswordError,
)

# get_text("words") tuples: (x0, y0, x1, y1, word, block_no, line_no, word_no)
_WORD_INDEX = 4

# PyMuPDF is not thread-safe; extractions run on worker threads one at a time.
_PYMUPDF_LOCK = threading.Lock()


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with _PYMUPDF_LOCK:
                pages = self._read_pages(pdf_bytes)
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfCorruptError(f"pymupdf extraction failed: {exc}") from exc
        return join_pages(pages)

    def _read_pages(self, pdf_bytes: bytes) -> list[list[str]]:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            if doc.needs_pass:
                raise PdfPasswordError("pymupdf: document is encrypted")
            page_count = min(doc.page_count, self._max_pages)
            return [
                [word[_WORD_INDEX] for word in doc[i].get_text("words")]
                for i in range(page_count)
            ]

import io

import pdfplumber
from pdfminer.pdfdocument import PDFPasswordIncorrect

from scholar_renamer.pdf.base import BasePdfExtractor, join_pages
from scholar_renamer.pdf.exceptions import (
    PdfCorruptError,
    PdfExtractionError,
    PdfPasswordError,
)


def _caused_by_password(exc: BaseException) -> bool:
    # pdfplumber may wrap pdfminer errors, keeping the original as an arg or cause.
    seen: BaseException | None = exc
    while seen is not None:
        if isinstance(seen, PDFPasswordIncorrect):
            return True
        if any(isinstance(arg, PDFPasswordIncorrect) for arg in seen.args):
            return True
        seen = seen.__cause__ or seen.__context__
    return False


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [
                    [word["text"] for word in page.extract_words(use_text_flow=True)]
                    for page in pdf.pages[: self._max_pages]
                ]
        except PdfExtractionError:
            raise
        except Exception as exc:
            if _caused_by_password(exc):
                raise PdfPasswordError("pdfplumber: document is encrypted") from exc
            raise PdfCorruptError(f"pdfplumber extraction failed: {exc}") from exc
        return join_pages(pages)

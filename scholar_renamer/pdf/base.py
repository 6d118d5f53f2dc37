from abc import ABC, abstractmethod

from scholar_renamer.pdf.exceptions import PdfNoTextError

DEFAULT_MAX_PAGES = 2


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    def __init__(self, max_pages: int = DEFAULT_MAX_PAGES) -> None:
        if max_pages < 1:
            raise ValueError(f"max_pages must be >= 1, got {max_pages}")
        self._max_pages = max_pages

    @property
    def max_pages(self) -> int:
        return self._max_pages

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from the leading pages of a PDF.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Words of each page joined by spaces, pages joined by newlines.

        Raises:
            PdfPasswordError: if the document is encrypted.
            PdfCorruptError: if the bytes cannot be parsed.
            PdfNoTextError: if the pages hold no extractable text.
        """


def join_pages(pages: list[list[str]]) -> str:
    """Join per-page word lists into the extractor's text layout."""
    text = "\n".join(
        " ".join(word for word in words if word.strip()) for words in pages
    )
    if not text.strip():
        raise PdfNoTextError(f"no extractable text in {len(pages)} page(s)")
    return text

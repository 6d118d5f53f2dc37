class PdfExtractionError(Exception):
    """Base error for text extraction failures.

    ``user_message`` is the human-readable cause stored on a failed file entry;
    ``str(exc)`` keeps the technical detail for logs.
    """

    user_message = "Failed to read PDF. The file might be corrupted or in an unsupported format."


class PdfPasswordError(PdfExtractionError):
    """Raised when the document is encrypted with a user password."""

    user_message = "PDF is password protected."


class PdfEngineError(PdfExtractionError):
    """Raised when the extraction engine or its worker thread is unavailable."""

    user_message = "PDF worker configuration failed. Please retry."


class PdfCorruptError(PdfExtractionError):
    """Raised when the bytes cannot be parsed as a PDF."""


class PdfNoTextError(PdfExtractionError):
    """Raised when the leading pages carry no extractable text (e.g. a scan)."""

    user_message = "PDF contains no extractable text (it might be an image scan)."

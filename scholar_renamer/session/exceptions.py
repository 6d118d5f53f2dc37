class SessionError(Exception):
    """Base class for user-facing session notices."""


class AdmissionError(SessionError):
    """Raised when a drop/selection contains no valid PDF files."""

class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class FileNotTrackedError(ProcessorError):
    """Raised when a file id is not (or no longer) in the queue."""


class InvalidTransitionError(ProcessorError):
    """Raised when an operation is not allowed in the file's current status."""

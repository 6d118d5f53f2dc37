class ExportError(Exception):
    """Raised when the batch archive cannot be assembled."""

    user_message = "Failed to create ZIP archive."

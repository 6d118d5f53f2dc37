class MetadataError(Exception):
    """Raised when metadata extraction fails."""

    user_message = "Failed to extract metadata via AI."


class MetadataValidationError(MetadataError):
    """Raised when the provider response does not match the metadata structure."""


class MetadataNetworkError(MetadataError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""

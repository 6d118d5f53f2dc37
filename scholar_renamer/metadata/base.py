from abc import ABC, abstractmethod

from scholar_renamer.metadata.models import ExtractedMetadata


class BaseMetadataExtractor(ABC):
    """Contract for all metadata extraction adapters."""

    @abstractmethod
    async def extract(self, text: str) -> ExtractedMetadata:
        """Turn the leading text of a paper into bibliographic metadata.

        Args:
            text: Plain text from the first pages of the document.

        Returns:
            ExtractedMetadata with year, first author, titles and venue.

        Raises:
            MetadataError: on any failure.
        """

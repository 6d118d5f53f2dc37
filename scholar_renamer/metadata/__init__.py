from scholar_renamer.metadata.base import BaseMetadataExtractor
from scholar_renamer.metadata.extractor import MetadataExtractor
from scholar_renamer.metadata.factory import MetadataExtractorFactory
from scholar_renamer.metadata.models import ExtractedMetadata

__all__ = [
    "BaseMetadataExtractor",
    "ExtractedMetadata",
    "MetadataExtractor",
    "MetadataExtractorFactory",
]

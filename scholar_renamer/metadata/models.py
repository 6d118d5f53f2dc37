from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedMetadata:
    """Bibliographic metadata for one document, produced once per extraction."""

    year: str = ""
    first_author: str = ""
    original_title: str = ""
    chinese_title: str = ""
    journal_name: str | None = None

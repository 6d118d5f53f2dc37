"""Validates the parsed provider JSON and builds ExtractedMetadata."""

from typing import Any

from scholar_renamer.metadata.exceptions import MetadataValidationError
from scholar_renamer.metadata.models import ExtractedMetadata

_REQUIRED_FIELDS = ("year", "firstAuthor", "originalTitle", "chineseTitle")


def validate_and_build(data: dict[str, Any]) -> ExtractedMetadata:
    """Validate raw parsed JSON and build an ExtractedMetadata.

    Raises:
        MetadataValidationError: on any validation failure.
    """
    _require_fields(data)
    return ExtractedMetadata(
        year=_build_year(data["year"]),
        first_author=_build_text(data, "firstAuthor"),
        original_title=_build_text(data, "originalTitle"),
        chinese_title=_build_text(data, "chineseTitle"),
        journal_name=_build_journal(data.get("journalName")),
    )


def _require_fields(data: dict[str, Any]) -> None:
    for field in _REQUIRED_FIELDS:
        if field not in data:
            raise MetadataValidationError(f"Missing required field: {field}")


def _build_year(raw: Any) -> str:
    if raw is None:
        return ""
    # bool is an int subclass; a boolean year is never meaningful
    if isinstance(raw, int) and not isinstance(raw, bool):
        return str(raw)
    if not isinstance(raw, str):
        raise MetadataValidationError("'year' must be a string")
    return raw.strip()


def _build_text(data: dict[str, Any], field: str) -> str:
    raw = data[field]
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise MetadataValidationError(f"'{field}' must be a string")
    return " ".join(raw.split())


def _build_journal(raw: Any) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise MetadataValidationError("'journalName' must be a string or null")
    cleaned = raw.strip()
    return cleaned or None

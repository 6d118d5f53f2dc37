"""Deterministic filename generation from metadata and naming configuration."""

import re
from datetime import date

from scholar_renamer.metadata.models import ExtractedMetadata
from scholar_renamer.naming.models import MetadataField, NamingConfiguration, TitleLanguage

PDF_SUFFIX = ".pdf"
FALLBACK_NAME = "Untitled.pdf"
UNKNOWN_AUTHOR = "Unknown"
UNTITLED = "Untitled"
MAX_TITLE_LENGTH = 80

# keep ASCII word characters, CJK unified ideographs and hyphens
_NAME_TOKEN_STRIP_RE = re.compile(r"[^\w\u4e00-\u9fa5-]", re.ASCII)
_ILLEGAL_FILENAME_CHARS_RE = re.compile(r'[\\/:*?"<>|]')

SAMPLE_METADATA = ExtractedMetadata(
    year="2024",
    first_author="Smith",
    original_title="Deep Learning for Science",
    chinese_title="深度学习在科学中的应用",
    journal_name="Nature",
)


def generate_name(
    metadata: ExtractedMetadata,
    config: NamingConfiguration,
    today: date | None = None,
) -> str:
    """Build a filesystem-safe ``.pdf`` filename.

    Fields are emitted in ``config.field_order``, skipping disabled ones, and
    joined with the literal separator. The only input outside the arguments is
    the current year, used when ``metadata.year`` is blank; pass ``today`` to pin it.
    """
    parts: list[str] = []
    for field_id in config.field_order:
        if not config.is_enabled(field_id):
            continue
        fragment = _fragment(field_id, metadata, config, today)
        if fragment is not None:
            parts.append(fragment)

    if not parts:
        return FALLBACK_NAME
    return f"{config.separator.join(parts)}{PDF_SUFFIX}"


def sanitize_filename(text: str) -> str:
    """Remove characters that are not allowed in file names on common filesystems."""
    return _ILLEGAL_FILENAME_CHARS_RE.sub("", text)


def preview_name(config: NamingConfiguration) -> str:
    """Name the fixed sample record gets under ``config``."""
    return generate_name(SAMPLE_METADATA, config)


def _fragment(
    field_id: MetadataField,
    metadata: ExtractedMetadata,
    config: NamingConfiguration,
    today: date | None,
) -> str | None:
    if field_id is MetadataField.YEAR:
        year = metadata.year.strip()
        return year or str((today or date.today()).year)
    if field_id is MetadataField.AUTHOR:
        return _strip_name_token(metadata.first_author) or UNKNOWN_AUTHOR
    if field_id is MetadataField.JOURNAL:
        # a journal with nothing left after stripping is left out of the name
        return _strip_name_token(metadata.journal_name or "") or None
    return _title_fragment(metadata, config.title_language)


def _strip_name_token(value: str) -> str:
    return _NAME_TOKEN_STRIP_RE.sub("", value)


def _title_fragment(metadata: ExtractedMetadata, language: TitleLanguage) -> str:
    selected = (
        metadata.chinese_title
        if language is TitleLanguage.TRANSLATED
        else metadata.original_title
    )
    title = selected or metadata.original_title or UNTITLED
    cleaned = sanitize_filename(title)[:MAX_TITLE_LENGTH].strip()
    return cleaned or UNTITLED

"""Naming configuration: field order, field visibility, separator, title language.

Order and visibility are kept as two independent pieces of state so that
reordering and toggling commute and ``field_order`` is always a permutation of
every known field.
"""

from dataclasses import dataclass, field
from enum import Enum


class MetadataField(str, Enum):
    YEAR = "year"
    AUTHOR = "author"
    TITLE = "title"
    JOURNAL = "journal"


class TitleLanguage(str, Enum):
    ORIGINAL = "original"
    TRANSLATED = "translated"

    @classmethod
    def _missing_(cls, value: object) -> "TitleLanguage | None":
        # "chinese" is the name older configurations used for the translated title
        if isinstance(value, str) and value.lower() == "chinese":
            return cls.TRANSLATED
        return None


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"


SEPARATORS: tuple[str, ...] = ("-", "_", " ")

DEFAULT_FIELD_ORDER: tuple[MetadataField, ...] = (
    MetadataField.YEAR,
    MetadataField.JOURNAL,
    MetadataField.AUTHOR,
    MetadataField.TITLE,
)


def _default_enabled() -> dict[MetadataField, bool]:
    return {
        MetadataField.YEAR: True,
        MetadataField.AUTHOR: True,
        MetadataField.TITLE: True,
        MetadataField.JOURNAL: False,
    }


@dataclass
class NamingConfiguration:
    """Mutable, process-wide naming preferences."""

    field_order: list[MetadataField] = field(default_factory=lambda: list(DEFAULT_FIELD_ORDER))
    enabled_fields: dict[MetadataField, bool] = field(default_factory=_default_enabled)
    separator: str = "-"
    title_language: TitleLanguage = TitleLanguage.TRANSLATED

    def __post_init__(self) -> None:
        self.field_order = [MetadataField(f) for f in self.field_order]
        self.enabled_fields = {MetadataField(k): bool(v) for k, v in self.enabled_fields.items()}
        self.title_language = TitleLanguage(self.title_language)
        if len(self.field_order) != len(MetadataField) or set(self.field_order) != set(
            MetadataField
        ):
            raise ValueError(
                f"field_order must be a permutation of {[f.value for f in MetadataField]}, "
                f"got {[f.value for f in self.field_order]}"
            )
        missing = set(MetadataField) - set(self.enabled_fields)
        if missing:
            raise ValueError(
                f"enabled_fields is missing {sorted(f.value for f in missing)}"
            )
        self._check_separator(self.separator)

    def move_field(self, index: int, direction: Direction | str) -> None:
        """Swap the field at ``index`` with its neighbour; no-op at the boundaries."""
        direction = Direction(direction)
        if not 0 <= index < len(self.field_order):
            raise IndexError(f"field index {index} out of range")
        target = index - 1 if direction is Direction.LEFT else index + 1
        if not 0 <= target < len(self.field_order):
            return
        order = self.field_order
        order[index], order[target] = order[target], order[index]

    def toggle_field(self, field_id: MetadataField | str) -> None:
        field_id = MetadataField(field_id)
        self.enabled_fields[field_id] = not self.enabled_fields[field_id]

    def set_separator(self, separator: str) -> None:
        self._check_separator(separator)
        self.separator = separator

    def set_title_language(self, language: TitleLanguage | str) -> None:
        self.title_language = TitleLanguage(language)

    def is_enabled(self, field_id: MetadataField) -> bool:
        return self.enabled_fields[field_id]

    @staticmethod
    def _check_separator(separator: str) -> None:
        if separator not in SEPARATORS:
            raise ValueError(f"Unknown separator {separator!r}. Choose from: {list(SEPARATORS)}")

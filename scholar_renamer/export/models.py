from dataclasses import dataclass, field


@dataclass(frozen=True)
class DownloadItem:
    """A single file ready to be saved under its new name."""

    filename: str
    content: bytes


@dataclass(frozen=True)
class ExportedArchive:
    """A packaged batch of renamed files."""

    filename: str
    content: bytes
    entry_names: list[str] = field(default_factory=list)

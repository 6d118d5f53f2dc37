from abc import ABC, abstractmethod


class BaseArchiveBuilder(ABC):
    """Contract for archive packaging adapters."""

    extension: str = ""

    @abstractmethod
    def build(self, entries: list[tuple[str, bytes]]) -> bytes:
        """Package ``(entry name, content)`` pairs, in order, into one archive.

        Content is stored as given, never re-encoded.
        """

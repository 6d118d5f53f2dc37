"""Scholar Renamer: metadata-driven renaming of academic PDFs."""

__version__ = "0.1.0"

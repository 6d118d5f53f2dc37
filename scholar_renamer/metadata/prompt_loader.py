from pathlib import Path

from scholar_renamer.metadata.exceptions import MetadataError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the metadata prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled metadata_prompt.txt.

    Returns:
        The raw template with ``{document_text}`` and ``{json_schema}`` placeholders.

    Raises:
        MetadataError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "metadata_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MetadataError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the metadata JSON schema, defaulting to the bundled metadata_schema.json.

    Raises:
        MetadataError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "metadata_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MetadataError(f"Failed to load JSON schema: {exc}") from exc

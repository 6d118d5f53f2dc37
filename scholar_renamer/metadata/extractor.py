"""AI-powered bibliographic metadata extractor."""

import json
from pathlib import Path

from scholar_renamer.logging.logger import Log
from scholar_renamer.metadata.base import BaseMetadataExtractor
from scholar_renamer.metadata.client_base import BaseMetadataClient
from scholar_renamer.metadata.exceptions import MetadataError
from scholar_renamer.metadata.models import ExtractedMetadata
from scholar_renamer.metadata.prompt_loader import load_json_schema, load_prompt_template
from scholar_renamer.metadata.validator import validate_and_build

DEFAULT_SYSTEM_PROMPT = (
    "You are a bibliographic expert. You extract metadata from academic papers."
)


class MetadataExtractor(BaseMetadataExtractor):
    """Extracts bibliographic metadata from paper text using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseMetadataClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    async def extract(self, text: str) -> ExtractedMetadata:
        prompt = self._build_prompt(text)
        Log.debug(f"Metadata prompt:\n{prompt}")

        raw_response = await self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        result = validate_and_build(parsed)

        Log.info(
            f"Metadata extracted: year={result.year!r} author={result.first_author!r}"
        )
        return result

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            document_text=text,
            json_schema=self._json_schema,
        )

    async def _call_ai(self, prompt: str) -> str:
        return await self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema_dict,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise MetadataError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise MetadataError("JSON response must be an object")
        return parsed

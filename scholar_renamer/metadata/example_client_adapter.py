"""Offline metadata client.

Returns a fixed, schema-valid record without any network call. Used for local
runs without API keys, in tests, and as the template for new provider adapters:
implement BaseMetadataClient and register the provider in MetadataExtractorFactory.
"""

import json
from typing import ClassVar

from scholar_renamer.metadata.client_base import BaseMetadataClient


class ExampleClientAdapter(BaseMetadataClient):
    """Example adapter that returns a fixed valid metadata JSON."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "year": "2024",
        "firstAuthor": "Smith",
        "originalTitle": "Deep Learning for Science",
        "chineseTitle": "深度学习在科学中的应用",
        "journalName": "Nature",
    }

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self.DEFAULT_RESPONSE, ensure_ascii=False)

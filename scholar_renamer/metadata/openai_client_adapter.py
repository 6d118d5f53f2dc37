from typing import Any

import httpx
import openai

from scholar_renamer.metadata.client_base import BaseMetadataClient
from scholar_renamer.metadata.exceptions import MetadataError, MetadataNetworkError

SCHEMA_NAME = "paper_metadata"


class OpenAIClientAdapter(BaseMetadataClient):
    """Async chat-completions client for OpenAI and OpenAI-compatible endpoints.

    The metadata schema is sent as a strict ``json_schema`` response format, so
    a well-behaved provider can only answer with a matching JSON object.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        response_format = {
            "type": "json_schema",
            "json_schema": {"name": SCHEMA_NAME, "strict": True, "schema": json_schema},
        }
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=messages,  # type: ignore[arg-type]
                response_format=response_format,  # type: ignore[arg-type]
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise MetadataNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise MetadataNetworkError(f"AI provider API error: {exc}") from exc
        return self._first_answer(response)

    @staticmethod
    def _first_answer(response: Any) -> str:
        if not response.choices:
            raise MetadataError("AI returned no choices")
        choice = response.choices[0]
        if choice.message.refusal:
            raise MetadataError(f"AI refused to answer: {choice.message.refusal}")
        if choice.finish_reason == "length":
            raise MetadataError("AI response was cut off at the token limit")
        if not choice.message.content:
            raise MetadataError("AI returned empty response")
        return choice.message.content

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from scholar_renamer.metadata.client_base import BaseMetadataClient
from scholar_renamer.metadata.exceptions import MetadataError, MetadataNetworkError


class GeminiClientAdapter(BaseMetadataClient):
    """Metadata AI client adapter for Google Gemini (google-genai SDK).

    Gemini is asked for a JSON response; the schema itself travels in the
    prompt, since the SDK's native schema type does not accept every JSON
    Schema keyword.
    """

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
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
        _ = json_schema
        try:
            response = await self._client.aio.models.generate_content(
                model=model,
                contents=user_prompt,
                config=types.GenerateContentConfig(
                    system_instruction=system_prompt or None,
                    temperature=temperature,
                    response_mime_type="application/json",
                ),
            )
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise MetadataNetworkError(f"AI provider network error: {exc}") from exc
        except genai_errors.APIError as exc:
            raise MetadataNetworkError(f"AI provider API error: {exc}") from exc

        content = response.text
        if not content:
            raise MetadataError("AI returned empty response")
        return content

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from google.genai import errors as genai_errors

from scholar_renamer.metadata.exceptions import MetadataError, MetadataNetworkError
from scholar_renamer.metadata.gemini_client_adapter import GeminiClientAdapter


def _client_with(**generate_kwargs: object) -> MagicMock:
    mock_client = MagicMock()
    mock_client.aio.models.generate_content = AsyncMock(**generate_kwargs)
    return mock_client


def _run_adapter(mock_client: MagicMock) -> str:
    with patch(
        "scholar_renamer.metadata.gemini_client_adapter.genai.Client",
        return_value=mock_client,
    ):
        adapter = GeminiClientAdapter(api_key="k", timeout_seconds=30)
        return asyncio.run(
            adapter.create_chat_completion(
                model="gemini-2.5-flash",
                temperature=0.0,
                system_prompt="system",
                user_prompt="user",
                json_schema={"type": "object"},
            )
        )


class TestGeminiClientAdapter:
    def test_returns_text(self) -> None:
        mock_client = _client_with(return_value=MagicMock(text='{"year": "2024"}'))
        assert _run_adapter(mock_client) == '{"year": "2024"}'

    def test_requests_json_output(self) -> None:
        mock_client = _client_with(return_value=MagicMock(text="{}"))
        _run_adapter(mock_client)
        kwargs = mock_client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["contents"] == "user"
        assert kwargs["config"].response_mime_type == "application/json"
        assert kwargs["config"].system_instruction == "system"

    def test_raises_error_for_empty_text(self) -> None:
        mock_client = _client_with(return_value=MagicMock(text=None))
        with pytest.raises(MetadataError, match="empty response"):
            _run_adapter(mock_client)

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = _client_with(side_effect=httpx.TimeoutException("timeout"))
        with pytest.raises(MetadataNetworkError, match="network error"):
            _run_adapter(mock_client)

    def test_raises_network_error_on_api_error(self) -> None:
        error = genai_errors.APIError(
            500, {"error": {"message": "boom", "status": "INTERNAL"}}
        )
        mock_client = _client_with(side_effect=error)
        with pytest.raises(MetadataNetworkError, match="API error"):
            _run_adapter(mock_client)

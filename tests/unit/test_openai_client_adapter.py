import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from scholar_renamer.metadata.exceptions import MetadataError, MetadataNetworkError
from scholar_renamer.metadata.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(
    content: str | None,
    finish_reason: str = "stop",
    refusal: str | None = None,
) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    choice.message.refusal = refusal
    choice.finish_reason = finish_reason
    response = MagicMock()
    response.choices = [choice]
    return response


def _run_adapter(mock_client: MagicMock) -> str:
    with patch(
        "scholar_renamer.metadata.openai_client_adapter.openai.AsyncOpenAI",
        return_value=mock_client,
    ):
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)
        return asyncio.run(
            adapter.create_chat_completion(
                model="m",
                temperature=0.1,
                system_prompt="system",
                user_prompt="user",
                json_schema={"type": "object"},
            )
        )


def _client_with(**create_kwargs: object) -> MagicMock:
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock(**create_kwargs)
    return mock_client


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = _client_with(return_value=_make_mock_response('{"ok": true}'))
        assert _run_adapter(mock_client) == '{"ok": true}'

    def test_requests_strict_json_schema(self) -> None:
        mock_client = _client_with(return_value=_make_mock_response("{}"))
        _run_adapter(mock_client)
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"]["type"] == "json_schema"
        assert kwargs["response_format"]["json_schema"]["strict"] is True
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = _client_with(return_value=_make_mock_response(None))
        with pytest.raises(MetadataError, match="empty response"):
            _run_adapter(mock_client)

    def test_raises_error_for_refusal(self) -> None:
        mock_client = _client_with(
            return_value=_make_mock_response(None, refusal="I cannot help with that")
        )
        with pytest.raises(MetadataError, match="refused"):
            _run_adapter(mock_client)

    def test_raises_error_for_truncated_answer(self) -> None:
        mock_client = _client_with(
            return_value=_make_mock_response('{"year": "20', finish_reason="length")
        )
        with pytest.raises(MetadataError, match="cut off"):
            _run_adapter(mock_client)

    def test_raises_error_for_no_choices(self) -> None:
        response = MagicMock()
        response.choices = []
        mock_client = _client_with(return_value=response)
        with pytest.raises(MetadataError, match="no choices"):
            _run_adapter(mock_client)

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = _client_with(
            side_effect=openai.APIConnectionError(request=MagicMock())
        )
        with pytest.raises(MetadataNetworkError, match="network error"):
            _run_adapter(mock_client)

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = _client_with(side_effect=httpx.TimeoutException("timeout"))
        with pytest.raises(MetadataNetworkError, match="network error"):
            _run_adapter(mock_client)

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = _client_with(
            side_effect=openai.APIError(message="server error", request=MagicMock(), body=None)
        )
        with pytest.raises(MetadataNetworkError, match="API error"):
            _run_adapter(mock_client)

"""Tests for the MetadataExtractor (AI-powered extraction)."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from scholar_renamer.metadata.exceptions import (
    MetadataError,
    MetadataNetworkError,
    MetadataValidationError,
)
from scholar_renamer.metadata.extractor import MetadataExtractor
from scholar_renamer.metadata.models import ExtractedMetadata


def _make_client(content: str | None = None) -> MagicMock:
    client = MagicMock()
    client.create_chat_completion = AsyncMock(return_value=content)
    return client


def _make_extractor(client: MagicMock, temperature: float = 0.0) -> MetadataExtractor:
    return MetadataExtractor(client=client, model="test-model", temperature=temperature)


def _valid_json_response(**overrides: object) -> str:
    data: dict[str, object] = {
        "year": "2017",
        "firstAuthor": "Vaswani",
        "originalTitle": "Attention Is All You Need",
        "chineseTitle": "注意力就是你所需要的一切",
        "journalName": "NeurIPS",
    }
    data.update(overrides)
    return json.dumps(data, ensure_ascii=False)


def _extract(extractor: MetadataExtractor, text: str = "some text") -> ExtractedMetadata:
    return asyncio.run(extractor.extract(text))


class TestExtractSuccess:
    def test_returns_metadata(self) -> None:
        extractor = _make_extractor(_make_client(_valid_json_response()))
        result = _extract(extractor)
        assert result.year == "2017"
        assert result.first_author == "Vaswani"
        assert result.chinese_title == "注意力就是你所需要的一切"
        assert result.journal_name == "NeurIPS"

    def test_passes_input_text_to_prompt(self) -> None:
        client = _make_client(_valid_json_response())
        _extract(_make_extractor(client), "Attention Is All You Need. Vaswani et al.")
        user_msg = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "Attention Is All You Need. Vaswani et al." in user_msg

    def test_prompt_asks_for_simplified_chinese_translation(self) -> None:
        client = _make_client(_valid_json_response())
        _extract(_make_extractor(client))
        user_msg = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "Simplified Chinese" in user_msg

    def test_calls_ai_with_model(self) -> None:
        client = _make_client(_valid_json_response())
        _extract(_make_extractor(client))
        assert client.create_chat_completion.call_args.kwargs["model"] == "test-model"

    def test_sends_bibliographic_system_prompt(self) -> None:
        client = _make_client(_valid_json_response())
        _extract(_make_extractor(client))
        system = client.create_chat_completion.call_args.kwargs["system_prompt"]
        assert "bibliographic" in system

    def test_clamps_temperature_to_zero_to_point_two(self) -> None:
        client = _make_client(_valid_json_response())
        _extract(_make_extractor(client, temperature=0.7))
        assert client.create_chat_completion.call_args.kwargs["temperature"] == 0.2

    def test_passes_json_schema(self) -> None:
        client = _make_client(_valid_json_response())
        _extract(_make_extractor(client))
        schema = client.create_chat_completion.call_args.kwargs["json_schema"]
        assert set(schema["required"]) >= {"year", "firstAuthor", "originalTitle", "chineseTitle"}


class TestJsonParsing:
    def test_strips_markdown_code_fences(self) -> None:
        content = "```json\n" + _valid_json_response() + "\n```"
        result = _extract(_make_extractor(_make_client(content)))
        assert result.first_author == "Vaswani"

    def test_invalid_json_raises_error(self) -> None:
        extractor = _make_extractor(_make_client("not valid json"))
        with pytest.raises(MetadataError, match="Invalid JSON"):
            _extract(extractor)

    def test_json_array_raises_error(self) -> None:
        extractor = _make_extractor(_make_client("[]"))
        with pytest.raises(MetadataError, match="must be an object"):
            _extract(extractor)

    def test_missing_field_raises_validation_error(self) -> None:
        extractor = _make_extractor(_make_client(json.dumps({"year": "2020"})))
        with pytest.raises(MetadataValidationError, match="firstAuthor"):
            _extract(extractor)


class TestProviderErrors:
    def test_network_error_propagates(self) -> None:
        client = MagicMock()
        client.create_chat_completion = AsyncMock(side_effect=MetadataNetworkError("network"))
        with pytest.raises(MetadataNetworkError, match="network"):
            _extract(_make_extractor(client))


class TestDebugLogging:
    def test_logs_prompt_in_debug(self) -> None:
        extractor = _make_extractor(_make_client(_valid_json_response()))
        with patch("scholar_renamer.metadata.extractor.Log") as mock_log:
            _extract(extractor)
            debug_calls = mock_log.debug.call_args_list
            assert len(debug_calls) >= 1
            assert "prompt" in debug_calls[0].args[0].lower()

from typing import Any, ClassVar

from scholar_renamer.config.settings import Settings
from scholar_renamer.metadata.base import BaseMetadataExtractor
from scholar_renamer.metadata.client_base import BaseMetadataClient
from scholar_renamer.metadata.example_client_adapter import ExampleClientAdapter
from scholar_renamer.metadata.extractor import MetadataExtractor
from scholar_renamer.metadata.gemini_client_adapter import GeminiClientAdapter
from scholar_renamer.metadata.openai_client_adapter import OpenAIClientAdapter


class MetadataExtractorFactory:
    """Creates the configured metadata extractor.

    Every provider reads its own ``metadata_<provider>_*`` settings group
    (``api_key``, ``model_name``, ``timeout_seconds``).
    """

    # chat-completions providers; None means the OpenAI SDK default endpoint
    CHAT_COMPLETION_BASE_URLS: ClassVar[dict[str, str | None]] = {
        "openai": None,
        "openrouter": "https://openrouter.ai/api/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def providers(cls) -> list[str]:
        return sorted(["example", "gemini", "openai_compatible", *cls.CHAT_COMPLETION_BASE_URLS])

    @classmethod
    def create(cls, settings: Settings) -> BaseMetadataExtractor:
        provider = settings.metadata_provider.lower()
        if provider == "example":
            return MetadataExtractor(client=ExampleClientAdapter(), model="example")

        client = cls._create_client(provider, settings)
        # only OpenAI itself gets the configured temperature
        temperature = settings.metadata_openai_temperature if provider == "openai" else 0.0
        return MetadataExtractor(
            client=client,
            model=cls._option(settings, provider, "model_name"),
            temperature=temperature,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseMetadataClient:
        if provider == "gemini":
            return GeminiClientAdapter(
                api_key=cls._option(settings, provider, "api_key"),
                timeout_seconds=cls._option(settings, provider, "timeout_seconds"),
            )
        base_url = cls._base_url(provider, settings)
        return OpenAIClientAdapter(
            api_key=cls._option(settings, provider, "api_key"),
            timeout_seconds=cls._option(settings, provider, "timeout_seconds"),
            base_url=base_url,
        )

    @classmethod
    def _base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai_compatible":
            url = settings.metadata_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "metadata_openai_compatible_base_url is required for "
                    "metadata_provider=openai_compatible"
                )
            return url
        if provider not in cls.CHAT_COMPLETION_BASE_URLS:
            raise ValueError(
                f"Unknown metadata provider '{provider}'. Choose from: {cls.providers()}"
            )
        return cls.CHAT_COMPLETION_BASE_URLS[provider]

    @staticmethod
    def _option(settings: Settings, provider: str, option: str) -> Any:
        return getattr(settings, f"metadata_{provider}_{option}")

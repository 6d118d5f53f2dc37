from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    pdf_max_pages: int = 2

    metadata_provider: str = "openai"
    metadata_max_chars: int = 15000

    metadata_openai_api_key: str = ""
    metadata_openai_model_name: str = "gpt-4.1-mini"
    metadata_openai_timeout_seconds: int = 30
    metadata_openai_temperature: float = 0.1

    metadata_openai_compatible_api_key: str = ""
    metadata_openai_compatible_model_name: str = ""
    metadata_openai_compatible_base_url: str = ""
    metadata_openai_compatible_timeout_seconds: int = 30

    metadata_openrouter_api_key: str = ""
    metadata_openrouter_model_name: str = ""
    metadata_openrouter_timeout_seconds: int = 30

    metadata_deepseek_api_key: str = ""
    metadata_deepseek_model_name: str = ""
    metadata_deepseek_timeout_seconds: int = 30

    metadata_ollama_api_key: str = "ollama"
    metadata_ollama_model_name: str = ""
    metadata_ollama_timeout_seconds: int = 60

    metadata_gemini_api_key: str = ""
    metadata_gemini_model_name: str = "gemini-2.5-flash"
    metadata_gemini_timeout_seconds: int = 30

    naming_separator: str = "-"
    naming_title_language: str = "translated"

    archive_prefix: str = "renamed_papers_"

    inbox_dir: Path = Path("inbox")
    output_dir: Path = Path("output")

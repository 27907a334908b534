from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    pdf_engine: str = "pdfplumber"

    plagcheck_api_key: str = ""
    plagcheck_base_url: str = "https://plagiarismcheck.org/api/v1"
    plagcheck_timeout_seconds: int = 30
    plagcheck_poll_interval_seconds: float = 2.0
    plagcheck_max_polls: int = 150
    plagcheck_check_timeout_seconds: float = 300.0

    summary_provider: str = "groq"
    summary_temperature: float = 0.5
    summary_max_tokens: int = 500

    summary_openai_api_key: str = ""
    summary_openai_model_name: str = "gpt-4o-mini"
    summary_openai_timeout_seconds: int = 30

    summary_openai_compatible_base_url: str = ""
    summary_openai_compatible_api_key: str = ""
    summary_openai_compatible_model_name: str = ""
    summary_openai_compatible_timeout_seconds: int = 30

    summary_groq_api_key: str = ""
    summary_groq_model_name: str = "openai/gpt-oss-120b"
    summary_groq_timeout_seconds: int = 30

    summary_openrouter_api_key: str = ""
    summary_openrouter_model_name: str = ""
    summary_openrouter_timeout_seconds: int = 30

    summary_together_api_key: str = ""
    summary_together_model_name: str = ""
    summary_together_timeout_seconds: int = 30

    summary_deepseek_api_key: str = ""
    summary_deepseek_model_name: str = "deepseek-chat"
    summary_deepseek_timeout_seconds: int = 30

    summary_ollama_api_key: str = "ollama"
    summary_ollama_model_name: str = ""
    summary_ollama_timeout_seconds: int = 60

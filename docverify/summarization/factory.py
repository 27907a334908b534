from typing import ClassVar

from docverify.config.settings import Settings
from docverify.summarization.example_client_adapter import ExampleClientAdapter
from docverify.summarization.openai_client_adapter import OpenAIClientAdapter
from docverify.summarization.summarizer import Summarizer


class SummarizerFactory:
    """Creates the summarizer for the configured completion provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "groq": "https://api.groq.com/openai/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> Summarizer:
        provider = settings.summary_provider.lower()
        if provider == "example":
            return Summarizer(client=ExampleClientAdapter(), model="example")
        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=cls._provider_setting(provider, settings, "api_key").strip(),
            timeout_seconds=cls._provider_setting(provider, settings, "timeout_seconds"),
            base_url=base_url,
        )
        return Summarizer(
            client=client,
            model=cls._provider_setting(provider, settings, "model_name"),
            temperature=settings.summary_temperature,
            max_tokens=settings.summary_max_tokens,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.summary_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "summary_openai_compatible_base_url is required for "
                    "summary_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is None:
            raise ValueError(
                f"Unknown summary provider '{provider}'. Choose from: {cls.supported_providers()}"
            )
        return default_base_url

    @staticmethod
    def _provider_setting(provider: str, settings: Settings, name: str):  # type: ignore[no-untyped-def]
        return getattr(settings, f"summary_{provider}_{name}")

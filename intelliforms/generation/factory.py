from typing import ClassVar

from intelliforms.config.settings import Settings
from intelliforms.generation.base import BaseFormGenerator
from intelliforms.generation.example_client_adapter import ExampleClientAdapter
from intelliforms.generation.generator import FormGenerator
from intelliforms.generation.openai_client_adapter import OpenAIClientAdapter


class GeneratorFactory:
    """Creates the configured form generator."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseFormGenerator:
        """Create a configured generator from application settings."""
        provider = settings.generation_provider.lower()
        if provider == "example":
            return cls.create_example()
        client = OpenAIClientAdapter(
            api_key=settings.generation_api_key,
            timeout_seconds=settings.generation_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return FormGenerator(
            client=client,
            model=settings.generation_model_name,
            temperature=settings.generation_temperature,
        )

    @classmethod
    def create_example(cls) -> BaseFormGenerator:
        """Create an offline generator that always yields the sample form."""
        return FormGenerator(
            client=ExampleClientAdapter(),
            model="example",
            temperature=0.0,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.generation_base_url.strip()
            if not url:
                raise ValueError(
                    "generation_base_url is required for "
                    "generation_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.generation_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown generation provider '{provider}'. Choose from: {supported}"
        )

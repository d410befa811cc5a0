from dataclasses import dataclass
from typing import ClassVar

from multilang.capabilities.base import (
    BaseAnalysisClient,
    BaseTextExtractionClient,
    BaseTranslationClient,
)
from multilang.capabilities.client_base import BaseChatClient
from multilang.capabilities.example_client_adapter import ExampleClientAdapter
from multilang.capabilities.llm_capabilities import (
    LLMAnalysisClient,
    LLMTextExtractionClient,
    LLMTranslationClient,
)
from multilang.capabilities.openai_client_adapter import OpenAIClientAdapter
from multilang.config.settings import Settings


@dataclass(frozen=True)
class CapabilitySet:
    extraction: BaseTextExtractionClient
    translation: BaseTranslationClient
    analysis: BaseAnalysisClient


class CapabilityFactory:
    """Creates the configured capability clients."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> CapabilitySet:
        """Create extraction, translation and analysis clients from settings."""
        provider = settings.capability_provider.lower()
        temperature = settings.capability_temperature
        return CapabilitySet(
            extraction=LLMTextExtractionClient(
                client=cls._chat_client(provider, settings, settings.ocr_timeout_seconds),
                model=cls._model_name(provider, settings.extraction_model_name),
                temperature=temperature,
            ),
            translation=LLMTranslationClient(
                client=cls._chat_client(
                    provider, settings, settings.translation_timeout_seconds
                ),
                model=cls._model_name(provider, settings.translation_model_name),
                temperature=temperature,
            ),
            analysis=LLMAnalysisClient(
                client=cls._chat_client(
                    provider, settings, settings.analysis_timeout_seconds
                ),
                model=cls._model_name(provider, settings.analysis_model_name),
                temperature=temperature,
            ),
        )

    @classmethod
    def _chat_client(
        cls,
        provider: str,
        settings: Settings,
        timeout_seconds: float,
    ) -> BaseChatClient:
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.capability_api_key,
            timeout_seconds=timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.capability_base_url.strip()
            if not url:
                raise ValueError(
                    "capability_base_url is required for "
                    "capability_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.capability_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown capability provider '{provider}'. Choose from: {supported}"
        )

    @staticmethod
    def _model_name(provider: str, configured: str) -> str:
        return "example" if provider == "example" else configured

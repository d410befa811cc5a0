"""Tests for CapabilityFactory."""

import asyncio
from unittest.mock import call, patch

import pytest

from multilang.capabilities.base import (
    BaseAnalysisClient,
    BaseTextExtractionClient,
    BaseTranslationClient,
)
from multilang.capabilities.factory import CapabilityFactory
from multilang.config.settings import Settings


class TestCapabilityFactory:
    def test_example_provider_works_offline(self) -> None:
        capabilities = CapabilityFactory.create(Settings(capability_provider="example"))
        assert isinstance(capabilities.extraction, BaseTextExtractionClient)
        assert isinstance(capabilities.translation, BaseTranslationClient)
        assert isinstance(capabilities.analysis, BaseAnalysisClient)
        raw = asyncio.run(capabilities.extraction.extract(b"img", "image/png"))
        assert raw.text == "Example document text."

    def test_uses_openai_settings_per_stage(self) -> None:
        settings = Settings(
            capability_provider="openai",
            capability_api_key="openai-key",
            ocr_timeout_seconds=10,
            translation_timeout_seconds=20,
            analysis_timeout_seconds=30,
        )
        with patch("multilang.capabilities.factory.OpenAIClientAdapter") as mock_adapter:
            CapabilityFactory.create(settings)
        assert mock_adapter.call_args_list == [
            call(api_key="openai-key", timeout_seconds=10, base_url=None),
            call(api_key="openai-key", timeout_seconds=20, base_url=None),
            call(api_key="openai-key", timeout_seconds=30, base_url=None),
        ]

    def test_provider_name_is_case_insensitive(self) -> None:
        settings = Settings(capability_provider="OpenAI", capability_api_key="k")
        with patch("multilang.capabilities.factory.OpenAIClientAdapter") as mock_adapter:
            CapabilityFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] is None

    def test_uses_provider_default_base_url_for_groq(self) -> None:
        settings = Settings(capability_provider="groq", capability_api_key="k")
        with patch("multilang.capabilities.factory.OpenAIClientAdapter") as mock_adapter:
            CapabilityFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://api.groq.com/openai/v1"

    def test_configured_base_url_overrides_default(self) -> None:
        settings = Settings(
            capability_provider="ollama",
            capability_base_url="http://gpu-box:11434/v1",
        )
        with patch("multilang.capabilities.factory.OpenAIClientAdapter") as mock_adapter:
            CapabilityFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://gpu-box:11434/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(capability_provider="openai_compatible", capability_base_url=" ")
        with pytest.raises(ValueError, match="capability_base_url is required"):
            CapabilityFactory.create(settings)

    def test_openai_compatible_uses_base_url(self) -> None:
        settings = Settings(
            capability_provider="openai_compatible",
            capability_base_url="https://llm.internal/v1",
        )
        with patch("multilang.capabilities.factory.OpenAIClientAdapter") as mock_adapter:
            CapabilityFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://llm.internal/v1"

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown capability provider 'carrier-pigeon'"):
            CapabilityFactory.create(Settings(capability_provider="carrier-pigeon"))

"""Capabilities backed by a JSON-schema constrained chat model."""

import json
from pathlib import Path
from typing import ClassVar

from multilang.capabilities.base import (
    BaseAnalysisClient,
    BaseTextExtractionClient,
    BaseTranslationClient,
)
from multilang.capabilities.client_base import BaseChatClient, ImageAttachment
from multilang.capabilities.models import (
    LanguageDetection,
    RawAnalysis,
    RawExtraction,
    RawTranslation,
)
from multilang.capabilities.prompt_loader import load_json_schema, load_prompt_template
from multilang.capabilities.response_parser import (
    build_analysis,
    build_detection,
    build_extraction,
    build_translation,
    parse_json,
)
from multilang.logging.logger import Log


class _ChatPrompt:
    """A prompt template plus the JSON schema its answer must follow."""

    def __init__(self, name: str, prompt_dir: Path | None = None) -> None:
        self.name = name
        template_path = prompt_dir / f"{name}_prompt.txt" if prompt_dir else None
        schema_path = prompt_dir / f"{name}_schema.json" if prompt_dir else None
        self.template = load_prompt_template(name, template_path)
        self.schema = load_json_schema(name, schema_path)
        self.schema_dict: dict[str, object] = json.loads(self.schema)

    def render(self, **values: str) -> str:
        return self.template.format(json_schema=self.schema, **values)


class _ChatCapability:
    PROMPTS: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        *,
        client: BaseChatClient,
        model: str,
        temperature: float = 0.0,
        system_prompt: str = "",
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt
        self._prompts = {name: _ChatPrompt(name, prompt_dir) for name in self.PROMPTS}

    async def _complete(
        self,
        prompt_name: str,
        image: ImageAttachment | None = None,
        **values: str,
    ) -> dict[str, object]:
        prompt = self._prompts[prompt_name]
        user_prompt = prompt.render(**values)
        Log.debug(f"{prompt_name} prompt:\n{user_prompt}")
        raw = await self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=user_prompt,
            json_schema=prompt.schema_dict,
            schema_name=f"{prompt_name}_result",
            image=image,
        )
        Log.debug(f"{prompt_name} raw response:\n{raw}")
        return parse_json(raw)

    async def ping(self) -> None:
        await self._client.check_model(self._model)


class LLMTextExtractionClient(_ChatCapability, BaseTextExtractionClient):
    """OCR through a vision-capable chat model."""

    PROMPTS = ("extraction",)

    async def extract(self, image_bytes: bytes, mime_type: str) -> RawExtraction:
        data = await self._complete(
            "extraction",
            image=ImageAttachment(content=image_bytes, mime_type=mime_type),
        )
        return build_extraction(data)


class LLMTranslationClient(_ChatCapability, BaseTranslationClient):
    """Language detection and translation to English through a chat model."""

    PROMPTS = ("detection", "translation")

    async def detect_language(self, text: str) -> LanguageDetection:
        data = await self._complete("detection", text=text)
        return build_detection(data)

    async def translate(
        self,
        text: str,
        source_language: str | None = None,
    ) -> RawTranslation:
        data = await self._complete(
            "translation",
            text=text,
            source_language=source_language or "unknown, detect it",
        )
        return build_translation(data)


class LLMAnalysisClient(_ChatCapability, BaseAnalysisClient):
    """Summary, action points and key insights through a chat model."""

    PROMPTS = ("analysis",)

    async def analyze(self, text: str) -> RawAnalysis:
        data = await self._complete("analysis", text=text)
        return build_analysis(data)

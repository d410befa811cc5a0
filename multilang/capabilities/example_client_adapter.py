"""Example chat client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseChatClient and register the provider in CapabilityFactory.
"""

import json
from typing import ClassVar

from multilang.capabilities.client_base import BaseChatClient, ImageAttachment
from multilang.capabilities.exceptions import CapabilityResponseError


class ExampleClientAdapter(BaseChatClient):
    """Offline adapter returning a fixed valid answer for every capability.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSES: ClassVar[dict[str, dict[str, object]]] = {
        "extraction_result": {
            "text": "Example document text.",
            "language": "en",
            "confidence": 0.9,
        },
        "detection_result": {"language": "en", "confidence": 1.0},
        "translation_result": {
            "translated_text": "Example document text.",
            "detected_language": "en",
            "confidence": 1.0,
        },
        "analysis_result": {
            "summary": "Example document text.",
            "action_points": [],
            "key_insights": [],
        },
    }

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
        schema_name: str,
        image: ImageAttachment | None = None,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema, image
        response = self.DEFAULT_RESPONSES.get(schema_name)
        if response is None:
            raise CapabilityResponseError(f"No example response for '{schema_name}'")
        return json.dumps(response)

    async def check_model(self, model: str) -> None:
        _ = model

import base64

import httpx
import openai

from multilang.capabilities.client_base import BaseChatClient, ImageAttachment
from multilang.capabilities.exceptions import (
    CapabilityNetworkError,
    CapabilityResponseError,
    CapabilityTimeoutError,
)


class OpenAIClientAdapter(BaseChatClient):
    """Chat client built on the OpenAI-compatible async API.

    SDK retries are disabled: the pipeline owns the time budget.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

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
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": schema_name,
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": self._user_content(user_prompt, image)},
                ],
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise CapabilityTimeoutError(f"AI provider timed out: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise CapabilityNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise CapabilityNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise CapabilityResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise CapabilityResponseError("AI returned empty response")
        return content

    async def check_model(self, model: str) -> None:
        try:
            await self._client.models.retrieve(model)
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise CapabilityTimeoutError(f"AI provider timed out: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise CapabilityNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise CapabilityNetworkError(f"AI provider API error: {exc}") from exc

    @staticmethod
    def _user_content(
        user_prompt: str,
        image: ImageAttachment | None,
    ) -> str | list[dict[str, object]]:
        if image is None:
            return user_prompt
        encoded = base64.b64encode(image.content).decode("ascii")
        return [
            {"type": "text", "text": user_prompt},
            {
                "type": "image_url",
                "image_url": {"url": f"data:{image.mime_type};base64,{encoded}"},
            },
        ]

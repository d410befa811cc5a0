from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ImageAttachment:
    content: bytes
    mime_type: str


class BaseChatClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
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
        """Return provider response as plain text."""

    @abstractmethod
    async def check_model(self, model: str) -> None:
        """Raise CapabilityError if *model* cannot be reached."""

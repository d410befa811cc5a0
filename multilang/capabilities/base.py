from abc import ABC, abstractmethod

from multilang.capabilities.models import (
    LanguageDetection,
    RawAnalysis,
    RawExtraction,
    RawTranslation,
)


class BaseTextExtractionClient(ABC):
    """Contract for OCR capabilities."""

    @abstractmethod
    async def extract(self, image_bytes: bytes, mime_type: str) -> RawExtraction:
        """Read the text printed on an image.

        Args:
            image_bytes: Raw image file content.
            mime_type: Declared image MIME type, e.g. ``image/png``.

        Returns:
            RawExtraction with text, a language hint and a confidence score.

        Raises:
            CapabilityError: on any failure.
        """

    @abstractmethod
    async def ping(self) -> None:
        """Raise if the capability is unreachable."""


class BaseTranslationClient(ABC):
    """Contract for language detection and translation capabilities."""

    @abstractmethod
    async def detect_language(self, text: str) -> LanguageDetection:
        """Identify the language *text* is written in."""

    @abstractmethod
    async def translate(
        self,
        text: str,
        source_language: str | None = None,
    ) -> RawTranslation:
        """Translate *text* into English.

        Args:
            text: Source text.
            source_language: Language hint, or None to let the capability
                             detect it.

        Raises:
            CapabilityError: on any failure.
        """

    @abstractmethod
    async def ping(self) -> None:
        """Raise if the capability is unreachable."""


class BaseAnalysisClient(ABC):
    """Contract for summarization and insight extraction capabilities."""

    @abstractmethod
    async def analyze(self, text: str) -> RawAnalysis:
        """Summarize English *text* and list its action points and insights."""

    @abstractmethod
    async def ping(self) -> None:
        """Raise if the capability is unreachable."""

from dataclasses import dataclass, field

from multilang.config.settings import (
    DEFAULT_SUPPORTED_IMAGE_FORMATS,
    DEFAULT_SUPPORTED_LANGUAGES,
    Settings,
)


@dataclass(frozen=True)
class StageTimeouts:
    """Per-stage time budgets in seconds."""

    ocr: float = 30.0
    translation: float = 15.0
    analysis: float = 45.0


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable processing policy shared by every stage."""

    supported_languages: frozenset[str] = frozenset(DEFAULT_SUPPORTED_LANGUAGES)
    ocr_confidence_threshold: float = 0.5
    translation_confidence_threshold: float = 0.7
    max_file_size_bytes: int = 10 * 1024 * 1024
    supported_image_formats: frozenset[str] = frozenset(DEFAULT_SUPPORTED_IMAGE_FORMATS)
    timeouts: StageTimeouts = field(default_factory=StageTimeouts)
    health_probe_timeout: float = 5.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "PipelineConfig":
        """Freeze the policy values of *settings* into a PipelineConfig."""
        return cls(
            supported_languages=frozenset(
                code.strip().lower() for code in settings.supported_languages
            ),
            ocr_confidence_threshold=settings.ocr_confidence_threshold,
            translation_confidence_threshold=settings.translation_confidence_threshold,
            max_file_size_bytes=settings.max_file_size_bytes,
            supported_image_formats=frozenset(
                mime.strip().lower() for mime in settings.supported_image_formats
            ),
            timeouts=StageTimeouts(
                ocr=settings.ocr_timeout_seconds,
                translation=settings.translation_timeout_seconds,
                analysis=settings.analysis_timeout_seconds,
            ),
            health_probe_timeout=settings.health_probe_timeout_seconds,
        )

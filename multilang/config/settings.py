from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SUPPORTED_LANGUAGES: tuple[str, ...] = (
    "en", "es", "fr", "de", "it", "pt", "nl", "pl", "ru",
    "ja", "ko", "zh", "hi", "ar", "ta", "te", "ml", "kn",
    "bn", "gu", "mr", "pa", "or",
)

DEFAULT_SUPPORTED_IMAGE_FORMATS: tuple[str, ...] = (
    "image/jpeg", "image/jpg", "image/png", "image/gif",
    "image/webp", "image/bmp", "image/tiff",
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    app_env: str = "dev"
    log_level: str = "INFO"

    capability_provider: str = "openai"
    capability_api_key: str = ""
    capability_base_url: str = ""
    capability_temperature: float = Field(default=0.0, ge=0.0, le=1.0)

    extraction_model_name: str = "gpt-4o"
    translation_model_name: str = "gpt-4o-mini"
    analysis_model_name: str = "gpt-4o-mini"

    supported_languages: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SUPPORTED_LANGUAGES)
    )
    supported_image_formats: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SUPPORTED_IMAGE_FORMATS)
    )
    ocr_confidence_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    translation_confidence_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    max_file_size_bytes: int = Field(default=10 * 1024 * 1024, gt=0)

    ocr_timeout_seconds: float = Field(default=30.0, gt=0)
    translation_timeout_seconds: float = Field(default=15.0, gt=0)
    analysis_timeout_seconds: float = Field(default=45.0, gt=0)
    health_probe_timeout_seconds: float = Field(default=5.0, gt=0)

import pytest

from multilang.config.pipeline_config import PipelineConfig, StageTimeouts
from multilang.config.settings import DEFAULT_SUPPORTED_IMAGE_FORMATS, DEFAULT_SUPPORTED_LANGUAGES
from multilang.processor.models import ProcessingRequest


@pytest.fixture()
def pipeline_config() -> PipelineConfig:
    return PipelineConfig(
        supported_languages=frozenset(DEFAULT_SUPPORTED_LANGUAGES),
        ocr_confidence_threshold=0.5,
        translation_confidence_threshold=0.7,
        max_file_size_bytes=10 * 1024 * 1024,
        supported_image_formats=frozenset(DEFAULT_SUPPORTED_IMAGE_FORMATS),
        timeouts=StageTimeouts(ocr=1.0, translation=1.0, analysis=1.0),
        health_probe_timeout=1.0,
    )


@pytest.fixture()
def jpeg_request() -> ProcessingRequest:
    """A small JPEG-typed request; capabilities never decode the bytes in tests."""
    return ProcessingRequest.from_bytes(b"\xff\xd8\xff\xe0fake-jpeg", "image/jpeg", "scan.jpg")

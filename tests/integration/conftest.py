import pytest

from multilang.config.settings import Settings
from multilang.processor.processor import MultiLanguageProcessor, build_processor


@pytest.fixture()
def example_settings() -> Settings:
    return Settings(capability_provider="example", max_file_size_bytes=1024)


@pytest.fixture()
def example_processor(example_settings: Settings) -> MultiLanguageProcessor:
    return build_processor(example_settings)

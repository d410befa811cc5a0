from abc import ABC, abstractmethod
from dataclasses import dataclass

from multilang.capabilities.models import RawAnalysis
from multilang.processor.models import (
    ExtractionResult,
    ProcessingRequest,
    TranslationResult,
)


@dataclass(slots=True)
class PipelineContext:
    """Accumulates stage outputs for one operation."""

    request: ProcessingRequest | None = None
    text: str = ""
    detected_language: str | None = None
    extraction: ExtractionResult | None = None
    translation: TranslationResult | None = None
    analysis: RawAnalysis | None = None


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

from collections.abc import Collection

from multilang.processor.exceptions import ExtractionFailedError
from multilang.processor.language import normalize_language
from multilang.processor.pipeline import PipelineContext, PipelineStep
from multilang.processor.stages import AnalysisStage, ExtractionStage, TranslationStage
from multilang.processor.validator import InputValidator


class ValidateRequestStep(PipelineStep):
    def __init__(self, validator: InputValidator) -> None:
        self._validator = validator

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.request is None:
            raise ValueError("PipelineContext.request must be set before validation")
        self._validator.validate(context.request)
        return context


class ValidateTextStep(PipelineStep):
    def __init__(self, validator: InputValidator) -> None:
        self._validator = validator

    async def run(self, context: PipelineContext) -> PipelineContext:
        self._validator.validate_text(context.text)
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, stage: ExtractionStage) -> None:
        self._stage = stage

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.request is None:
            raise ValueError("PipelineContext.request must be set before extraction")
        extraction = await self._stage.extract(
            context.request.payload,
            context.request.mime_type,
        )
        context.extraction = extraction
        context.text = extraction.text
        context.detected_language = extraction.detected_language
        return context


class RequireReadableTextStep(PipelineStep):
    """Stops the chain when OCR found nothing worth translating."""

    async def run(self, context: PipelineContext) -> PipelineContext:
        if not context.text.strip():
            raise ExtractionFailedError("No readable text found in the document")
        return context


class NormalizeLanguageStep(PipelineStep):
    """Canonicalizes a caller-supplied language code; None is left for detection."""

    def __init__(self, supported_languages: Collection[str]) -> None:
        self._supported = supported_languages

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.detected_language is not None:
            context.detected_language = normalize_language(
                context.detected_language, self._supported
            )
        return context


class TranslateStep(PipelineStep):
    def __init__(self, stage: TranslationStage) -> None:
        self._stage = stage

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.translation = await self._stage.translate(
            context.text,
            context.detected_language,
            extraction_confidence=(
                context.extraction.confidence if context.extraction else None
            ),
        )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, stage: AnalysisStage) -> None:
        self._stage = stage

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.translation is None:
            raise ValueError("PipelineContext.translation must be set before analysis")
        context.analysis = await self._stage.analyze(context.translation.translated_text)
        return context

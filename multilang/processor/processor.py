from multilang.capabilities.factory import CapabilityFactory, CapabilitySet
from multilang.config.pipeline_config import PipelineConfig
from multilang.config.settings import Settings
from multilang.logging.logger import Log
from multilang.processor.health import HealthMonitor
from multilang.processor.models import (
    AnalysisResult,
    ExtractionResult,
    HealthStatus,
    ProcessingRequest,
    TranslationResult,
)
from multilang.processor.pipeline import PipelineContext, PipelineStep
from multilang.processor.stages import AnalysisStage, ExtractionStage, TranslationStage
from multilang.processor.steps import (
    AnalyzeStep,
    ExtractTextStep,
    NormalizeLanguageStep,
    RequireReadableTextStep,
    TranslateStep,
    ValidateRequestStep,
    ValidateTextStep,
)
from multilang.processor.validator import InputValidator


class MultiLanguageProcessor:
    """Runs the four document operations and the health check.

    Chains:
        extract_text: validate -> ocr
        translate_to_english: validate text -> normalize -> detect + translate
        process: validate -> ocr -> translate
        analyze: validate -> ocr -> translate -> analysis

    Each operation is all-or-nothing: the first failing step raises and no
    partial result is returned.
    """

    def __init__(
        self,
        capabilities: CapabilitySet,
        config: PipelineConfig,
    ) -> None:
        validator = InputValidator(config)
        extraction = ExtractionStage(capabilities.extraction, config)
        translation = TranslationStage(capabilities.translation, config)
        analysis = AnalysisStage(capabilities.analysis, config)

        self._extract_chain: list[PipelineStep] = [
            ValidateRequestStep(validator),
            ExtractTextStep(extraction),
        ]
        self._translate_chain: list[PipelineStep] = [
            ValidateTextStep(validator),
            NormalizeLanguageStep(config.supported_languages),
            TranslateStep(translation),
        ]
        self._process_chain: list[PipelineStep] = [
            *self._extract_chain,
            RequireReadableTextStep(),
            TranslateStep(translation),
        ]
        self._analyze_chain: list[PipelineStep] = [
            *self._process_chain,
            AnalyzeStep(analysis),
        ]
        self._health_monitor = HealthMonitor(
            {
                "extraction": capabilities.extraction.ping,
                "translation": capabilities.translation.ping,
                "analysis": capabilities.analysis.ping,
            },
            timeout_seconds=config.health_probe_timeout,
        )

    async def extract_text(self, request: ProcessingRequest) -> ExtractionResult:
        with Log.timed(f"extract-text {request.label}"):
            context = await self._run(self._extract_chain, PipelineContext(request=request))
        if context.extraction is None:
            raise ValueError("Extraction chain finished without an extraction result")
        return context.extraction

    async def translate_to_english(
        self,
        text: str,
        detected_language: str | None = None,
    ) -> TranslationResult:
        """Translate caller-supplied text.

        When *detected_language* is given the detection call is skipped.
        """
        with Log.timed(f"translate {len(text)} chars"):
            context = await self._run(
                self._translate_chain,
                PipelineContext(text=text, detected_language=detected_language),
            )
        return _require_translation(context)

    async def process(self, request: ProcessingRequest) -> TranslationResult:
        with Log.timed(f"process {request.label}"):
            context = await self._run(self._process_chain, PipelineContext(request=request))
        return _require_translation(context)

    async def analyze(self, request: ProcessingRequest) -> AnalysisResult:
        with Log.timed(f"analyze {request.label}"):
            context = await self._run(self._analyze_chain, PipelineContext(request=request))
        if context.analysis is None:
            raise ValueError("Analysis chain finished without an analysis result")
        return AnalysisResult(
            text=_require_translation(context),
            summary=context.analysis.summary,
            action_points=list(context.analysis.action_points),
            key_insights=list(context.analysis.key_insights),
        )

    async def health_check(self) -> HealthStatus:
        return await self._health_monitor.check()

    @staticmethod
    async def _run(steps: list[PipelineStep], context: PipelineContext) -> PipelineContext:
        for step in steps:
            context = await step.run(context)
        return context


def _require_translation(context: PipelineContext) -> TranslationResult:
    if context.translation is None:
        raise ValueError("Translation chain finished without a translation result")
    return context.translation


def build_processor(settings: Settings) -> MultiLanguageProcessor:
    """Build a MultiLanguageProcessor with the configured capability clients."""
    return MultiLanguageProcessor(
        capabilities=CapabilityFactory.create(settings),
        config=PipelineConfig.from_settings(settings),
    )

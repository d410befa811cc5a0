"""Stage adapters: one capability call each, under that stage's time budget.

Low confidence is reported through ``low_confidence`` on the result; only
timeouts and capability failures raise.
"""

import asyncio
import math
from collections.abc import Awaitable
from typing import TypeVar

from multilang.capabilities.base import (
    BaseAnalysisClient,
    BaseTextExtractionClient,
    BaseTranslationClient,
)
from multilang.capabilities.exceptions import CapabilityTimeoutError
from multilang.capabilities.models import RawAnalysis
from multilang.config.pipeline_config import PipelineConfig
from multilang.logging.logger import Log
from multilang.processor.exceptions import (
    AnalysisFailedError,
    ExtractionFailedError,
    StageFailedError,
    StageTimeoutError,
    TranslationFailedError,
)
from multilang.processor.language import normalize_language
from multilang.processor.models import (
    ENGLISH,
    UNKNOWN_LANGUAGE,
    ExtractionResult,
    TranslationResult,
)

T = TypeVar("T")


async def run_stage(
    stage: str,
    call: Awaitable[T],
    timeout_seconds: float,
    failure: type[StageFailedError],
) -> T:
    """Await a capability *call*, enforcing the stage budget.

    The call is cancelled when the budget elapses. Caller cancellation is
    propagated into the call and re-raised.

    Raises:
        StageTimeoutError: if the call does not finish in time.
        StageFailedError: *failure* for any other capability error.
    """
    try:
        return await asyncio.wait_for(call, timeout=timeout_seconds)
    except (asyncio.TimeoutError, CapabilityTimeoutError) as exc:
        Log.warning(f"{stage} stage timed out after {timeout_seconds:g}s")
        raise StageTimeoutError(stage, timeout_seconds) from exc
    except asyncio.CancelledError:
        Log.warning(f"{stage} stage cancelled")
        raise
    except Exception as exc:
        Log.error(f"{stage} stage failed: {exc}")
        raise failure(f"{stage} failed: {exc}") from exc


def clamp_confidence(value: float) -> float:
    """Force a reported confidence into [0, 1]; non-finite values become 0."""
    if not math.isfinite(value):
        return 0.0
    return max(0.0, min(1.0, value))


class ExtractionStage:
    """Runs the text-extraction capability on image bytes."""

    def __init__(self, client: BaseTextExtractionClient, config: PipelineConfig) -> None:
        self._client = client
        self._timeout = config.timeouts.ocr
        self._threshold = config.ocr_confidence_threshold
        self._languages = config.supported_languages

    async def extract(self, image_bytes: bytes, mime_type: str) -> ExtractionResult:
        raw = await run_stage(
            "ocr",
            self._client.extract(image_bytes, mime_type),
            self._timeout,
            ExtractionFailedError,
        )
        confidence = clamp_confidence(raw.confidence)
        result = ExtractionResult(
            text=raw.text,
            detected_language=normalize_language(raw.language_hint, self._languages),
            confidence=confidence,
            low_confidence=confidence < self._threshold,
        )
        if result.low_confidence:
            Log.warning(
                f"OCR confidence {confidence:.2f} is below threshold {self._threshold:.2f}"
            )
        Log.info(
            f"Extracted {len(result.text)} chars, language={result.detected_language}, "
            f"confidence={confidence:.2f}"
        )
        return result


class TranslationStage:
    """Detects language and translates to English, skipping English input.

    Detection and translation of one text share a single translation budget.
    """

    def __init__(self, client: BaseTranslationClient, config: PipelineConfig) -> None:
        self._client = client
        self._timeout = config.timeouts.translation
        self._threshold = config.translation_confidence_threshold
        self._languages = config.supported_languages

    async def detect(self, text: str) -> tuple[str, float]:
        """Return the normalized language of *text* and the detection confidence."""
        return await run_stage(
            "translation",
            self._detect(text),
            self._timeout,
            TranslationFailedError,
        )

    async def translate(
        self,
        text: str,
        detected_language: str | None,
        extraction_confidence: float | None = None,
    ) -> TranslationResult:
        """Translate *text* to English.

        When *detected_language* is None the capability detects it first,
        inside the same deadline as the translation call.
        """
        return await run_stage(
            "translation",
            self._translate(text, detected_language, extraction_confidence),
            self._timeout,
            TranslationFailedError,
        )

    async def _detect(self, text: str) -> tuple[str, float]:
        detection = await self._client.detect_language(text)
        language = normalize_language(detection.language, self._languages)
        confidence = clamp_confidence(detection.confidence)
        Log.info(f"Detected language {language} (confidence={confidence:.2f})")
        return language, confidence

    async def _translate(
        self,
        text: str,
        detected_language: str | None,
        extraction_confidence: float | None,
    ) -> TranslationResult:
        if detected_language is None:
            detected_language, _ = await self._detect(text)

        if detected_language == ENGLISH:
            Log.info("Source is English, skipping translation")
            return TranslationResult(
                original_text=text,
                detected_language=ENGLISH,
                translated_text=text,
                confidence=1.0,
                extraction_confidence=extraction_confidence,
            )

        source = None if detected_language == UNKNOWN_LANGUAGE else detected_language
        raw = await self._client.translate(text, source)
        language = detected_language
        if language == UNKNOWN_LANGUAGE:
            language = normalize_language(raw.detected_language, self._languages)

        confidence = clamp_confidence(raw.confidence)
        result = TranslationResult(
            original_text=text,
            detected_language=language,
            translated_text=raw.translated_text,
            confidence=confidence,
            low_confidence=confidence < self._threshold,
            extraction_confidence=extraction_confidence,
        )
        if result.low_confidence:
            Log.warning(
                f"Translation confidence {confidence:.2f} is below threshold "
                f"{self._threshold:.2f}"
            )
        Log.info(
            f"Translated {len(text)} chars from {language}, confidence={confidence:.2f}"
        )
        return result


class AnalysisStage:
    """Summarizes English text and lists its action points and insights."""

    def __init__(self, client: BaseAnalysisClient, config: PipelineConfig) -> None:
        self._client = client
        self._timeout = config.timeouts.analysis

    async def analyze(self, translated_text: str) -> RawAnalysis:
        analysis = await run_stage(
            "analysis",
            self._client.analyze(translated_text),
            self._timeout,
            AnalysisFailedError,
        )
        Log.info(
            f"Analysis complete: {len(analysis.action_points)} action points, "
            f"{len(analysis.key_insights)} key insights"
        )
        return analysis

from typing import ClassVar


class ProcessorError(Exception):
    """Base exception for all pipeline errors."""

    kind: ClassVar[str] = "processing_error"
    client_error: ClassVar[bool] = False


class InvalidInputError(ProcessorError):
    """Raised when a request fails size, MIME-type or text checks."""

    kind = "invalid_input"
    client_error = True


class StageTimeoutError(ProcessorError):
    """Raised when a stage's capability call exceeds its time budget."""

    kind = "timeout"

    def __init__(self, stage: str, timeout_seconds: float) -> None:
        super().__init__(f"{stage} stage timed out after {timeout_seconds:g}s")
        self.stage = stage
        self.timeout_seconds = timeout_seconds


class StageFailedError(ProcessorError):
    """Raised when a capability returns an error or malformed output."""

    stage: ClassVar[str] = ""


class ExtractionFailedError(StageFailedError):
    kind = "extraction_failed"
    stage = "ocr"


class TranslationFailedError(StageFailedError):
    kind = "translation_failed"
    stage = "translation"


class AnalysisFailedError(StageFailedError):
    kind = "analysis_failed"
    stage = "analysis"


class HealthCheckError(ProcessorError):
    """Raised when the health monitor itself is misconfigured."""

from dataclasses import dataclass, field
from enum import Enum

ENGLISH = "en"
UNKNOWN_LANGUAGE = "unknown"


@dataclass(frozen=True)
class ProcessingRequest:
    """A single image submitted for processing."""

    payload: bytes
    mime_type: str
    size_bytes: int
    file_name: str | None = None

    @classmethod
    def from_bytes(
        cls,
        payload: bytes,
        mime_type: str,
        file_name: str | None = None,
    ) -> "ProcessingRequest":
        return cls(
            payload=payload,
            mime_type=mime_type,
            size_bytes=len(payload),
            file_name=file_name,
        )

    @property
    def label(self) -> str:
        return self.file_name or f"<{self.size_bytes} bytes>"


@dataclass(frozen=True)
class ExtractionResult:
    """Output of the OCR stage."""

    text: str
    detected_language: str
    confidence: float
    low_confidence: bool = False


@dataclass(frozen=True)
class TranslationResult:
    """Source text together with its English rendering."""

    original_text: str
    detected_language: str
    translated_text: str
    confidence: float
    low_confidence: bool = False
    extraction_confidence: float | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Full pipeline output. List order is the order the capability produced."""

    text: TranslationResult
    summary: str
    action_points: list[str] = field(default_factory=list)
    key_insights: list[str] = field(default_factory=list)


class HealthState(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    DOWN = "down"


@dataclass(frozen=True)
class HealthStatus:
    """Composite availability of the external capabilities."""

    overall: HealthState
    services: dict[str, bool] = field(default_factory=dict)

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawExtraction:
    """What a text-extraction capability reports for one image."""

    text: str
    language_hint: str | None = None
    confidence: float = 0.0


@dataclass(frozen=True)
class LanguageDetection:
    language: str | None
    confidence: float = 0.0


@dataclass(frozen=True)
class RawTranslation:
    """What a translation capability reports for one text."""

    translated_text: str
    detected_language: str | None = None
    confidence: float = 0.0


@dataclass(frozen=True)
class RawAnalysis:
    summary: str = ""
    action_points: list[str] = field(default_factory=list)
    key_insights: list[str] = field(default_factory=list)

from multilang.capabilities.base import (
    BaseAnalysisClient,
    BaseTextExtractionClient,
    BaseTranslationClient,
)
from multilang.capabilities.factory import CapabilityFactory, CapabilitySet

__all__ = [
    "BaseAnalysisClient",
    "BaseTextExtractionClient",
    "BaseTranslationClient",
    "CapabilityFactory",
    "CapabilitySet",
]

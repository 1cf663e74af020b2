"""
Hosted language model providers and the fallback chains around them.
"""

from .chain import SummaryChain, TranslationChain
from .cohere import (
    CohereClient,
    CohereCombinedProvider,
    CohereSummaryProvider,
    CohereTranslationProvider,
    parse_response,
)

__all__ = [
    "CohereClient",
    "CohereCombinedProvider",
    "CohereSummaryProvider",
    "CohereTranslationProvider",
    "SummaryChain",
    "TranslationChain",
    "parse_response",
]

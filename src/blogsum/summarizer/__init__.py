"""
Article summarization.
"""

from .extractive import ExtractiveSummaryProvider, ScoredSentence, summarize_extractive
from .service import summarize

__all__ = ["ExtractiveSummaryProvider", "ScoredSentence", "summarize", "summarize_extractive"]

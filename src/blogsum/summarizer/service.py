"""
Summarization entry point: hosted providers first, extractive fallback last.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..protocols import SummaryProvider, SummaryResult
from ..providers.chain import SummaryChain
from .extractive import ExtractiveSummaryProvider


async def summarize(text: str, providers: Optional[Sequence[SummaryProvider]] = None) -> SummaryResult:
    """Summarize ``text``, ending the provider list with the extractive summarizer.

    Raises:
        InputError: If ``text`` is empty or whitespace only
    """
    chain = list(providers or [])
    if not any(isinstance(provider, ExtractiveSummaryProvider) for provider in chain):
        chain.append(ExtractiveSummaryProvider())
    return await SummaryChain(chain).summarize(text)

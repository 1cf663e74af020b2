"""
Heuristic quality assessment for extracted article text.
"""

from __future__ import annotations

import re

from .models import ContentQuality

MIN_WORDS = 50
MIN_REPETITION_RATIO = 0.3
MIN_SENTENCES = 3
NAVIGATION_INDICATORS = ("menu", "navigation", "breadcrumb", "sidebar", "footer", "header")

_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def validate_content(text: str, min_length: int = 100) -> ContentQuality:
    """Score extracted text between 0 and 1, listing the issues that cost points.

    Args:
        text: Extracted article text
        min_length: Minimum character count for full marks

    Returns:
        ContentQuality with the clamped score, issues and suggestions
    """
    issues: list[str] = []
    suggestions: list[str] = []
    score = 1.0

    if len(text) < min_length:
        issues.append(f"Content too short ({len(text)} chars, minimum {min_length})")
        score -= 0.3

    word_count = count_words(text)
    if word_count < MIN_WORDS:
        issues.append(f"Very few words ({word_count})")
        score -= 0.2

    if word_count:
        unique_words = len(set(text.lower().split()))
        if unique_words / word_count < MIN_REPETITION_RATIO:
            issues.append("Content appears repetitive")
            score -= 0.2
            suggestions.append("Try a different content selector")

    lowered = text.lower()
    if any(indicator in lowered for indicator in NAVIGATION_INDICATORS):
        issues.append("Content may include navigation elements")
        score -= 0.1

    sentence_count = sum(1 for part in _SENTENCE_SPLIT.split(text) if len(part.strip()) > 10)
    if sentence_count < MIN_SENTENCES:
        issues.append("Content lacks proper sentence structure")
        score -= 0.2

    # Deductions are subtracted from 1.0, so float error can leave a tiny negative.
    return ContentQuality(
        score=min(1.0, max(0.0, round(score, 10))),
        issues=tuple(issues),
        suggestions=tuple(suggestions),
    )

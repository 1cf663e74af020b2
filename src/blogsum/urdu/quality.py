"""
Quality scoring, validation and repair of Urdu translation candidates.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Tuple

import structlog

from ..exceptions import TranslationQualityFailure
from .script import (
    FULL_STOP,
    SENTENCE_TERMINATORS,
    ZWNJ,
    calculate_urdu_script_percentage,
    contains_urdu_script,
    extract_urdu_text,
    normalize_urdu_text,
)

logger = structlog.get_logger(__name__)

NO_URDU_SCRIPT = "No Urdu script detected"

_DIACRITICS = re.compile(r"[\u064B-\u065F\u0670\u06D6-\u06ED]")
_SENTENCE_SPLIT = re.compile(r"[۔؟!.?]+")
_LATIN_WORD = re.compile(r"[a-zA-Z]{3,}")
_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
_PROPER_PUNCTUATION = re.compile(r"[۔؟!]")

# Spaces wrongly inserted before a combining mark or around a zero-width non-joiner.
# Spaces between two Urdu letters are word breaks and stay; removing them would
# merge every word of the sentence.
_SPACE_BEFORE_MARK = re.compile(r"\s+([\u064B-\u065F\u0670])")
_SPACE_AROUND_ZWNJ = re.compile(r"\s*\u200C\s*")
_PUNCTUATION_SPACING = re.compile(r"\s*([۔؟!،؛]+)\s*")
_WHITESPACE = re.compile(r"\s+")


@dataclass(slots=True, frozen=True)
class UrduQualityMetrics:
    has_urdu_script: bool
    script_percentage: float
    diacritics_count: int
    word_count: int
    sentence_count: int
    avg_words_per_sentence: float
    quality_score: float
    issues: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class UrduValidationResult:
    is_valid: bool
    confidence: float
    issues: Tuple[str, ...]
    suggestions: Tuple[str, ...]
    metrics: UrduQualityMetrics


@dataclass(slots=True, frozen=True)
class UrduTextStatistics:
    word_count: int
    sentence_count: int
    character_count: int
    urdu_character_count: int
    paragraph_count: int
    avg_words_per_sentence: float
    script_percentage: float
    has_proper_punctuation: bool


def analyze_urdu_text_quality(text: str) -> UrduQualityMetrics:
    """
    Score a candidate Urdu string between 0 and 1.

    Args:
        text: Candidate text; it is normalized before measuring

    Returns:
        UrduQualityMetrics with the clamped score and the issues found
    """
    clean = normalize_urdu_text(text)
    has_urdu_script = contains_urdu_script(clean)
    script_percentage = calculate_urdu_script_percentage(clean)
    diacritics_count = len(_DIACRITICS.findall(clean))

    word_count = len(clean.split())
    sentence_count = sum(1 for part in _SENTENCE_SPLIT.split(clean) if len(part.strip()) > 5)
    avg_words = word_count / sentence_count if sentence_count else 0.0

    issues: list[str] = []
    suggestions: list[str] = []
    score = 1.0

    if not has_urdu_script:
        issues.append(NO_URDU_SCRIPT)
        suggestions.append("Ensure text contains Urdu characters")
        score -= 0.5
    elif script_percentage < 50:
        issues.append(f"Low Urdu script percentage ({script_percentage:.1f}%)")
        suggestions.append("Remove non-Urdu text or improve translation")
        score -= 0.2

    if word_count < 3:
        issues.append("Text too short")
        score -= 0.3
    elif word_count > 1000:
        issues.append("Text might be too long")
        suggestions.append("Consider breaking into smaller segments")
        score -= 0.1

    if sentence_count == 0:
        issues.append("No proper sentences detected")
        suggestions.append("Add proper punctuation (۔ ؟ !)")
        score -= 0.2
    elif avg_words > 25:
        issues.append("Sentences too long")
        suggestions.append("Break long sentences for better readability")
        score -= 0.1

    if len(_LATIN_WORD.findall(clean)) > word_count * 0.3:
        issues.append("Too many English words detected")
        suggestions.append("Translate English terms to Urdu equivalents")
        score -= 0.2

    return UrduQualityMetrics(
        has_urdu_script=has_urdu_script,
        script_percentage=script_percentage,
        diacritics_count=diacritics_count,
        word_count=word_count,
        sentence_count=sentence_count,
        avg_words_per_sentence=avg_words,
        quality_score=max(0.0, round(score, 10)),
        issues=tuple(issues),
        suggestions=tuple(suggestions),
    )


def validate_urdu_translation(source: str, candidate: str, min_quality_score: float = 0.5) -> UrduValidationResult:
    """
    Validate a translation candidate against its English source.

    A candidate without any Urdu script is never valid, whatever its score.
    """
    metrics = analyze_urdu_text_quality(candidate)
    issues = list(metrics.issues)
    suggestions = list(metrics.suggestions)

    source_words = len(source.split())
    if metrics.word_count < source_words * 0.3:
        issues.append("Translation significantly shorter than original")
        suggestions.append("Ensure complete translation of all content")
    elif metrics.word_count > source_words * 3:
        issues.append("Translation much longer than original")
        suggestions.append("Check for repetitive or redundant content")

    confidence = metrics.quality_score
    if metrics.script_percentage > 80:
        confidence += 0.1
    if metrics.sentence_count > 0 and metrics.avg_words_per_sentence < 20:
        confidence += 0.1
    if metrics.diacritics_count > 0:
        confidence += 0.05

    return UrduValidationResult(
        is_valid=metrics.quality_score >= min_quality_score and metrics.has_urdu_script,
        confidence=min(1.0, round(confidence, 10)),
        issues=tuple(issues),
        suggestions=tuple(suggestions),
        metrics=metrics,
    )


def post_process_urdu_translation(text: str) -> str:
    """Repair spacing and punctuation of a translation; applying it twice changes nothing."""
    processed = normalize_urdu_text(text)
    if not processed:
        return ""

    processed = _SPACE_BEFORE_MARK.sub(r"\1", processed)
    processed = _SPACE_AROUND_ZWNJ.sub(ZWNJ, processed)
    processed = _PUNCTUATION_SPACING.sub(r"\1 ", processed)
    processed = _WHITESPACE.sub(" ", processed).strip()

    if processed and processed[-1] not in SENTENCE_TERMINATORS:
        processed += FULL_STOP
    return processed


def get_urdu_text_statistics(text: str) -> UrduTextStatistics:
    metrics = analyze_urdu_text_quality(text)
    paragraphs = [p for p in _PARAGRAPH_SPLIT.split(text) if p.strip()]
    return UrduTextStatistics(
        word_count=metrics.word_count,
        sentence_count=metrics.sentence_count,
        character_count=len(text),
        urdu_character_count=math.floor(len(text) * metrics.script_percentage / 100 + 0.5),
        paragraph_count=len(paragraphs),
        avg_words_per_sentence=metrics.avg_words_per_sentence,
        script_percentage=metrics.script_percentage,
        has_proper_punctuation=_PROPER_PUNCTUATION.search(text) is not None,
    )


def clean_translation_response(raw: str) -> str:
    """Drop explanations and non-Urdu lines from a hosted model response."""
    cleaned = extract_urdu_text(raw)
    if not contains_urdu_script(cleaned):
        cleaned = normalize_urdu_text(raw)
    return cleaned or raw.strip()


def accept_translation(
    source: str, raw: str, min_quality_score: float = 0.5
) -> Tuple[str, UrduValidationResult]:
    """
    Clean, validate and repair a hosted translation.

    Args:
        source: English text that was translated
        raw: Raw model response
        min_quality_score: Minimum quality score for a valid candidate

    Returns:
        Tuple of (post-processed translation, validation result)

    Raises:
        TranslationQualityFailure: If the candidate contains no Urdu script at all
    """
    candidate = clean_translation_response(raw)
    validation = validate_urdu_translation(source, candidate, min_quality_score)

    if not validation.metrics.has_urdu_script:
        raise TranslationQualityFailure("Translation does not contain Urdu script", issues=list(validation.issues))

    if not validation.is_valid:
        logger.warning(
            "Translation quality issues",
            issues=list(validation.issues),
            quality_score=validation.metrics.quality_score,
        )

    return post_process_urdu_translation(candidate), validation

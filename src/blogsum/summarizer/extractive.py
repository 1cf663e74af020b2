"""
Extractive summarization without any external service.

Sentences are scored on position, length and vocabulary; the best ones are
returned in document order. Key points come from existing bullet or numbered
lists when the article has them, otherwise from indicator sentences.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List

import structlog

from ..exceptions import InputError
from ..protocols import MAX_KEY_POINTS, PLACEHOLDER_SUMMARY, SummaryResult

logger = structlog.get_logger(__name__)

IMPORTANT_TERMS = frozenset(
    {
        "important",
        "significant",
        "key",
        "main",
        "primary",
        "essential",
        "crucial",
        "major",
        "fundamental",
        "critical",
        "vital",
        "necessary",
        "therefore",
        "however",
        "moreover",
        "furthermore",
        "consequently",
        "result",
        "conclusion",
        "summary",
        "findings",
        "discovered",
        "research",
        "study",
        "analysis",
        "data",
        "evidence",
        "shows",
        "reveals",
        "indicates",
        "suggests",
        "demonstrates",
        "proves",
        "according",
        "expert",
        "report",
    }
)

KEY_INDICATORS = (
    "key",
    "important",
    "main",
    "significant",
    "essential",
    "crucial",
    "primary",
    "major",
    "fundamental",
    "critical",
)

MIN_SENTENCE_CHARS = 15
MIN_SENTENCE_WORDS = 3
MAX_SUMMARY_SENTENCES = 5
SUMMARY_RATIO = 0.3
SHORT_DOCUMENT_SENTENCES = 2
MIN_KEY_POINTS = 3

_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^\w\s.,!?;:()\[\]{}'\"]", re.ASCII)
_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_DIGIT_RUN = re.compile(r"\d+")
_BRACKET = re.compile(r"[()\[\]{}]")
_BULLET_POINT = re.compile(r"[•·\-*]\s*([^•·\-*\n]{10,150})")
_NUMBERED_POINT = re.compile(r"\d+[.)]\s*([^\d\n]{10,150})")


@dataclass(slots=True, frozen=True)
class ScoredSentence:
    text: str
    score: int
    original_index: int


def preprocess(text: str) -> str:
    """Collapse whitespace and drop characters that carry no sentence structure."""
    text = _WHITESPACE.sub(" ", text)
    text = _DISALLOWED.sub("", text)
    return text.strip()


def split_sentences(text: str) -> List[str]:
    """Split on terminal punctuation, keeping segments long enough to be sentences."""
    sentences = []
    for segment in _SENTENCE_SPLIT.split(text):
        segment = segment.strip()
        if len(segment) > MIN_SENTENCE_CHARS and len(segment.split()) >= MIN_SENTENCE_WORDS:
            sentences.append(segment)
    return sentences


def score_sentence(sentence: str, index: int, total: int) -> int:
    """Heuristic importance score for one sentence."""
    score = 0

    if index < total * 0.2:
        score += 3
    if index > total * 0.8:
        score += 2

    word_count = len(sentence.split())
    if 10 <= word_count <= 30:
        score += 2
    elif 8 <= word_count <= 35:
        score += 1

    lowered = sentence.lower()
    matched = sum(1 for term in IMPORTANT_TERMS if term in lowered)
    score += matched
    if matched >= 2:
        score += 1

    if len(_DIGIT_RUN.findall(sentence)) > 3:
        score -= 1
    if len(_BRACKET.findall(sentence)) > 2:
        score -= 1

    return score


def score_sentences(sentences: List[str]) -> List[ScoredSentence]:
    total = len(sentences)
    return [ScoredSentence(sentence, score_sentence(sentence, i, total), i) for i, sentence in enumerate(sentences)]


def select_top_sentences(scored: List[ScoredSentence]) -> List[ScoredSentence]:
    """Pick the highest scoring sentences and return them in document order."""
    total = len(scored)
    if total <= SHORT_DOCUMENT_SENTENCES:
        limit = total
    else:
        limit = min(MAX_SUMMARY_SENTENCES, math.ceil(total * SUMMARY_RATIO))
    # sorted() is stable, so equal scores keep document order
    ranked = sorted(scored, key=lambda sentence: -sentence.score)[:limit]
    return sorted(ranked, key=lambda sentence: sentence.original_index)


def extract_bullet_points(text: str) -> List[str]:
    """Return items of bullet and numbered lists found in the raw text."""
    points = []
    for pattern in (_BULLET_POINT, _NUMBERED_POINT):
        for match in pattern.finditer(text):
            point = match.group(1).strip()
            if len(point) >= 10:
                points.append(point)
    return points


def find_keyword_sentences(sentences: List[str], limit: int = MIN_KEY_POINTS) -> List[str]:
    matches = [s for s in sentences if any(indicator in s.lower() for indicator in KEY_INDICATORS)]
    return matches[:limit]


def extract_key_points(text: str, sentences: List[str]) -> List[str]:
    points = extract_bullet_points(text)
    if len(points) < MIN_KEY_POINTS:
        points.extend(find_keyword_sentences(sentences))
    if not points:
        points.extend(sentences[:MIN_KEY_POINTS])
    return [point for point in points if 10 < len(point) < 200][:MAX_KEY_POINTS]


def summarize_extractive(text: str) -> SummaryResult:
    """
    Summarize ``text`` by sentence extraction.

    Args:
        text: Article body

    Returns:
        SummaryResult; the summary falls back to a placeholder sentence when
        nothing in the text qualifies as a sentence

    Raises:
        InputError: If ``text`` is empty or whitespace only
    """
    if not text or not text.strip():
        raise InputError("Content is required for summarization")

    clean = preprocess(text)
    sentences = split_sentences(clean)
    selected = select_top_sentences(score_sentences(sentences))

    summary = ". ".join(sentence.text for sentence in selected) + "." if selected else PLACEHOLDER_SUMMARY
    key_points = extract_key_points(text, sentences)

    logger.debug(
        "Extractive summary generated",
        sentences=len(sentences),
        selected=len(selected),
        key_points=len(key_points),
    )
    return SummaryResult(
        summary=summary,
        key_points=key_points,
        word_count=len(clean.split()),
        original_length=len(clean),
        source="extractive",
    )


class ExtractiveSummaryProvider:
    """SummaryProvider backed by ``summarize_extractive``; never fails for non-empty text."""

    name = "extractive"
    deterministic = True

    async def summarize(self, text: str) -> SummaryResult:
        return summarize_extractive(text)

"""
blogsum content extraction.

Locates the readable body of an arbitrary blog page with an ordered cascade
of heuristics (semantic selectors, largest text block, paragraph
aggregation) and scores the result with a cheap quality heuristic.
"""

from .models import ArticleMetadata, ContentQuality, ExtractedArticle
from .protocols import ContentStrategy
from .quality import count_words, validate_content
from .soup_extractor import BlogContentExtractor
from .strategies import (
    LargestBlockStrategy,
    ParagraphStrategy,
    SelectorStrategy,
    clean_text,
    iter_text_blocks,
)

__all__ = [
    "ArticleMetadata",
    "BlogContentExtractor",
    "ContentQuality",
    "ContentStrategy",
    "ExtractedArticle",
    "LargestBlockStrategy",
    "ParagraphStrategy",
    "SelectorStrategy",
    "clean_text",
    "count_words",
    "iter_text_blocks",
    "validate_content",
]

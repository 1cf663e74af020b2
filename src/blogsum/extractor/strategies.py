"""
Main-content strategies, tried in order by BlogContentExtractor.

1. SelectorStrategy: known article containers (``article``, ``.post-content`` ...)
2. LargestBlockStrategy: the longest block-level container outside navigation
3. ParagraphStrategy: every substantial ``<p>`` joined with blank lines
"""

from __future__ import annotations

import copy
import re
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, Tag

MIN_SELECTOR_LENGTH = 100
MIN_BLOCK_LENGTH = 100
MIN_PARAGRAPH_LENGTH = 20
TOP_BLOCKS = 3

CONTENT_SELECTORS: Tuple[str, ...] = (
    "article",
    ".post-content",
    ".entry-content",
    ".content",
    ".post-body",
    ".article-content",
    ".article-body",
    ".blog-content",
    ".main-content",
    ".content-area",
    'main[role="main"]',
    "main",
    '[role="main"]',
    ".container .content",
    "#content",
    "#main",
)

NOISE_SELECTOR = (
    "script, style, nav, header, footer, aside, .sidebar, .menu, .navigation, "
    ".breadcrumb, .social-share, .comments"
)

BLOCK_TAGS: Tuple[str, ...] = ("div", "section", "article")
EXCLUDED_TAGS = frozenset({"nav", "header", "footer", "aside"})
EXCLUDED_CLASSES = frozenset({"sidebar", "menu"})

_WHITESPACE = re.compile(r"\s+")
_NEWLINES = re.compile(r"\n+")
_TABS = re.compile(r"\t+")
_NON_PRINTABLE = re.compile(r"[^\x20-\x7E\n]")


def clean_text(text: str) -> str:
    """Collapse whitespace and drop characters outside printable ASCII."""
    text = _WHITESPACE.sub(" ", text)
    text = _NEWLINES.sub("\n", text)
    text = _TABS.sub(" ", text)
    text = _NON_PRINTABLE.sub("", text)
    return text.strip()


def element_text(element: Tag) -> str:
    """Return the cleaned text of ``element`` without its noise subtrees.

    Noise is stripped from a copy; the shared soup stays intact for later strategies.
    """
    element = copy.copy(element)
    for node in element.select(NOISE_SELECTOR):
        # extract() is safe on nodes already detached with an ancestor
        node.extract()
    return clean_text(element.get_text(" "))


def _is_excluded(node: Tag) -> bool:
    if node.name in EXCLUDED_TAGS:
        return True
    classes = node.get("class") or []
    return any(cls in EXCLUDED_CLASSES for cls in classes)


def inside_excluded_region(element: Tag) -> bool:
    """True when ``element`` or any ancestor is navigation or a side region."""
    if _is_excluded(element):
        return True
    return any(isinstance(parent, Tag) and _is_excluded(parent) for parent in element.parents)


def iter_text_blocks(
    root: BeautifulSoup | Tag,
    block_tags: Sequence[str] = BLOCK_TAGS,
    min_length: int = MIN_BLOCK_LENGTH,
) -> Iterator[Tuple[str, int]]:
    """Lazily yield ``(text, length)`` for each content block under ``root``.

    Blocks nested in navigation or side regions are skipped.
    """
    for element in root.find_all(list(block_tags)):
        if inside_excluded_region(element):
            continue
        text = element_text(element)
        if len(text) > min_length:
            yield text, len(text)


def largest_blocks(blocks: Iterable[Tuple[str, int]], limit: int = TOP_BLOCKS) -> list[str]:
    """Return the texts of the ``limit`` longest blocks, longest first."""
    ranked = sorted(blocks, key=lambda block: block[1], reverse=True)
    return [text for text, _ in ranked[:limit]]


class SelectorStrategy:
    """Try a fixed priority list of semantic and structural selectors."""

    name = "selector"

    def __init__(self, selectors: Sequence[str] = CONTENT_SELECTORS, min_length: int = MIN_SELECTOR_LENGTH) -> None:
        self.selectors = tuple(selectors)
        self.min_length = min_length

    def extract(self, soup: BeautifulSoup) -> Optional[str]:
        for selector in self.selectors:
            element = soup.select_one(selector)
            if element is None:
                continue
            text = element_text(element)
            if len(text) > self.min_length:
                return text
        return None


class LargestBlockStrategy:
    """Pick the longest div/section/article outside navigation regions."""

    name = "largest_block"

    def __init__(self, min_length: int = MIN_BLOCK_LENGTH) -> None:
        self.min_length = min_length

    def extract(self, soup: BeautifulSoup) -> Optional[str]:
        blocks = largest_blocks(iter_text_blocks(soup, min_length=self.min_length))
        return blocks[0] if blocks else None


class ParagraphStrategy:
    """Concatenate every paragraph with more than a sentence fragment of text."""

    name = "paragraphs"

    def __init__(self, min_length: int = MIN_PARAGRAPH_LENGTH) -> None:
        self.min_length = min_length

    def extract(self, soup: BeautifulSoup) -> Optional[str]:
        paragraphs = []
        for paragraph in soup.find_all("p"):
            raw = paragraph.get_text(" ").strip()
            if len(raw) <= self.min_length:
                continue
            text = clean_text(raw)
            if text:
                paragraphs.append(text)
        return "\n\n".join(paragraphs) if paragraphs else None


DEFAULT_STRATEGIES = (SelectorStrategy, LargestBlockStrategy, ParagraphStrategy)

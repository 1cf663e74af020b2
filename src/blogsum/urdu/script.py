"""
Urdu script detection and text normalization.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping, Tuple

# Arabic, Arabic Supplement, Arabic Extended-A, Presentation Forms A and B
URDU_UNICODE_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x0600, 0x06FF),
    (0x0750, 0x077F),
    (0x08A0, 0x08FF),
    (0xFB50, 0xFDFF),
    (0xFE70, 0xFEFF),
)

FULL_STOP = "۔"
QUESTION_MARK = "؟"
EXCLAMATION = "!"
COMMA = "،"
SEMICOLON = "؛"
ZWNJ = "\u200c"

SENTENCE_TERMINATORS = "۔؟!.?"
RTL_THRESHOLD = 30.0

URDU_PHRASES: Mapping[str, str] = MappingProxyType(
    {
        # Content structure
        "SUMMARY": "خلاصہ",
        "KEY_POINTS": "اہم نکات",
        "INTRODUCTION": "تعارف",
        "CONCLUSION": "خلاصہ کلام",
        "DETAILS": "تفصیلات",
        "EXAMPLE": "مثال",
        "NOTE": "نوٹ",
        # Analysis
        "ANALYSIS": "تجزیہ",
        "COMPARISON": "موازنہ",
        "EVALUATION": "جائزہ",
        "RESEARCH": "تحقیق",
        "STUDY": "مطالعہ",
        "FINDINGS": "نتائج",
        # Technology
        "TECHNOLOGY": "ٹیکنالوجی",
        "DIGITAL": "ڈیجیٹل",
        "ARTIFICIAL_INTELLIGENCE": "مصنوعی ذہانت",
        "MACHINE_LEARNING": "مشین لرننگ",
        "DATA": "ڈیٹا",
        "SOFTWARE": "سافٹ ویئر",
        "APPLICATION": "ایپلیکیشن",
        # Academic
        "EDUCATION": "تعلیم",
        "KNOWLEDGE": "علم",
        "INFORMATION": "معلومات",
        "METHOD": "طریقہ کار",
        "PROCESS": "عمل",
        "DEVELOPMENT": "ترقی",
        # Business
        "BUSINESS": "کاروبار",
        "MANAGEMENT": "انتظام",
        "STRATEGY": "حکمت عملی",
        "PROJECT": "منصوبہ",
        "SOLUTION": "حل",
        "SUCCESS": "کامیابی",
    }
)

_WHITESPACE = re.compile(r"\s+")
_SURROUNDING_QUOTES = re.compile(r"^\s*[\"“”]|[\"“”]\s*$")
_BOILERPLATE_PREFIX = re.compile(r"^(اردو ترجمہ:|ترجمہ:|یہ اردو ترجمہ ہے:|Translation:|Urdu:)", re.IGNORECASE)
_LINE_SPLIT = re.compile(r"\n+")
_URDU_CHAR = re.compile("[" + "".join(f"\\u{start:04X}-\\u{end:04X}" for start, end in URDU_UNICODE_RANGES) + "]")
_URDU_SENTENCE_SPLIT = re.compile(r"[۔؟!]+")
_PUNCTUATION_MAP = str.maketrans({".": FULL_STOP, "?": QUESTION_MARK, ",": COMMA, ";": SEMICOLON})


def contains_urdu_script(text: str) -> bool:
    """True if any character of ``text`` falls in an Arabic-script block."""
    if not text:
        return False
    return _URDU_CHAR.search(text) is not None


def calculate_urdu_script_percentage(text: str) -> float:
    """Percentage of non-whitespace characters that are Arabic-script."""
    if not text:
        return 0.0
    total = len(_WHITESPACE.sub("", text))
    if total == 0:
        return 0.0
    return len(_URDU_CHAR.findall(text)) / total * 100


def is_urdu_text(text: str) -> bool:
    """True when more than 30% of the visible characters are Urdu script."""
    return calculate_urdu_script_percentage(text) > RTL_THRESHOLD


def is_rtl_text(text: str) -> bool:
    """True when the text should be laid out right to left."""
    if not text:
        return False
    return calculate_urdu_script_percentage(text) > RTL_THRESHOLD


def normalize_urdu_text(text: str) -> str:
    """Trim, collapse whitespace and strip quotes and boilerplate model prefixes.

    Quotes and prefixes are stripped repeatedly so that nested wrappers such
    as ``"Translation: ..."`` are fully removed.
    """
    if not text:
        return ""

    text = _WHITESPACE.sub(" ", text.strip())
    while True:
        stripped = _SURROUNDING_QUOTES.sub("", text)
        stripped = _BOILERPLATE_PREFIX.sub("", stripped).strip()
        if stripped == text:
            break
        text = stripped

    text = text.replace("\r\n", "\n")
    text = _LINE_SPLIT.sub("\n", text)
    return text.strip()


def extract_urdu_text(text: str) -> str:
    """Keep only the lines of a mixed-language response that are mostly Urdu."""
    if not text:
        return ""

    urdu_lines: List[str] = []
    for line in _LINE_SPLIT.split(text):
        line = line.strip()
        if line and contains_urdu_script(line) and calculate_urdu_script_percentage(line) > RTL_THRESHOLD:
            urdu_lines.append(normalize_urdu_text(line))

    return "\n".join(urdu_lines) if urdu_lines else normalize_urdu_text(text)


def convert_punctuation_to_urdu(text: str) -> str:
    """Replace Latin ``. ? , ;`` with their Urdu equivalents."""
    if not text:
        return ""
    return text.translate(_PUNCTUATION_MAP)


def split_urdu_sentences(text: str) -> List[str]:
    if not text:
        return []
    normalized = normalize_urdu_text(text)
    return [s.strip() for s in _URDU_SENTENCE_SPLIT.split(normalized) if s.strip()]


def get_urdu_word_count(text: str) -> int:
    if not text:
        return 0
    return len(normalize_urdu_text(text).split())

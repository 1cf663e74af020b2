"""
Urdu text quality engine: script detection, scoring, validation, repair and
an offline dictionary translator.
"""

from .dictionary import ENGLISH_URDU_DICTIONARY, get_dictionary_stats
from .quality import (
    UrduQualityMetrics,
    UrduTextStatistics,
    UrduValidationResult,
    accept_translation,
    analyze_urdu_text_quality,
    get_urdu_text_statistics,
    post_process_urdu_translation,
    validate_urdu_translation,
)
from .script import (
    URDU_PHRASES,
    calculate_urdu_script_percentage,
    contains_urdu_script,
    convert_punctuation_to_urdu,
    extract_urdu_text,
    get_urdu_word_count,
    is_rtl_text,
    is_urdu_text,
    normalize_urdu_text,
    split_urdu_sentences,
)
from .translator import DictionaryTranslationProvider, translate_fallback

__all__ = [
    "DictionaryTranslationProvider",
    "ENGLISH_URDU_DICTIONARY",
    "URDU_PHRASES",
    "UrduQualityMetrics",
    "UrduTextStatistics",
    "UrduValidationResult",
    "accept_translation",
    "analyze_urdu_text_quality",
    "calculate_urdu_script_percentage",
    "contains_urdu_script",
    "convert_punctuation_to_urdu",
    "extract_urdu_text",
    "get_dictionary_stats",
    "get_urdu_text_statistics",
    "get_urdu_word_count",
    "is_rtl_text",
    "is_urdu_text",
    "normalize_urdu_text",
    "post_process_urdu_translation",
    "split_urdu_sentences",
    "translate_fallback",
    "validate_urdu_translation",
]

"""
Unit tests for Urdu script detection and normalization.
"""

import pytest

from blogsum.urdu import (
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
from blogsum.urdu.script import FULL_STOP


class TestScriptDetection:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Hello world", False),
            ("", False),
            ("خلاصہ", True),
            ("Summary: خلاصہ", True),
            ("\ufb56", True),
        ],
    )
    def test_contains_urdu_script(self, text, expected):
        assert contains_urdu_script(text) is expected

    def test_percentage_ignores_whitespace(self):
        assert calculate_urdu_script_percentage("ab خلا") == pytest.approx(60.0)
        assert calculate_urdu_script_percentage("   ") == 0.0
        assert calculate_urdu_script_percentage("") == 0.0

    def test_urdu_and_rtl_threshold(self, urdu_text):
        assert is_urdu_text(urdu_text)
        assert is_rtl_text(urdu_text)
        assert not is_urdu_text("This sentence has one word خلاصہ")
        assert not is_rtl_text("")


class TestNormalization:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("  یہ   اہم   ہے  ", "یہ اہم ہے"),
            ('"یہ اہم ہے"', "یہ اہم ہے"),
            ("ترجمہ: یہ اہم ہے", "یہ اہم ہے"),
            ("Translation: یہ اہم ہے", "یہ اہم ہے"),
            ('"Urdu: یہ اہم ہے"', "یہ اہم ہے"),
            ("", ""),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_urdu_text(raw) == expected

    def test_normalize_is_idempotent(self):
        once = normalize_urdu_text('  "Translation: "یہ اہم ہے""  ')
        assert normalize_urdu_text(once) == once

    def test_extract_urdu_lines(self):
        raw = "Here is the translation:\nیہ اہم ہے\nI hope this helps!"
        assert extract_urdu_text(raw) == "یہ اہم ہے"

    def test_extract_without_urdu_returns_normalized(self):
        assert extract_urdu_text("  no   urdu here ") == "no urdu here"


def test_convert_punctuation():
    assert convert_punctuation_to_urdu("Hello, world. Ok? a;b") == "Hello، world۔ Ok؟ a؛b"
    assert convert_punctuation_to_urdu("") == ""


def test_split_sentences(urdu_text):
    sentences = split_urdu_sentences(urdu_text)
    assert len(sentences) == 2
    assert all(FULL_STOP not in sentence and sentence == sentence.strip() for sentence in sentences)
    assert split_urdu_sentences("") == []


def test_word_count():
    assert get_urdu_word_count("  ایک  دو   تین ") == 3
    assert get_urdu_word_count("") == 0


def test_phrases_are_read_only():
    assert URDU_PHRASES["SUMMARY"] == "خلاصہ"
    with pytest.raises(TypeError):
        URDU_PHRASES["SUMMARY"] = "x"

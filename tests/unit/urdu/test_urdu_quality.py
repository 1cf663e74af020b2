"""
Unit tests for Urdu quality scoring, validation and post-processing.
"""

import pytest

from blogsum.exceptions import TranslationQualityFailure
from blogsum.urdu import (
    accept_translation,
    analyze_urdu_text_quality,
    get_urdu_text_statistics,
    post_process_urdu_translation,
    validate_urdu_translation,
)
from blogsum.urdu.quality import NO_URDU_SCRIPT, clean_translation_response
from blogsum.urdu.script import FULL_STOP, ZWNJ

SOURCE = "AI is transforming healthcare. Researchers say the key benefit is faster diagnosis."


class TestAnalyzeQuality:
    def test_fluent_urdu_scores_full_marks(self, urdu_text):
        metrics = analyze_urdu_text_quality(urdu_text)

        assert metrics.has_urdu_script
        assert metrics.script_percentage == pytest.approx(100.0)
        assert metrics.sentence_count == 2
        assert metrics.quality_score == 1.0
        assert metrics.issues == ()

    def test_english_text_scores_zero(self):
        metrics = analyze_urdu_text_quality("Hello world")

        assert not metrics.has_urdu_script
        assert metrics.quality_score == 0.0
        assert metrics.issues[0] == NO_URDU_SCRIPT
        assert "Too many English words detected" in metrics.issues

    def test_short_text_without_punctuation(self):
        metrics = analyze_urdu_text_quality("اہم")

        assert metrics.word_count == 1
        assert metrics.sentence_count == 0
        assert metrics.quality_score == pytest.approx(0.5)
        assert "Text too short" in metrics.issues
        assert "No proper sentences detected" in metrics.issues

    def test_counts_diacritics(self):
        assert analyze_urdu_text_quality("\u0645\u064f\u062d\u0645\u0651\u062f کی کتاب۔").diacritics_count == 2

    def test_score_is_clamped(self):
        assert analyze_urdu_text_quality("").quality_score == 0.0


class TestValidation:
    def test_valid_translation(self, urdu_text):
        validation = validate_urdu_translation(SOURCE, urdu_text)

        assert validation.is_valid
        assert validation.confidence == 1.0
        assert validation.issues == ()

    @pytest.mark.parametrize("min_quality_score", [0.0, 0.5])
    def test_zero_urdu_candidate_is_never_valid(self, min_quality_score):
        validation = validate_urdu_translation(SOURCE, "This is an English sentence instead.", min_quality_score)

        assert not validation.is_valid
        assert NO_URDU_SCRIPT in validation.issues

    def test_length_ratio_issues(self, urdu_text):
        short = validate_urdu_translation(" ".join(["word"] * 100), urdu_text)
        assert "Translation significantly shorter than original" in short.issues

        long = validate_urdu_translation("two words", urdu_text)
        assert "Translation much longer than original" in long.issues


class TestPostProcess:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("یہ اہم ہے", "یہ اہم ہے" + FULL_STOP),
            ("یہ اہم ہے ، اور ضروری ہے ۔", "یہ اہم ہے، اور ضروری ہے" + FULL_STOP),
            ('"Translation: یہ اہم ہے"', "یہ اہم ہے" + FULL_STOP),
            ("کیا یہ اہم ہے ؟", "کیا یہ اہم ہے؟"),
            ("یہ اہم ہے.", "یہ اہم ہے."),
            ("", ""),
            ("   ", ""),
        ],
    )
    def test_post_process(self, raw, expected):
        assert post_process_urdu_translation(raw) == expected

    def test_space_before_combining_mark_removed(self):
        assert post_process_urdu_translation("کتاب \u064b ہے") == "کتاب\u064b ہے" + FULL_STOP

    def test_space_around_zwnj_removed(self):
        assert post_process_urdu_translation(f"نو {ZWNJ} جوان") == f"نو{ZWNJ}جوان" + FULL_STOP

    def test_spaces_between_words_kept(self):
        assert post_process_urdu_translation("یہ بہت اہم ہے") == "یہ بہت اہم ہے" + FULL_STOP

    @pytest.mark.parametrize(
        "raw",
        [
            "یہ اہم ہے",
            "  یہ   اہم ہے ، اور ضروری ہے ۔۔ ",
            '"ترجمہ: "کیا یہ اہم ہے ؟ ہاں !""',
            f"نو {ZWNJ} جوان \u064b لوگ",
        ],
    )
    def test_post_process_is_idempotent(self, raw):
        once = post_process_urdu_translation(raw)
        assert post_process_urdu_translation(once) == once


class TestStatistics:
    def test_statistics(self, urdu_text):
        stats = get_urdu_text_statistics(urdu_text)

        assert stats.word_count == len(urdu_text.split())
        assert stats.sentence_count == 2
        assert stats.character_count == len(urdu_text)
        assert stats.urdu_character_count == len(urdu_text)
        assert stats.paragraph_count == 1
        assert stats.has_proper_punctuation

    def test_paragraphs(self):
        stats = get_urdu_text_statistics("پہلا پیراگراف۔\n\nدوسرا پیراگراف۔")
        assert stats.paragraph_count == 2


class TestAcceptTranslation:
    def test_cleans_model_chatter(self, urdu_text):
        raw = f"Here is your translation:\n{urdu_text}\nLet me know if you need anything else."
        translated, validation = accept_translation(SOURCE, raw)

        assert translated == post_process_urdu_translation(urdu_text)
        assert validation.is_valid

    def test_rejects_candidate_without_urdu(self):
        with pytest.raises(TranslationQualityFailure) as exc_info:
            accept_translation(SOURCE, "I'm sorry, I cannot translate this.")

        assert NO_URDU_SCRIPT in exc_info.value.issues

    def test_low_quality_urdu_is_still_returned(self):
        translated, validation = accept_translation(SOURCE, "اہم", min_quality_score=0.6)

        assert not validation.is_valid
        assert translated == "اہم" + FULL_STOP

    def test_clean_response_falls_back_to_raw(self):
        assert clean_translation_response("  only english  ") == "only english"

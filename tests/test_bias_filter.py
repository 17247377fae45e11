"""
Tests for the bias filter: detection, rewriting, and score banding.
"""

import pytest

from reasoning_api.reasoning.bias_filter import (
    BALANCED_ALTERNATIVES,
    BIAS_INDICATORS,
    bias_level,
    detect_bias,
    suggest_improvements,
)


class TestDetectBias:

    def test_mixed_case_and_near_miss(self):
        # "obvious" is not "obviously", so only always + clearly count
        result = detect_bias("This is ALWAYS true, and clearly obvious.")
        assert result.bias_score == 2
        assert result.issues == (
            "Potential absolute statement: 'always'",
            "Potential absolute statement: 'clearly'",
        )
        assert result.confidence == pytest.approx(0.4)

    def test_clean_text(self):
        result = detect_bias("Some approaches may work better than others.")
        assert result.bias_score == 0
        assert result.issues == ()
        assert result.confidence == 0.0

    def test_issue_order_follows_table_not_text(self):
        result = detect_bias("Typical. Of course. Never. Always.")
        assert result.issues == (
            "Potential absolute statement: 'always'",
            "Potential absolute statement: 'never'",
            "Potential absolute statement: 'of course'",
            "Potential absolute statement: 'typical'",
        )

    def test_repeated_keyword_counts_once(self):
        assert detect_bias("always always always").bias_score == 1

    def test_substring_inside_longer_word(self):
        result = detect_bias("Nevertheless, atypical results appear.")
        assert result.bias_score == 2  # never, typical

    def test_multiword_phrases(self):
        result = detect_bias("Everyone knows people from there; all people agree.")
        assert result.bias_score == 3
        assert "Potential absolute statement: 'everyone knows'" in result.issues
        assert "Potential absolute statement: 'people from'" in result.issues
        assert "Potential absolute statement: 'all people'" in result.issues

    def test_gendered_patterns_are_advice_only(self):
        result = detect_bias("Each user should update his/her profile; he/she may ask.")
        assert result.bias_score == 0
        assert result.confidence == 0.0
        assert result.issues == (
            "Consider using inclusive language instead of 'he/she'",
            "Consider using inclusive language instead of 'his/her'",
        )

    def test_gendered_advice_follows_absolute_issues(self):
        result = detect_bias("Man/woman always differ.")
        assert result.issues == (
            "Potential absolute statement: 'always'",
            "Consider using inclusive language instead of 'man/woman'",
        )

    def test_confidence_caps_at_one(self):
        text = " ".join(BIAS_INDICATORS)
        result = detect_bias(text)
        assert result.bias_score == len(BIAS_INDICATORS)
        assert result.confidence == 1.0

    @pytest.mark.parametrize("score_text", ["always", "always never", "always never clearly"])
    def test_confidence_invariant(self, score_text):
        result = detect_bias(score_text)
        assert result.confidence == pytest.approx(min(result.bias_score * 0.2, 1.0))

    def test_pure(self):
        text = "Obviously women are definitely typical."
        assert detect_bias(text) == detect_bias(text)

    @pytest.mark.parametrize("text", ["", "   ", "ÄLWAYS", "🙂 never 🙂"])
    def test_total(self, text):
        result = detect_bias(text)
        assert result.bias_score >= 0


class TestSuggestImprovements:

    def test_replaces_in_declaration_order(self):
        improved, suggestions = suggest_improvements("This is never and always simple.")
        assert "often" in improved
        assert "rarely" in improved
        assert "always" not in improved.lower()
        assert "never" not in improved.lower()
        assert suggestions == [
            "Replaced 'always' with 'often'",
            "Replaced 'never' with 'rarely'",
        ]

    def test_case_insensitive_global_replace(self):
        improved, suggestions = suggest_improvements("Always. ALWAYS. always.")
        assert improved == "often. often. often."
        assert suggestions == ["Replaced 'always' with 'often'"]

    def test_multiword_key(self):
        improved, _ = suggest_improvements("Everyone knows the answer.")
        assert improved == "it is commonly understood the answer."

    def test_replaces_inside_longer_words(self):
        improved, _ = suggest_improvements("Nevertheless it works.")
        assert improved == "rarelytheless it works."

    def test_keys_without_alternative_are_left_alone(self):
        text = "The typical answer, of course."
        improved, suggestions = suggest_improvements(text)
        assert improved == text
        assert suggestions == []

    def test_all_alternatives(self):
        text = "always never everyone knows obviously clearly definitely"
        improved, suggestions = suggest_improvements(text)
        assert improved == (
            "often rarely it is commonly understood it appears that it seems that likely"
        )
        assert len(suggestions) == len(BALANCED_ALTERNATIVES)

    def test_applicability_checked_against_original_text(self):
        # "dog" is not in the original, so the second entry never fires,
        # even though the first rewrite puts a "dog" into the buffer.
        table = [("cat", "dog"), ("dog", "bird")]
        improved, suggestions = suggest_improvements("a cat", table)
        assert improved == "a dog"
        assert suggestions == ["Replaced 'cat' with 'dog'"]

    def test_later_rewrites_operate_on_working_buffer(self):
        # Both keys are in the original, so the second rewrite also
        # catches the text the first one produced.
        table = [("cat", "dog"), ("dog", "bird")]
        improved, suggestions = suggest_improvements("cat and dog", table)
        assert improved == "bird and bird"
        assert suggestions == [
            "Replaced 'cat' with 'dog'",
            "Replaced 'dog' with 'bird'",
        ]

    def test_suggestion_recorded_even_when_buffer_no_longer_matches(self):
        table = [("big cat", "pet"), ("cat", "dog")]
        improved, suggestions = suggest_improvements("big cat", table)
        assert improved == "pet"
        assert suggestions == [
            "Replaced 'big cat' with 'pet'",
            "Replaced 'cat' with 'dog'",
        ]

    def test_replacement_text_is_literal(self):
        improved, _ = suggest_improvements("a.b", [(".", r"\1")])
        assert improved == r"a\1b"


class TestBiasLevel:

    @pytest.mark.parametrize(
        "score, expected",
        [(0, "low"), (1, "low"), (2, "medium"), (3, "medium"), (4, "high"), (12, "high")],
    )
    def test_bands(self, score, expected):
        assert bias_level(score) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

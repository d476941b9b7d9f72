"""
Unit tests for readability statistics and the readability sub-scorer.
"""
import pytest

from analyzers.readability import ReadabilityAnalyzer, marker_percentage, readability_stats
from analyzers.text import compute_metrics
from models import AnalysisInput, Severity


def _analyze(content, settings):
    return ReadabilityAnalyzer().analyze(
        AnalysisInput(content=content), compute_metrics(content), settings,
    )


class TestReadabilityStats:
    """Formula reproduction."""

    def test_flesch_formulas(self):
        text = "The cat sat. The dog ran."
        stats = readability_stats(text, compute_metrics(text))

        assert stats.avg_sentence_length == pytest.approx(3.0)
        assert stats.avg_word_length == pytest.approx(20 / 6)
        assert stats.flesch_reading_ease == pytest.approx(206.835 - 1.015 * 3.0 - 84.6 * (20 / 6 / 5.0))
        assert stats.flesch_kincaid_grade == pytest.approx(0.39 * 3.0 + 11.8 * (20 / 6 / 5.0) - 15.59)

    def test_empty_text_has_no_division_errors(self):
        stats = readability_stats("", compute_metrics(""))
        assert stats.avg_sentence_length == 0.0
        assert stats.avg_word_length == 0.0
        assert stats.flesch_reading_ease == pytest.approx(206.835)

    def test_passive_voice_markers(self):
        text = "The ball was thrown. The cakes were eaten."
        stats = readability_stats(text, compute_metrics(text))
        assert stats.passive_voice_percentage == pytest.approx(100.0)

    def test_marker_percentage_case_insensitive(self):
        assert marker_percentage("However, FINALLY done.", ["however", "finally"], 1) == pytest.approx(200.0)


class TestReadabilityAnalyzer:
    """Deductions of the readability sub-scorer."""

    def test_empty_content_scores_full(self, settings):
        result = _analyze("", settings)
        assert result.score == 100
        assert result.issues == ()

    def test_long_sentences(self, settings):
        result = _analyze(" ".join(["a"] * 30), settings)
        assert result.score == 85
        assert result.issues[0].title == "Sentences are too long"

    def test_very_difficult(self, settings):
        result = _analyze(" ".join(["abcdefghijklmno"] * 9 + ["abcdefghijklmn."]), settings)
        assert result.score == 80
        assert result.issues[0].severity == Severity.WARNING
        assert result.flesch_reading_ease == 0.0

    def test_fairly_difficult(self, settings):
        result = _analyze(" ".join(["abcdefghi"] * 9 + ["abcdefgh."]), settings)
        assert result.score == 90
        assert result.issues[0].title == "Content is fairly difficult to read"

    def test_passive_voice(self, settings):
        result = _analyze("The ball was thrown. The cakes were eaten.", settings)
        titles = [i.title for i in result.issues]
        assert "High use of passive voice" in titles
        assert result.score == 95

    def test_few_transition_words(self, settings):
        result = _analyze("Go now. Go now. Go now. Go now.", settings)
        assert result.score == 95
        assert result.issues[0].title == "Few transition words"

    def test_transition_check_needs_more_than_three_sentences(self, settings):
        result = _analyze("Go now. Go now. Go now.", settings)
        assert result.score == 100

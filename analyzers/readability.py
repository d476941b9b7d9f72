"""
Readability sub-scorer.

Flesch Reading Ease and Flesch-Kincaid Grade are approximated from average
word length (characters / 5) rather than syllable counts, and passive voice /
transition usage are counted against fixed lexical marker sets.
"""
from __future__ import annotations

from dataclasses import dataclass

from models import AnalysisInput, AnalysisSettings, ReadabilityAnalysis, TextMetrics
from analyzers.base import BaseAnalyzer
from config import (
    FLESCH_FAIRLY_DIFFICULT,
    FLESCH_VERY_DIFFICULT,
    LONG_SENTENCE_WORDS,
    PASSIVE_VOICE_MARKERS,
    PASSIVE_VOICE_MAX_PCT,
    TRANSITION_MIN_SENTENCES,
    TRANSITION_WORDS,
    TRANSITION_WORDS_MIN_PCT,
)


@dataclass(frozen=True)
class ReadabilityStats:
    avg_sentence_length: float
    avg_word_length: float
    flesch_reading_ease: float      # unclamped
    flesch_kincaid_grade: float     # unclamped
    passive_voice_percentage: float
    transition_word_percentage: float


def marker_percentage(text: str, markers: list[str], sentences: int) -> float:
    lowered = (text or "").lower()
    hits = sum(lowered.count(marker) for marker in markers)
    return hits / max(sentences, 1) * 100.0


def readability_stats(text: str, metrics: TextMetrics) -> ReadabilityStats:
    sentences = max(metrics.sentence_count, 1)
    avg_sentence = metrics.word_count / sentences
    avg_word = metrics.word_chars / metrics.word_count if metrics.word_count else 0.0

    return ReadabilityStats(
        avg_sentence_length=avg_sentence,
        avg_word_length=avg_word,
        flesch_reading_ease=206.835 - 1.015 * avg_sentence - 84.6 * (avg_word / 5.0),
        flesch_kincaid_grade=0.39 * avg_sentence + 11.8 * (avg_word / 5.0) - 15.59,
        passive_voice_percentage=marker_percentage(text, PASSIVE_VOICE_MARKERS, sentences),
        transition_word_percentage=marker_percentage(text, TRANSITION_WORDS, sentences),
    )


class ReadabilityAnalyzer(BaseAnalyzer):
    category = "Readability"

    def analyze(
        self,
        data: AnalysisInput,
        metrics: TextMetrics,
        settings: AnalysisSettings,
    ) -> ReadabilityAnalysis:
        stats = readability_stats(data.content, metrics)
        issues = []
        score = 100

        if stats.avg_sentence_length > LONG_SENTENCE_WORDS:
            issues.append(self.warning(
                "Sentences are too long",
                "Try to keep sentences under 20-25 words for better readability.",
            ))
            score -= 15

        if stats.flesch_reading_ease < FLESCH_VERY_DIFFICULT:
            issues.append(self.warning(
                "Content is very difficult to read",
                "Simplify your language and use shorter sentences.",
            ))
            score -= 20
        elif stats.flesch_reading_ease < FLESCH_FAIRLY_DIFFICULT:
            issues.append(self.info(
                "Content is fairly difficult to read",
                "Consider simplifying some sentences.",
            ))
            score -= 10

        if stats.passive_voice_percentage > PASSIVE_VOICE_MAX_PCT:
            issues.append(self.info(
                "High use of passive voice",
                "Try using more active voice for engaging content.",
            ))
            score -= 5

        if (
            stats.transition_word_percentage < TRANSITION_WORDS_MIN_PCT
            and metrics.sentence_count > TRANSITION_MIN_SENTENCES
        ):
            issues.append(self.info(
                "Few transition words",
                "Use more transition words to improve flow.",
            ))
            score -= 5

        return ReadabilityAnalysis(
            score=self.clamp(score),
            issues=tuple(issues),
            flesch_reading_ease=max(0.0, stats.flesch_reading_ease),
            flesch_kincaid_grade=max(0.0, stats.flesch_kincaid_grade),
            avg_sentence_length=stats.avg_sentence_length,
            avg_word_length=stats.avg_word_length,
            passive_voice_percentage=stats.passive_voice_percentage,
            transition_word_percentage=stats.transition_word_percentage,
        )

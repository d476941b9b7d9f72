"""
Suggestion table derived from sub-scorer results.

Only the four triggers below produce suggestions.
"""
from __future__ import annotations

from models import (
    AnalysisSettings,
    ContentAnalysis,
    KeywordAnalysis,
    MetaAnalysis,
    Priority,
    SeoSuggestion,
    TitleAnalysis,
)

_WEAK_SCORE = 50


def generate_suggestions(
    title: TitleAnalysis,
    meta: MetaAnalysis,
    content: ContentAnalysis,
    keyword: KeywordAnalysis,
    settings: AnalysisSettings,
) -> list[SeoSuggestion]:
    suggestions: list[SeoSuggestion] = []

    # ── High priority ─────────────────────────────────────────────────────────
    if title.score < _WEAK_SCORE:
        suggestions.append(SeoSuggestion(
            category="Title",
            priority=Priority.HIGH,
            title="Improve your title",
            description="Your title needs significant improvement for SEO.",
            action="Add focus keyword and optimize length.",
        ))

    if meta.score < _WEAK_SCORE:
        suggestions.append(SeoSuggestion(
            category="Meta Description",
            priority=Priority.HIGH,
            title="Add meta description",
            description="A good meta description improves click-through rates.",
            action="Write a compelling 150-160 character description.",
        ))

    # ── Medium priority ───────────────────────────────────────────────────────
    if content.word_count < settings.min_word_count:
        suggestions.append(SeoSuggestion(
            category="Content",
            priority=Priority.MEDIUM,
            title="Add more content",
            description=(
                f"Your content has {content.word_count} words. "
                f"Aim for at least {settings.min_word_count}."
            ),
        ))

    if keyword.focus_keyword is None:
        suggestions.append(SeoSuggestion(
            category="Keywords",
            priority=Priority.MEDIUM,
            title="Set a focus keyword",
            description="A focus keyword helps optimize your content.",
        ))

    return suggestions

"""
Keyword sub-scorer: focus keyword frequency, density band and placement.
"""
from __future__ import annotations

from models import AnalysisInput, AnalysisSettings, KeywordAnalysis, TextMetrics
from analyzers.base import BaseAnalyzer
from analyzers.text import contains_keyword, keyword_density, keyword_occurrences


class KeywordAnalyzer(BaseAnalyzer):
    category = "Keywords"

    def analyze(
        self,
        data: AnalysisInput,
        metrics: TextMetrics,
        settings: AnalysisSettings,
    ) -> KeywordAnalysis:
        keyword = data.focus_keyword

        if not keyword:
            return KeywordAnalysis(
                score=50,
                issues=(self.warning(
                    "No focus keyword set",
                    "Set a focus keyword to optimize your content.",
                ),),
            )

        issues = []
        score = 100

        count = keyword_occurrences(data.content, keyword)
        density = keyword_density(count, metrics.word_count)
        in_first = contains_keyword(metrics.first_paragraph, keyword)
        in_headings = any(contains_keyword(h, keyword) for h in data.headings)
        in_url = contains_keyword(data.url, keyword)

        # ── Frequency / density (one band at most) ────────────────────────────
        if count == 0:
            issues.append(self.error(
                "Focus keyword not found",
                "The focus keyword doesn't appear in your content.",
            ))
            score -= 30
        elif density < settings.target_keyword_density * 0.5:
            issues.append(self.warning(
                "Keyword density too low",
                f"Keyword density is {density:.1f}%. Consider using your focus keyword more often.",
            ))
            score -= 15
        elif density > settings.max_keyword_density:
            issues.append(self.warning(
                "Keyword density too high",
                f"Keyword density is {density:.1f}%. You may be over-optimizing; use the keyword more naturally.",
            ))
            score -= 10

        # ── Placement ─────────────────────────────────────────────────────────
        if not in_first:
            issues.append(self.warning(
                "Keyword not in first paragraph",
                "Include your focus keyword in the first paragraph.",
            ))
            score -= 10

        if not in_headings:
            issues.append(self.info(
                "Keyword not in subheadings",
                "Consider adding the keyword to at least one subheading.",
            ))
            score -= 5

        if not in_url:
            issues.append(self.info(
                "Keyword not in URL",
                "Including the keyword in the URL can help with SEO.",
            ))
            score -= 5

        return KeywordAnalysis(
            score=self.clamp(score),
            issues=tuple(issues),
            focus_keyword=keyword,
            keyword_count=count,
            keyword_density=density,
            in_first_paragraph=in_first,
            in_headings=in_headings,
            in_url=in_url,
        )

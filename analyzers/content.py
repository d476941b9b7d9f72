"""
Content sub-scorer: word count, H1 uniqueness, subheadings on long content.
"""
from __future__ import annotations

from models import AnalysisInput, AnalysisSettings, ContentAnalysis, TextMetrics
from analyzers.base import BaseAnalyzer
from config import SUBHEADING_WORD_THRESHOLD


class ContentAnalyzer(BaseAnalyzer):
    category = "Content"

    def analyze(
        self,
        data: AnalysisInput,
        metrics: TextMetrics,
        settings: AnalysisSettings,
    ) -> ContentAnalysis:
        issues = []
        score = 100
        headings = metrics.heading_count

        # ── Word count / thin content ─────────────────────────────────────────
        if metrics.word_count < settings.min_word_count:
            issues.append(self.warning(
                "Content is too short",
                f"Add more content. Aim for at least {settings.min_word_count} words.",
            ))
            score -= 20

        # ── H1 ────────────────────────────────────────────────────────────────
        if headings.h1 == 0:
            issues.append(self.error(
                "No H1 heading found",
                "Add an H1 heading that includes your focus keyword.",
            ))
            score -= 20
        elif headings.h1 > 1:
            issues.append(self.warning(
                "Multiple H1 headings",
                f"Found {headings.h1} H1 headings. Use only one H1 heading per page.",
            ))
            score -= 10

        # ── H2 missing on long content ────────────────────────────────────────
        if headings.h2 == 0 and metrics.word_count > SUBHEADING_WORD_THRESHOLD:
            issues.append(self.info(
                "No subheadings used",
                "Break up your content with H2 subheadings for better readability.",
            ))
            score -= 5

        return ContentAnalysis(
            score=self.clamp(score),
            issues=tuple(issues),
            word_count=metrics.word_count,
            paragraph_count=metrics.paragraph_count,
            sentence_count=metrics.sentence_count,
            heading_count=headings,
            has_h1=headings.h1 > 0,
        )

"""
Meta tag sub-scorers: title and meta description.
"""
from __future__ import annotations

from models import AnalysisInput, AnalysisSettings, MetaAnalysis, TextMetrics, TitleAnalysis
from analyzers.base import BaseAnalyzer
from config import (
    DESCRIPTION_MAX_CHARS,
    DESCRIPTION_MIN_CHARS,
    TITLE_KEYWORD_MAX_POSITION,
    TITLE_MAX_CHARS,
    TITLE_MIN_CHARS,
)


class TitleAnalyzer(BaseAnalyzer):
    category = "Title"

    def analyze(
        self,
        data: AnalysisInput,
        metrics: TextMetrics,
        settings: AnalysisSettings,
    ) -> TitleAnalysis:
        title = data.title or ""
        length = len(title)
        issues = []
        score = 100

        # ── Length ────────────────────────────────────────────────────────────
        if length < TITLE_MIN_CHARS:
            issues.append(self.warning(
                "Title is too short",
                f"The title should be at least {TITLE_MIN_CHARS} characters for better SEO.",
            ))
            score -= 15
        elif length > TITLE_MAX_CHARS:
            issues.append(self.warning(
                "Title is too long",
                f"The title exceeds {TITLE_MAX_CHARS} characters and may be truncated in search results.",
            ))
            score -= 10

        # ── Focus keyword ─────────────────────────────────────────────────────
        position = None
        if data.focus_keyword:
            found = title.lower().find(data.focus_keyword.lower())
            if found < 0:
                issues.append(self.error(
                    "Focus keyword not in title",
                    "The focus keyword should appear in the title for better rankings.",
                ))
                score -= 25
            else:
                position = found
                if position > TITLE_KEYWORD_MAX_POSITION:
                    issues.append(self.info(
                        "Keyword not at start of title",
                        "Moving the keyword closer to the beginning may improve rankings.",
                    ))
                    score -= 5

        return TitleAnalysis(
            score=self.clamp(score),
            issues=tuple(issues),
            title=title,
            length=length,
            has_focus_keyword=position is not None,
            keyword_position=position,
        )


class MetaDescriptionAnalyzer(BaseAnalyzer):
    category = "Meta Description"

    def analyze(
        self,
        data: AnalysisInput,
        metrics: TextMetrics,
        settings: AnalysisSettings,
    ) -> MetaAnalysis:
        description = data.meta_description

        if not description:
            return MetaAnalysis(
                score=0,
                issues=(self.error(
                    "No meta description",
                    "Add a meta description to control how your page appears in search results.",
                ),),
            )

        length = len(description)
        issues = []
        score = 100

        if length < DESCRIPTION_MIN_CHARS:
            issues.append(self.warning(
                "Meta description is too short",
                f"The description should be at least {DESCRIPTION_MIN_CHARS} characters.",
            ))
            score -= 15
        elif length > DESCRIPTION_MAX_CHARS:
            issues.append(self.warning(
                "Meta description is too long",
                f"The description exceeds {DESCRIPTION_MAX_CHARS} characters and may be truncated.",
            ))
            score -= 10

        has_keyword = False
        if data.focus_keyword:
            has_keyword = data.focus_keyword.lower() in description.lower()
            if not has_keyword:
                issues.append(self.warning(
                    "Focus keyword not in meta description",
                    "Include your focus keyword in the meta description.",
                ))
                score -= 15

        return MetaAnalysis(
            score=self.clamp(score),
            issues=tuple(issues),
            description=description,
            length=length,
            has_focus_keyword=has_keyword,
        )

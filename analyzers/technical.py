"""
Technical SEO sub-scorer: canonical URL, Open Graph, Twitter Card, schema markup.
"""
from __future__ import annotations

from models import AnalysisInput, AnalysisSettings, TechnicalAnalysis, TextMetrics
from analyzers.base import BaseAnalyzer


class TechnicalSEOAnalyzer(BaseAnalyzer):
    category = "Technical"

    def analyze(
        self,
        data: AnalysisInput,
        metrics: TextMetrics,
        settings: AnalysisSettings,
    ) -> TechnicalAnalysis:
        issues = []
        score = 100

        if not data.has_canonical:
            issues.append(self.warning(
                "No canonical URL",
                "Set a canonical URL to prevent duplicate content issues.",
            ))
            score -= 15

        if not data.has_open_graph:
            issues.append(self.info(
                "Missing OpenGraph tags",
                "Add OpenGraph tags for better social sharing.",
            ))
            score -= 5

        if not data.has_twitter_card:
            issues.append(self.info(
                "Missing Twitter Card tags",
                "Add Twitter Card tags for better Twitter sharing.",
            ))
            score -= 5

        if not data.has_schema:
            issues.append(self.info(
                "No schema markup",
                "Add schema.org structured data for rich snippets.",
            ))
            score -= 10

        return TechnicalAnalysis(
            score=self.clamp(score),
            issues=tuple(issues),
            has_canonical=data.has_canonical,
            has_robots_meta=data.has_robots_meta,
            has_open_graph=data.has_open_graph,
            has_twitter_card=data.has_twitter_card,
            has_schema=data.has_schema,
            page_load_time=data.page_load_time,
            mobile_friendly=data.mobile_friendly,
        )

"""
Link sub-scorer: internal linking, outbound links, broken links.
"""
from __future__ import annotations

from models import AnalysisInput, AnalysisSettings, LinkAnalysis, TextMetrics
from analyzers.base import BaseAnalyzer
from config import FEW_INTERNAL_LINKS


class LinkAnalyzer(BaseAnalyzer):
    category = "Links"

    def analyze(
        self,
        data: AnalysisInput,
        metrics: TextMetrics,
        settings: AnalysisSettings,
    ) -> LinkAnalysis:
        issues = []
        score = 100

        # ── Internal links ────────────────────────────────────────────────────
        if data.internal_links == 0:
            issues.append(self.warning(
                "No internal links",
                "Add internal links to help visitors discover more content.",
            ))
            score -= 20
        elif data.internal_links < FEW_INTERNAL_LINKS:
            issues.append(self.info(
                "Few internal links",
                f"Only {data.internal_links} internal link(s). Consider adding more internal links.",
            ))
            score -= 10

        # ── External links ────────────────────────────────────────────────────
        if data.external_links == 0:
            issues.append(self.info(
                "No outbound links",
                "Linking to authoritative sources can improve credibility.",
            ))
            score -= 5

        # ── Broken links ──────────────────────────────────────────────────────
        if data.broken_links:
            issues.append(self.error(
                "Broken links detected",
                f"Fix {len(data.broken_links)} broken links.",
            ))
            score -= 25

        return LinkAnalysis(
            score=self.clamp(score),
            issues=tuple(issues),
            internal_links=data.internal_links,
            external_links=data.external_links,
            broken_links=tuple(data.broken_links),
            nofollow_links=data.nofollow_links,
        )

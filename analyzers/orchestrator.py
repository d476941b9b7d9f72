"""
Runs every sub-scorer over one AnalysisInput and assembles the SeoAnalysis.
"""
from __future__ import annotations

import logging
from typing import Optional

from models import AnalysisInput, AnalysisSettings, SeoAnalysis
from analyzers.text import compute_metrics
from analyzers.meta import MetaDescriptionAnalyzer, TitleAnalyzer
from analyzers.content import ContentAnalyzer
from analyzers.keyword import KeywordAnalyzer
from analyzers.readability import ReadabilityAnalyzer
from analyzers.links import LinkAnalyzer
from analyzers.images import ImageAnalyzer
from analyzers.technical import TechnicalSEOAnalyzer
from scoring.scorer import compute_overall_score
from scoring.suggestions import generate_suggestions

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """
    Stateless apart from its settings: one engine may serve concurrent callers.
    Every well-typed input produces a result; nothing here raises.
    """

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings or AnalysisSettings()
        self._title = TitleAnalyzer()
        self._meta = MetaDescriptionAnalyzer()
        self._content = ContentAnalyzer()
        self._keyword = KeywordAnalyzer()
        self._readability = ReadabilityAnalyzer()
        self._links = LinkAnalyzer()
        self._images = ImageAnalyzer()
        self._technical = TechnicalSEOAnalyzer()

    def analyze(self, content_id: str, data: AnalysisInput) -> SeoAnalysis:
        settings = self.settings
        metrics = compute_metrics(data.content)

        title = self._title.analyze(data, metrics, settings)
        meta = self._meta.analyze(data, metrics, settings)
        content = self._content.analyze(data, metrics, settings)
        keyword = self._keyword.analyze(data, metrics, settings)
        readability = self._readability.analyze(data, metrics, settings)
        links = self._links.analyze(data, metrics, settings)
        images = self._images.analyze(data, metrics, settings)
        technical = self._technical.analyze(data, metrics, settings)

        overall = compute_overall_score(
            [title, meta, content, keyword, readability, links, images, technical]
        )
        suggestions = generate_suggestions(title, meta, content, keyword, settings)

        logger.debug(
            "Analysed %s: %d (%s), %d suggestion(s)",
            content_id, overall.score, overall.grade, len(suggestions),
        )

        return SeoAnalysis(
            content_id=content_id,
            overall_score=overall,
            title_analysis=title,
            meta_analysis=meta,
            content_analysis=content,
            keyword_analysis=keyword,
            readability_analysis=readability,
            link_analysis=links,
            image_analysis=images,
            technical_analysis=technical,
            suggestions=tuple(suggestions),
        )

"""
Image sub-scorer: presence of images, alt text, keyword in alt text.
"""
from __future__ import annotations

from models import AnalysisInput, AnalysisSettings, ImageAnalysis, TextMetrics
from analyzers.base import BaseAnalyzer
from analyzers.text import contains_keyword


class ImageAnalyzer(BaseAnalyzer):
    category = "Images"

    def analyze(
        self,
        data: AnalysisInput,
        metrics: TextMetrics,
        settings: AnalysisSettings,
    ) -> ImageAnalysis:
        images = data.images
        large = tuple(data.large_images)

        if not images:
            return ImageAnalysis(
                score=100 - 10,
                issues=(self.info(
                    "No images in content",
                    "Adding images can improve engagement and SEO.",
                ),),
                large_images=large,
            )

        issues = []
        score = 100

        # ── Missing alt text ──────────────────────────────────────────────────
        with_alt = sum(1 for img in images if img.alt)
        missing_alt = len(images) - with_alt
        if missing_alt > 0:
            issues.append(self.warning(
                "Images missing alt text",
                f"{missing_alt} images are missing alt text.",
            ))
            score -= 15

        # ── Keyword in alt text ───────────────────────────────────────────────
        with_keyword = 0
        if data.focus_keyword:
            with_keyword = sum(1 for img in images if contains_keyword(img.alt, data.focus_keyword))
            if with_keyword == 0:
                issues.append(self.info(
                    "No images contain focus keyword",
                    "Add the focus keyword to at least one image alt text.",
                ))
                score -= 5

        return ImageAnalysis(
            score=self.clamp(score),
            issues=tuple(issues),
            total_images=len(images),
            images_with_alt=with_alt,
            images_with_keyword=with_keyword,
            large_images=large,
        )

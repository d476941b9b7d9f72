"""
Base class for all sub-scorers.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from models import AnalysisInput, AnalysisSettings, Issue, Severity, SubScoreResult, TextMetrics


class BaseAnalyzer(ABC):
    """All sub-scorers inherit from this class.

    A sub-scorer starts from a baseline of 100, subtracts a fixed penalty for
    every triggered condition and floors the result at 0.
    """

    category: str = "Uncategorized"

    @abstractmethod
    def analyze(
        self,
        data: AnalysisInput,
        metrics: TextMetrics,
        settings: AnalysisSettings,
    ) -> SubScoreResult:
        """Score one dimension of the input."""
        ...

    # ── Convenience factories ─────────────────────────────────────────────────

    @staticmethod
    def clamp(score: int) -> int:
        return max(0, min(100, score))

    def error(self, title: str, description: str) -> Issue:
        return Issue(Severity.ERROR, title, description)

    def warning(self, title: str, description: str) -> Issue:
        return Issue(Severity.WARNING, title, description)

    def info(self, title: str, description: str) -> Issue:
        return Issue(Severity.INFO, title, description)

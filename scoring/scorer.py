"""
Overall score calculator.

Scoring model:
- Every sub-scorer yields an integer 0–100.
- The overall score is the truncated integer mean of the sub-scores
  (sum // count), not a weighted average.
- Grades come from fixed breakpoints: 90 Excellent, 70 Good, 50 Fair,
  30 Poor, anything lower Bad.
"""
from __future__ import annotations

from models import Grade, SeoScore, SubScoreResult
from config import GRADE_BREAKPOINTS, LOWEST_GRADE


def score_grade(score: int) -> str:
    for lower_bound, grade in GRADE_BREAKPOINTS:
        if score >= lower_bound:
            return grade
    return LOWEST_GRADE


def make_score(score: int) -> SeoScore:
    score = max(0, min(100, score))
    return SeoScore(score=score, grade=score_grade(score))


def compute_overall_score(results: list[SubScoreResult]) -> SeoScore:
    """Integer mean of the sub-scores; an empty list scores 0."""
    if not results:
        return make_score(0)
    return make_score(sum(r.score for r in results) // len(results))


def score_color(score: int) -> str:
    return Grade.COLORS[score_grade(score)]

"""
Text statistics shared by every sub-scorer.

All functions are pure and total: empty input yields zero counts (and a
sentence count of 1, so averages never divide by zero).
"""
from __future__ import annotations

from models import Heading, HeadingCount, TextMetrics

_SENTENCE_TERMINATORS = ".!?"

# Each prefix ends in a space, so "## x" never matches "# ".
_HEADING_PREFIXES = {
    "# ": 1,
    "## ": 2,
    "### ": 3,
    "#### ": 4,
}


def word_count(text: str) -> int:
    return len(text.split()) if text else 0


def sentence_count(text: str) -> int:
    if not text:
        return 1
    return max(1, sum(1 for ch in text if ch in _SENTENCE_TERMINATORS))


def paragraph_count(text: str) -> int:
    if not text:
        return 0
    return sum(1 for block in text.split("\n\n") if block.strip())


def first_paragraph(text: str) -> str:
    return text.split("\n\n", 1)[0] if text else ""


def heading_counts(text: str) -> tuple[HeadingCount, list[Heading]]:
    """Count Markdown-style headings (levels 1–4) at the start of each line."""
    counts = {1: 0, 2: 0, 3: 0, 4: 0}
    headings: list[Heading] = []

    for line in (text or "").splitlines():
        trimmed = line.strip()
        for prefix, level in _HEADING_PREFIXES.items():
            if trimmed.startswith(prefix):
                counts[level] += 1
                headings.append(Heading(level=level, text=trimmed[len(prefix):].strip()))
                break

    return HeadingCount(h1=counts[1], h2=counts[2], h3=counts[3], h4=counts[4]), headings


def keyword_occurrences(text: str, keyword: str) -> int:
    """Case-insensitive, non-overlapping substring count."""
    if not text or not keyword:
        return 0
    return text.lower().count(keyword.lower())


def keyword_density(occurrences: int, words: int) -> float:
    if words == 0:
        return 0.0
    return occurrences / words * 100.0


def contains_keyword(text: str | None, keyword: str) -> bool:
    if not text or not keyword:
        return False
    return keyword.lower() in text.lower()


def compute_metrics(text: str) -> TextMetrics:
    text = text or ""
    words = text.split()
    counts, headings = heading_counts(text)
    return TextMetrics(
        word_count=len(words),
        sentence_count=sentence_count(text),
        paragraph_count=paragraph_count(text),
        word_chars=sum(len(w) for w in words),
        heading_count=counts,
        headings=tuple(headings),
        first_paragraph=first_paragraph(text),
    )

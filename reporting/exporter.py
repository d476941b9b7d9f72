"""
Converts analysis results, redirect rules and the 404 log to Pandas
DataFrames and CSV bytes for export.
"""
from __future__ import annotations

import io
from typing import Iterable

import pandas as pd

from models import NotFoundEntry, Priority, RedirectRule, SeoAnalysis, Severity

_SEVERITY_ORDER = {s: i for i, s in enumerate(Severity.ALL)}
_PRIORITY_ORDER = {p: i for i, p in enumerate(Priority.ALL)}


# ── Analysis ───────────────────────────────────────────────────────────────────

def scores_to_df(analysis: SeoAnalysis) -> pd.DataFrame:
    """One row per sub-score plus an Overall row."""
    rows = [
        {"Category": category, "Score": result.score, "Issues": len(result.issues)}
        for category, result in analysis.sub_results.items()
    ]
    rows.append({
        "Category": "Overall",
        "Score": analysis.overall_score.score,
        "Issues": sum(r["Issues"] for r in rows),
    })
    df = pd.DataFrame(rows)
    df["Grade"] = ""
    df.loc[df["Category"] == "Overall", "Grade"] = analysis.overall_score.grade
    return df


def issues_to_df(analysis: SeoAnalysis) -> pd.DataFrame:
    columns = ["Severity", "Category", "Issue", "Description"]
    rows = []
    for category, result in analysis.sub_results.items():
        for issue in result.issues:
            rows.append({
                "Severity":    issue.severity.upper(),
                "Category":    category,
                "Issue":       issue.title,
                "Description": issue.description,
            })

    if not rows:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame(rows, columns=columns)
    df["_sev_order"] = df["Severity"].str.lower().map(_SEVERITY_ORDER)
    df = df.sort_values(["_sev_order", "Category"], kind="stable").drop(columns=["_sev_order"])
    return df.reset_index(drop=True)


def suggestions_to_df(analysis: SeoAnalysis) -> pd.DataFrame:
    columns = ["Priority", "Category", "Suggestion", "Description", "Action"]
    rows = [
        {
            "Priority":    s.priority.capitalize(),
            "Category":    s.category,
            "Suggestion":  s.title,
            "Description": s.description,
            "Action":      s.action or "",
        }
        for s in analysis.suggestions
    ]
    if not rows:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame(rows, columns=columns)
    df["_order"] = df["Priority"].str.lower().map(_PRIORITY_ORDER)
    df = df.sort_values("_order", kind="stable").drop(columns=["_order"])
    return df.reset_index(drop=True)


# ── Redirects ──────────────────────────────────────────────────────────────────

def redirects_to_df(rules: Iterable[RedirectRule]) -> pd.DataFrame:
    rows = [
        {
            "Source":        r.source,
            "Target":        r.target,
            "Status":        r.status_code,
            "Match":         r.match_type,
            "Active":        r.is_active,
            "Hits":          r.hit_count,
            "Last Accessed": r.last_accessed,
        }
        for r in rules
    ]
    if not rows:
        return pd.DataFrame(columns=["Source", "Target", "Status", "Match", "Active", "Hits", "Last Accessed"])
    return pd.DataFrame(rows).sort_values("Hits", ascending=False, kind="stable").reset_index(drop=True)


def not_found_to_df(entries: Iterable[NotFoundEntry]) -> pd.DataFrame:
    rows = [
        {
            "URL":        e.url,
            "Hits":       e.hit_count,
            "First Seen": e.first_seen,
            "Last Seen":  e.last_seen,
            "Redirected": e.has_redirect,
            "Ignored":    e.is_ignored,
            "Referrer":   e.referrer or "",
        }
        for e in entries
    ]
    if not rows:
        return pd.DataFrame(columns=["URL", "Hits", "First Seen", "Last Seen", "Redirected", "Ignored", "Referrer"])
    return pd.DataFrame(rows).sort_values("Hits", ascending=False, kind="stable").reset_index(drop=True)


# ── CSV export ─────────────────────────────────────────────────────────────────

def to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")

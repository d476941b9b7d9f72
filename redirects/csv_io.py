"""
CSV import/export of redirect rules.

Import format, one rule per line:  source,target[,type]
  - blank lines and lines starting with '#' are skipped
  - surrounding double quotes are trimmed from source and target
  - type is a status code or keyword (301/permanent, 302/temporary, 307,
    308, 410/gone); anything else means 301
  - a header row "source,target,..." is skipped
Bad lines are reported by line number and the import carries on.
"""
from __future__ import annotations

import csv
import io
from typing import Iterable

import pandas as pd

from models import ImportResult, MatchType, RedirectRule, RedirectType
from config import CSV_EXPORT_HEADER

_EXPORT_COLUMNS = CSV_EXPORT_HEADER.split(",")


def parse_type_code(code: str) -> int:
    return RedirectType.CSV_CODES.get(code.strip().lower(), RedirectType.PERMANENT)


def _is_header(source: str, target: str) -> bool:
    return source.lower() == "source" and target.lower() == "target"


def parse_redirect_csv(
    text: str,
    existing_sources: Iterable[str] = (),
) -> tuple[list[RedirectRule], ImportResult]:
    """
    Parse CSV text into new active rules.
    Sources already in `existing_sources`, or earlier in the same file, are
    rejected as duplicates.
    """
    seen = set(existing_sources)
    rules: list[RedirectRule] = []
    errors: list[str] = []
    skipped = 0

    for line_num, raw_line in enumerate((text or "").splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split(",")
        if len(parts) < 2:
            errors.append(f"Line {line_num}: Invalid format")
            skipped += 1
            continue

        source = parts[0].strip().strip('"')
        target = parts[1].strip().strip('"')

        if not rules and not errors and _is_header(source, target):
            continue

        if source in seen:
            errors.append(f"Line {line_num}: Duplicate source URL")
            skipped += 1
            continue

        redirect_type = parse_type_code(parts[2]) if len(parts) > 2 else RedirectType.PERMANENT
        seen.add(source)
        rules.append(RedirectRule(
            source=source,
            target=target,
            redirect_type=redirect_type,
            match_type=MatchType.EXACT,
        ))

    return rules, ImportResult(imported=len(rules), skipped=skipped, errors=errors)


def redirects_frame(rules: Iterable[RedirectRule]) -> pd.DataFrame:
    rows = [
        {"source": r.source, "target": r.target, "type": int(r.status_code)}
        for r in rules
    ]
    if not rows:
        return pd.DataFrame(columns=_EXPORT_COLUMNS)
    return pd.DataFrame(rows, columns=_EXPORT_COLUMNS)


def export_redirects_csv(rules: Iterable[RedirectRule]) -> str:
    """Header row, then one `"source","target",code` line per rule."""
    buf = io.StringIO()
    buf.write(CSV_EXPORT_HEADER + "\n")
    df = redirects_frame(rules)
    if not df.empty:
        df.to_csv(
            buf,
            index=False,
            header=False,
            quoting=csv.QUOTE_NONNUMERIC,
            lineterminator="\n",
        )
    return buf.getvalue()

"""
Regex helpers for redirect rules.

Rule targets use `$1`, `${1}` and `${name}` capture references (the format
rules are stored and exported in); they are expanded here rather than
through `re` templates so backslashes in targets stay literal.
"""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Optional

logger = logging.getLogger(__name__)

_GROUP_REF_RE = re.compile(r"\$(?:\$|\{(\w+)\}|(\d+))")


@lru_cache(maxsize=512)
def compile_pattern(pattern: str, ignore_case: bool = False) -> Optional[re.Pattern]:
    """Compile a rule pattern; invalid patterns yield None and never match."""
    try:
        return re.compile(pattern, re.IGNORECASE if ignore_case else 0)
    except re.error as exc:
        logger.warning("Invalid redirect pattern %r: %s", pattern, exc)
        return None


def is_valid_pattern(pattern: str) -> bool:
    return compile_pattern(pattern) is not None


def expand_template(template: str, match: re.Match) -> str:
    """Substitute capture references; unknown groups expand to ''."""

    def _group(ref: re.Match) -> str:
        name, number = ref.group(1), ref.group(2)
        if name is None and number is None:
            return "$"
        key = int(number) if number is not None else (int(name) if name.isdigit() else name)
        try:
            return match.group(key) or ""
        except IndexError:
            return ""

    return _GROUP_REF_RE.sub(_group, template)


def substitute(pattern: re.Pattern, url: str, template: str) -> str:
    """Replace the first match of `pattern` in `url` with the expanded template."""
    return pattern.sub(lambda m: expand_template(template, m), url, count=1)

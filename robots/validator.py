"""
Robots document validation: problems are collected, never raised.
"""
from __future__ import annotations

from models import RobotsDocument, ValidationResult


def validate_robots(doc: RobotsDocument) -> ValidationResult:
    errors: list[str] = []
    warnings: list[str] = []

    if not doc.rules:
        warnings.append("No user-agent rules defined")

    for block in doc.rules:
        if not block.user_agent:
            errors.append("Empty user-agent found")

        # Same path in Allow and Disallow: warning only
        for path in block.allow:
            if path in block.disallow:
                warnings.append(
                    f"Conflicting rules for path '{path}' in {block.user_agent or '(empty)'}"
                )

    for sitemap in doc.sitemaps:
        if not sitemap.startswith(("http://", "https://")):
            errors.append(f"Invalid sitemap URL: {sitemap}")

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)

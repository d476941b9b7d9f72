"""
Parses robots.txt text into a RobotsDocument and serialises it back.
"""
from __future__ import annotations

from typing import Optional

from models import RobotsDocument, RobotsRuleBlock


def parse_robots(text: str) -> RobotsDocument:
    """
    Line-oriented parse. `User-agent` opens a new block; `Allow`/`Disallow`
    attach to the open block (ignored before the first block); `Crawl-delay`
    attaches to the open block or, before any block, to the document;
    `Sitemap` is document-wide. Unknown directives are ignored.
    """
    doc = RobotsDocument()
    current: Optional[RobotsRuleBlock] = None

    for raw_line in (text or "").splitlines():
        line = raw_line.strip()

        # Skip blank lines and comments
        if not line or line.startswith("#"):
            continue

        if ":" not in line:
            continue

        directive, _, value = line.partition(":")
        directive = directive.strip().lower()
        value = value.strip()

        if directive == "user-agent":
            if current is not None:
                doc.rules.append(current)
            current = RobotsRuleBlock(user_agent=value)

        elif directive == "allow":
            if current is not None:
                current.allow.append(value)

        elif directive == "disallow":
            if current is not None:
                current.disallow.append(value)

        elif directive == "crawl-delay":
            delay = _parse_delay(value)
            if delay is None:
                continue
            if current is not None:
                current.crawl_delay = delay
            else:
                doc.crawl_delay = delay

        elif directive == "sitemap":
            doc.sitemaps.append(value)

    if current is not None:
        doc.rules.append(current)

    return doc


def _parse_delay(value: str) -> Optional[int]:
    return int(value) if value.isascii() and value.isdigit() else None


def serialize_robots(doc: RobotsDocument) -> str:
    lines: list[str] = []

    # A document-level delay precedes the first block so it parses back
    # as document-level.
    if doc.crawl_delay is not None:
        lines.append(f"Crawl-delay: {doc.crawl_delay}")
        lines.append("")

    for block in doc.rules:
        lines.append(f"User-agent: {block.user_agent}")
        lines.extend(f"Allow: {path}" for path in block.allow)
        lines.extend(f"Disallow: {path}" for path in block.disallow)
        if block.crawl_delay is not None:
            lines.append(f"Crawl-delay: {block.crawl_delay}")
        lines.append("")

    lines.extend(f"Sitemap: {url}" for url in doc.sitemaps)

    content = "\n".join(lines)
    if lines:
        content += "\n"

    if doc.custom_content:
        content += "\n" + doc.custom_content + "\n"

    return content

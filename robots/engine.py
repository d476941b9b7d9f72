"""
Robots.txt service: builds the site's robots.txt from settings and answers
crawl-permission queries against the currently published document.

The published document is private: `load()` parses new text into a fresh
document and rebinds the reference, so in-flight queries keep the snapshot
they started with, and callers only ever receive copies.
"""
from __future__ import annotations

import copy
import logging
from typing import Optional

from models import RobotsDocument, RobotsRuleBlock, RobotsTxtSettings, ValidationResult
from config import AI_CRAWLERS, DEFAULT_DISALLOW_PATHS, SITEMAP_INDEX_PATH
from robots.parser import parse_robots, serialize_robots
from robots.rules import WILDCARD_AGENT, is_allowed
from robots.validator import validate_robots

logger = logging.getLogger(__name__)


def default_document(site_url: str, include_sitemap: bool = True) -> RobotsDocument:
    """Allow everything except admin, account, cart and search areas."""
    doc = RobotsDocument(rules=[
        RobotsRuleBlock(
            user_agent=WILDCARD_AGENT,
            allow=["/"],
            disallow=list(DEFAULT_DISALLOW_PATHS),
        ),
    ])
    if include_sitemap:
        doc.add_sitemap(site_url.rstrip("/") + SITEMAP_INDEX_PATH)
    return doc


def meta_robots_tag(index: bool, follow: bool) -> str:
    directives = ", ".join([
        "index" if index else "noindex",
        "follow" if follow else "nofollow",
    ])
    return f'<meta name="robots" content="{directives}">'


class RobotsEngine:

    def __init__(self, site_url: str, settings: Optional[RobotsTxtSettings] = None):
        self.site_url = site_url.rstrip("/")
        self.settings = settings or RobotsTxtSettings()
        self._document = self.build_document()

    @property
    def document(self) -> RobotsDocument:
        """A copy of the published document."""
        return copy.deepcopy(self._document)

    # ── Generation ─────────────────────────────────────────────────────────────

    def build_document(self) -> RobotsDocument:
        if not self.settings.enabled:
            return RobotsDocument()

        doc = default_document(self.site_url, self.settings.include_sitemap)

        if self.settings.block_ai_crawlers:
            for crawler in AI_CRAWLERS:
                doc.rules.append(RobotsRuleBlock(user_agent=crawler, disallow=["/"]))

        if self.settings.custom_rules:
            doc.custom_content = self.settings.custom_rules

        return doc

    def generate(self) -> str:
        if not self.settings.enabled:
            return ""
        return serialize_robots(self._document)

    # ── Publishing ─────────────────────────────────────────────────────────────

    def load(self, text: str) -> RobotsDocument:
        """Parse `text` and publish it as the current document."""
        doc = parse_robots(text)
        self._document = doc
        logger.info(
            "Loaded robots.txt: %d rule block(s), %d sitemap(s)",
            len(doc.rules), len(doc.sitemaps),
        )
        return self.document

    def reset(self) -> RobotsDocument:
        """Republish the document generated from settings."""
        self._document = self.build_document()
        return self.document

    # ── Queries ────────────────────────────────────────────────────────────────

    def is_allowed(self, path: str, user_agent: str = WILDCARD_AGENT) -> bool:
        return is_allowed(self._document, path, user_agent)

    def validate(self, text: Optional[str] = None) -> ValidationResult:
        doc = parse_robots(text) if text is not None else self._document
        return validate_robots(doc)

    def sitemap_url(self) -> Optional[str]:
        sitemaps = self._document.sitemaps
        return sitemaps[0] if sitemaps else None

    @staticmethod
    def meta_tag(index: bool = True, follow: bool = True) -> str:
        return meta_robots_tag(index, follow)

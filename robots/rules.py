"""
Allow/disallow decisions against a parsed RobotsDocument.

Precedence is allow-first: any matching Allow prefix permits the path before
Disallow prefixes are consulted. This is simpler than the longest-match rule
of RFC 9309; see DESIGN.md.
"""
from __future__ import annotations

from typing import Optional

from models import RobotsDocument, RobotsRuleBlock

WILDCARD_AGENT = "*"


def select_block(doc: RobotsDocument, user_agent: str) -> Optional[RobotsRuleBlock]:
    """First block naming `user_agent` exactly, else the first `*` block."""
    for block in doc.rules:
        if block.user_agent == user_agent:
            return block
    for block in doc.rules:
        if block.user_agent == WILDCARD_AGENT:
            return block
    return None


def is_allowed(doc: RobotsDocument, path: str, user_agent: str = WILDCARD_AGENT) -> bool:
    block = select_block(doc, user_agent)
    if block is None:
        return True

    for allow in block.allow:
        if path.startswith(allow):
            return True

    for disallow in block.disallow:
        # Empty Disallow: means "nothing is disallowed"
        if not disallow:
            continue
        if path.startswith(disallow):
            return False

    return True

"""
Redirect rule matching, hit bookkeeping, 404 tracking and chain resolution.

Rules are evaluated in insertion order and the first active match wins, so
callers that need priorities must order their rules accordingly.

Concurrency: one RLock serialises every mutation of the rule list, the hit
counters and the 404 map. The rule list is replaced (never edited in place)
on insert/remove, so lookups read a consistent snapshot without the lock.
"""
from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Iterable, Optional

from models import (
    ChainResult,
    ImportResult,
    MatchType,
    NotFoundEntry,
    RedirectHop,
    RedirectResult,
    RedirectRule,
    RedirectSettings,
    RedirectStats,
    RedirectType,
)
from config import TOP_404_LIMIT
from redirects.csv_io import export_redirects_csv, parse_redirect_csv
from redirects.patterns import compile_pattern, substitute

logger = logging.getLogger(__name__)


class RedirectMatcher:

    def __init__(
        self,
        settings: Optional[RedirectSettings] = None,
        rules: Optional[Iterable[RedirectRule]] = None,
    ):
        self.settings = settings or RedirectSettings()
        self._rules: list[RedirectRule] = list(rules or [])
        self._not_found: dict[str, NotFoundEntry] = {}
        self._lock = threading.RLock()

    # ── Rule set ───────────────────────────────────────────────────────────────

    @property
    def rules(self) -> list[RedirectRule]:
        return list(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def add_rule(self, rule: RedirectRule) -> RedirectRule:
        with self._lock:
            self._rules = self._rules + [rule]
        return rule

    def add_redirect(
        self,
        source: str,
        target: str,
        redirect_type: int = RedirectType.PERMANENT,
        match_type: str = MatchType.EXACT,
    ) -> RedirectRule:
        return self.add_rule(RedirectRule(
            source=source,
            target=target,
            redirect_type=redirect_type,
            match_type=match_type,
        ))

    def get_rule(self, rule_id: str) -> Optional[RedirectRule]:
        for rule in self._rules:
            if rule.id == rule_id:
                return rule
        return None

    def remove_rule(self, rule_id: str) -> bool:
        with self._lock:
            remaining = [r for r in self._rules if r.id != rule_id]
            if len(remaining) == len(self._rules):
                return False
            self._rules = remaining
            return True

    def update_rule(
        self,
        rule_id: str,
        source: Optional[str] = None,
        target: Optional[str] = None,
        redirect_type: Optional[int] = None,
    ) -> bool:
        with self._lock:
            rule = self.get_rule(rule_id)
            if rule is None:
                return False
            if source is not None:
                rule.source = source
            if target is not None:
                rule.target = target
            if redirect_type is not None:
                rule.redirect_type = redirect_type
            rule.updated_at = datetime.now()
            return True

    def set_active(self, rule_id: str, active: bool) -> bool:
        with self._lock:
            rule = self.get_rule(rule_id)
            if rule is None:
                return False
            rule.is_active = active
            rule.updated_at = datetime.now()
            return True

    # ── Matching ───────────────────────────────────────────────────────────────

    def normalize(self, url: str) -> str:
        url = (url or "").strip()
        return url.lower() if self.settings.case_insensitive else url

    def rule_matches(self, rule: RedirectRule, url: str) -> bool:
        if not rule.is_active:
            return False

        if rule.match_type == MatchType.REGEX:
            pattern = compile_pattern(rule.source, self.settings.case_insensitive)
            return pattern is not None and pattern.search(url) is not None

        candidate = self.normalize(url)
        source = self.normalize(rule.source)

        if rule.match_type == MatchType.EXACT:
            return candidate == source
        if rule.match_type == MatchType.PREFIX:
            return candidate.startswith(source)
        if rule.match_type == MatchType.CONTAINS:
            return source in candidate
        return False

    def find_match(self, url: str) -> Optional[RedirectRule]:
        for rule in self._rules:
            if self.rule_matches(rule, url):
                return rule
        return None

    def resolve_target(self, rule: RedirectRule, url: str) -> str:
        if rule.match_type == MatchType.REGEX:
            pattern = compile_pattern(rule.source, self.settings.case_insensitive)
            if pattern is not None:
                return substitute(pattern, url, rule.target)
        return rule.target

    def record_hit(self, rule: RedirectRule) -> None:
        with self._lock:
            rule.hit_count += 1
            rule.last_accessed = datetime.now()

    def process(self, url: str) -> Optional[RedirectResult]:
        """Match `url`, count the hit and return where to send the client."""
        rule = self.find_match(url)
        if rule is None:
            return None

        target = self.resolve_target(rule, url)
        self.record_hit(rule)
        logger.debug("Redirect %s -> %s [%d]", url, target, rule.status_code)
        return RedirectResult(target_url=target, status_code=rule.status_code, rule_id=rule.id)

    # ── Chains ─────────────────────────────────────────────────────────────────

    def test_url(self, url: str) -> ChainResult:
        """
        Follow the redirect chain starting at `url` without recording hits.
        Stops when nothing matches, when a URL repeats (loop), or when another
        hop would exceed `max_redirect_chain` (suspected loop).
        """
        max_hops = self.settings.max_redirect_chain
        hops: list[RedirectHop] = []
        seen = {self.normalize(url)}
        current = url

        while True:
            rule = self.find_match(current)
            if rule is None:
                return ChainResult(url=url, hops=hops)

            if len(hops) >= max_hops:
                logger.info("Redirect chain from %s exceeds %d hops", url, max_hops)
                return ChainResult(url=url, hops=hops, is_loop=True, exceeded_max=True)

            target = self.resolve_target(rule, current)
            hops.append(RedirectHop(
                source=current,
                target=target,
                status_code=rule.status_code,
                rule_id=rule.id,
            ))

            if rule.redirect_type in RedirectType.TERMINAL:
                return ChainResult(url=url, hops=hops)

            key = self.normalize(target)
            if key in seen:
                logger.info("Redirect loop detected from %s at %s", url, target)
                return ChainResult(url=url, hops=hops, is_loop=True)
            seen.add(key)
            current = target

    # ── 404 log ────────────────────────────────────────────────────────────────

    def log_404(
        self,
        url: str,
        referrer: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Optional[NotFoundEntry]:
        if not self.settings.log_404s:
            return None

        key = self.normalize(url)
        with self._lock:
            entry = self._not_found.get(key)
            if entry is not None:
                entry.hit_count += 1
                entry.last_seen = datetime.now()
            else:
                entry = NotFoundEntry(url=key, referrer=referrer, user_agent=user_agent)
                self._not_found[key] = entry
            return entry

    def get_404(self, url: str) -> Optional[NotFoundEntry]:
        return self._not_found.get(self.normalize(url))

    def ignore_404(self, url: str) -> bool:
        with self._lock:
            entry = self._not_found.get(self.normalize(url))
            if entry is None:
                return False
            entry.is_ignored = True
            return True

    def top_404s(self, limit: int = TOP_404_LIMIT) -> list[NotFoundEntry]:
        with self._lock:
            entries = [e for e in self._not_found.values() if not e.is_ignored]
        entries.sort(key=lambda e: e.hit_count, reverse=True)
        return entries[:limit]

    def create_redirect_from_404(self, url: str, target: str) -> RedirectRule:
        """Add a permanent redirect for a logged 404 and flag the log entry."""
        with self._lock:
            rule = self.add_redirect(url, target, RedirectType.PERMANENT)
            entry = self._not_found.get(self.normalize(url))
            if entry is not None:
                entry.has_redirect = True
        return rule

    # ── Import / export ────────────────────────────────────────────────────────

    def import_csv(self, text: str) -> ImportResult:
        with self._lock:
            existing = {rule.source for rule in self._rules}
            new_rules, result = parse_redirect_csv(text, existing)
            self._rules = self._rules + new_rules

        logger.info(
            "Imported %d redirect(s), skipped %d", result.imported, result.skipped,
        )
        return result

    def export_csv(self) -> str:
        return export_redirects_csv(self._rules)

    # ── Statistics ─────────────────────────────────────────────────────────────

    def stats(self, limit: int = TOP_404_LIMIT) -> RedirectStats:
        with self._lock:
            rules = list(self._rules)
            entries = list(self._not_found.values())

        top = sorted(rules, key=lambda r: r.hit_count, reverse=True)[:limit]
        recent = sorted(entries, key=lambda e: e.last_seen, reverse=True)[:limit]
        return RedirectStats(
            total_redirects=len(rules),
            active_redirects=sum(1 for r in rules if r.is_active),
            total_hits=sum(r.hit_count for r in rules),
            top_redirects=top,
            recent_404s=recent,
        )

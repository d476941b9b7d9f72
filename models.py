"""
Core data models for the SEO engine.
All packages import from here; nothing else is cross-imported at this level.

Analysis inputs and results are frozen and hold tuples, never lists: the
engine builds them once per call and callers may share or hash them.
Redirect rules and 404 entries are mutable and are only touched under the
matcher's lock.
"""

import uuid
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Optional

from config import (
    MAX_KEYWORD_DENSITY,
    MAX_REDIRECT_CHAIN_LENGTH,
    MIN_WORD_COUNT,
    TARGET_KEYWORD_DENSITY,
)


def _freeze_sequences(record) -> None:
    """Replace list fields of a frozen dataclass with tuples."""
    for f in fields(record):
        value = getattr(record, f.name)
        if isinstance(value, list):
            object.__setattr__(record, f.name, tuple(value))


# ── Enumerations ───────────────────────────────────────────────────────────────
class Severity:
    ERROR   = "error"
    WARNING = "warning"
    INFO    = "info"
    SUCCESS = "success"

    ALL = [ERROR, WARNING, INFO, SUCCESS]

    COLORS = {
        ERROR:   "#dc3232",
        WARNING: "#ffb900",
        INFO:    "#0073aa",
        SUCCESS: "#00a32a",
    }


class Priority:
    HIGH   = "high"
    MEDIUM = "medium"
    LOW    = "low"

    ALL = [HIGH, MEDIUM, LOW]


class Grade:
    EXCELLENT = "Excellent"
    GOOD      = "Good"
    FAIR      = "Fair"
    POOR      = "Poor"
    BAD       = "Bad"

    ALL = [EXCELLENT, GOOD, FAIR, POOR, BAD]

    COLORS = {
        EXCELLENT: "#00a32a",
        GOOD:      "#7ad03a",
        FAIR:      "#ffb900",
        POOR:      "#dc3232",
        BAD:       "#8b0000",
    }


class RedirectType:
    """Redirect kinds, valued by the HTTP status code they answer with."""
    PERMANENT          = 301
    TEMPORARY          = 302
    TEMPORARY_PRESERVE = 307
    PERMANENT_PRESERVE = 308
    GONE               = 410
    LEGAL_RESTRICTION  = 451

    ALL = [PERMANENT, TEMPORARY, TEMPORARY_PRESERVE, PERMANENT_PRESERVE, GONE, LEGAL_RESTRICTION]

    # Kinds that answer without a Location header
    TERMINAL = [GONE, LEGAL_RESTRICTION]

    DESCRIPTIONS = {
        PERMANENT:          "301 Moved Permanently",
        TEMPORARY:          "302 Found (Temporary)",
        TEMPORARY_PRESERVE: "307 Temporary Redirect",
        PERMANENT_PRESERVE: "308 Permanent Redirect",
        GONE:               "410 Gone",
        LEGAL_RESTRICTION:  "451 Unavailable for Legal Reasons",
    }

    # CSV type codes; anything unlisted falls back to PERMANENT
    CSV_CODES = {
        "301": PERMANENT,
        "permanent": PERMANENT,
        "302": TEMPORARY,
        "temporary": TEMPORARY,
        "307": TEMPORARY_PRESERVE,
        "308": PERMANENT_PRESERVE,
        "410": GONE,
        "gone": GONE,
    }


class MatchType:
    EXACT    = "exact"
    PREFIX   = "prefix"
    CONTAINS = "contains"
    REGEX    = "regex"

    ALL = [EXACT, PREFIX, CONTAINS, REGEX]


# ── Settings ───────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class AnalysisSettings:
    min_word_count: int = MIN_WORD_COUNT
    target_keyword_density: float = TARGET_KEYWORD_DENSITY
    max_keyword_density: float = MAX_KEYWORD_DENSITY


@dataclass(frozen=True)
class RedirectSettings:
    case_insensitive: bool = True
    log_404s: bool = True
    max_redirect_chain: int = MAX_REDIRECT_CHAIN_LENGTH

    def __post_init__(self):
        if self.max_redirect_chain < 1:
            raise ValueError(f"max_redirect_chain must be at least 1, got {self.max_redirect_chain}")


@dataclass(frozen=True)
class RobotsTxtSettings:
    enabled: bool = True
    include_sitemap: bool = True
    block_ai_crawlers: bool = False
    custom_rules: str = ""


# ── Analysis input ─────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ImageInput:
    src: str
    alt: Optional[str] = None


@dataclass(frozen=True)
class AnalysisInput:
    title: str = ""
    meta_description: Optional[str] = None
    content: str = ""
    url: str = ""
    focus_keyword: Optional[str] = None
    headings: tuple[str, ...] = ()

    # Links
    internal_links: int = 0
    external_links: int = 0
    nofollow_links: int = 0
    broken_links: tuple[str, ...] = ()

    # Images
    images: tuple[ImageInput, ...] = ()
    large_images: tuple[str, ...] = ()

    # Technical signals
    has_canonical: bool = False
    has_robots_meta: bool = False
    has_open_graph: bool = False
    has_twitter_card: bool = False
    has_schema: bool = False
    page_load_time: Optional[float] = None
    mobile_friendly: bool = False

    def __post_init__(self):
        _freeze_sequences(self)


# ── Text metrics ───────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class HeadingCount:
    h1: int = 0
    h2: int = 0
    h3: int = 0
    h4: int = 0
    h5: int = 0
    h6: int = 0


@dataclass(frozen=True)
class TextMetrics:
    word_count: int = 0
    sentence_count: int = 1
    paragraph_count: int = 0
    word_chars: int = 0
    heading_count: HeadingCount = field(default_factory=HeadingCount)
    headings: tuple[Heading, ...] = ()
    first_paragraph: str = ""

    def __post_init__(self):
        _freeze_sequences(self)


# ── Analysis results ───────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Issue:
    severity: str          # Severity.ERROR / WARNING / INFO / SUCCESS
    title: str
    description: str


@dataclass(frozen=True)
class SubScoreResult:
    score: int = 100
    issues: tuple[Issue, ...] = ()

    def __post_init__(self):
        _freeze_sequences(self)


@dataclass(frozen=True)
class TitleAnalysis(SubScoreResult):
    title: str = ""
    length: int = 0
    has_focus_keyword: bool = False
    keyword_position: Optional[int] = None


@dataclass(frozen=True)
class MetaAnalysis(SubScoreResult):
    description: Optional[str] = None
    length: int = 0
    has_focus_keyword: bool = False


@dataclass(frozen=True)
class ContentAnalysis(SubScoreResult):
    word_count: int = 0
    paragraph_count: int = 0
    sentence_count: int = 0
    heading_count: HeadingCount = field(default_factory=HeadingCount)
    has_h1: bool = False


@dataclass(frozen=True)
class KeywordAnalysis(SubScoreResult):
    focus_keyword: Optional[str] = None
    keyword_count: int = 0
    keyword_density: float = 0.0
    in_first_paragraph: bool = False
    in_headings: bool = False
    in_url: bool = False


@dataclass(frozen=True)
class ReadabilityAnalysis(SubScoreResult):
    flesch_reading_ease: float = 0.0
    flesch_kincaid_grade: float = 0.0
    avg_sentence_length: float = 0.0
    avg_word_length: float = 0.0
    passive_voice_percentage: float = 0.0
    transition_word_percentage: float = 0.0


@dataclass(frozen=True)
class LinkAnalysis(SubScoreResult):
    internal_links: int = 0
    external_links: int = 0
    broken_links: tuple[str, ...] = ()
    nofollow_links: int = 0


@dataclass(frozen=True)
class ImageAnalysis(SubScoreResult):
    total_images: int = 0
    images_with_alt: int = 0
    images_with_keyword: int = 0
    large_images: tuple[str, ...] = ()


@dataclass(frozen=True)
class TechnicalAnalysis(SubScoreResult):
    has_canonical: bool = False
    has_robots_meta: bool = False
    has_open_graph: bool = False
    has_twitter_card: bool = False
    has_schema: bool = False
    page_load_time: Optional[float] = None
    mobile_friendly: bool = False


@dataclass(frozen=True)
class SeoScore:
    score: int
    grade: str

    @property
    def color(self) -> str:
        return Grade.COLORS[self.grade]


@dataclass(frozen=True)
class SeoSuggestion:
    category: str
    priority: str          # Priority.HIGH / MEDIUM / LOW
    title: str
    description: str
    action: Optional[str] = None


# ── Top-level analysis result ──────────────────────────────────────────────────
@dataclass(frozen=True)
class SeoAnalysis:
    content_id: str
    overall_score: SeoScore
    title_analysis: TitleAnalysis
    meta_analysis: MetaAnalysis
    content_analysis: ContentAnalysis
    keyword_analysis: KeywordAnalysis
    readability_analysis: ReadabilityAnalysis
    link_analysis: LinkAnalysis
    image_analysis: ImageAnalysis
    technical_analysis: TechnicalAnalysis
    suggestions: tuple[SeoSuggestion, ...] = ()
    analyzed_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        _freeze_sequences(self)

    @property
    def sub_results(self) -> dict[str, SubScoreResult]:
        """Sub-results keyed by category, in scoring order."""
        return {
            "Title": self.title_analysis,
            "Meta Description": self.meta_analysis,
            "Content": self.content_analysis,
            "Keywords": self.keyword_analysis,
            "Readability": self.readability_analysis,
            "Links": self.link_analysis,
            "Images": self.image_analysis,
            "Technical": self.technical_analysis,
        }

    @property
    def issues_by_severity(self) -> dict[str, list[Issue]]:
        out: dict[str, list[Issue]] = {s: [] for s in Severity.ALL}
        for result in self.sub_results.values():
            for issue in result.issues:
                out.setdefault(issue.severity, []).append(issue)
        return out


# ── Redirects ──────────────────────────────────────────────────────────────────
@dataclass
class RedirectRule:
    source: str
    target: str
    redirect_type: int = RedirectType.PERMANENT
    match_type: str = MatchType.EXACT
    is_active: bool = True
    hit_count: int = 0
    last_accessed: Optional[datetime] = None
    notes: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def status_code(self) -> int:
        return self.redirect_type

    @property
    def description(self) -> str:
        return RedirectType.DESCRIPTIONS.get(self.redirect_type, str(self.redirect_type))


@dataclass
class NotFoundEntry:
    url: str
    referrer: Optional[str] = None
    user_agent: Optional[str] = None
    hit_count: int = 1
    first_seen: datetime = field(default_factory=datetime.now)
    last_seen: datetime = field(default_factory=datetime.now)
    has_redirect: bool = False
    is_ignored: bool = False


@dataclass(frozen=True)
class RedirectResult:
    target_url: str
    status_code: int
    rule_id: str


@dataclass(frozen=True)
class RedirectHop:
    source: str
    target: str
    status_code: int
    rule_id: str


@dataclass(frozen=True)
class ChainResult:
    url: str
    hops: tuple[RedirectHop, ...] = ()
    is_loop: bool = False
    exceeded_max: bool = False

    def __post_init__(self):
        _freeze_sequences(self)

    @property
    def matches(self) -> bool:
        return bool(self.hops)

    @property
    def final_url(self) -> str:
        return self.hops[-1].target if self.hops else self.url

    @property
    def chain(self) -> list[str]:
        return [self.url] + [hop.target for hop in self.hops]


@dataclass(frozen=True)
class ImportResult:
    imported: int = 0
    skipped: int = 0
    errors: tuple[str, ...] = ()

    def __post_init__(self):
        _freeze_sequences(self)


@dataclass(frozen=True)
class RedirectStats:
    total_redirects: int = 0
    active_redirects: int = 0
    total_hits: int = 0
    top_redirects: tuple[RedirectRule, ...] = ()
    recent_404s: tuple[NotFoundEntry, ...] = ()

    def __post_init__(self):
        _freeze_sequences(self)


# ── Robots ─────────────────────────────────────────────────────────────────────
@dataclass
class RobotsRuleBlock:
    user_agent: str
    allow: list[str] = field(default_factory=list)
    disallow: list[str] = field(default_factory=list)
    crawl_delay: Optional[int] = None


@dataclass
class RobotsDocument:
    rules: list[RobotsRuleBlock] = field(default_factory=list)
    sitemaps: list[str] = field(default_factory=list)
    crawl_delay: Optional[int] = None
    custom_content: Optional[str] = None

    def add_sitemap(self, url: str) -> None:
        if url not in self.sitemaps:
            self.sitemaps.append(url)


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def __post_init__(self):
        _freeze_sequences(self)

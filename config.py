"""
Global configuration constants for the SEO engine.
All tunable thresholds live here; the settings dataclasses in models.py
take their defaults from this module.
"""

# ── Title thresholds ──────────────────────────────────────────────────────────
TITLE_MIN_CHARS = 30
TITLE_MAX_CHARS = 60
TITLE_KEYWORD_MAX_POSITION = 20   # index after which the keyword is "late"

# ── Meta description thresholds ───────────────────────────────────────────────
DESCRIPTION_MIN_CHARS = 120
DESCRIPTION_MAX_CHARS = 160

# ── Content thresholds ────────────────────────────────────────────────────────
MIN_WORD_COUNT = 300
SUBHEADING_WORD_THRESHOLD = 300   # longer content is expected to use H2s

# ── Keyword thresholds (percent of words) ─────────────────────────────────────
TARGET_KEYWORD_DENSITY = 2.0
MAX_KEYWORD_DENSITY = 3.0

# ── Link thresholds ───────────────────────────────────────────────────────────
FEW_INTERNAL_LINKS = 3

# ── Readability ───────────────────────────────────────────────────────────────
LONG_SENTENCE_WORDS = 25.0
FLESCH_VERY_DIFFICULT = 30.0
FLESCH_FAIRLY_DIFFICULT = 50.0
PASSIVE_VOICE_MAX_PCT = 20.0
TRANSITION_WORDS_MIN_PCT = 20.0
TRANSITION_MIN_SENTENCES = 3

# Lexical markers; changing these changes every readability score.
PASSIVE_VOICE_MARKERS = ["was ", "were ", "been ", "being ", "is being", "are being"]
TRANSITION_WORDS = [
    "however", "therefore", "moreover", "furthermore", "additionally",
    "consequently", "meanwhile", "nevertheless", "also", "first", "second", "finally",
]

# ── Grade breakpoints (lower bound → grade) ───────────────────────────────────
GRADE_BREAKPOINTS: list[tuple[int, str]] = [
    (90, "Excellent"),
    (70, "Good"),
    (50, "Fair"),
    (30, "Poor"),
]
LOWEST_GRADE = "Bad"

# ── Redirects ─────────────────────────────────────────────────────────────────
MAX_REDIRECT_CHAIN_LENGTH = 5
TOP_404_LIMIT = 10
CSV_EXPORT_HEADER = "source,target,type"

# ── Robots ────────────────────────────────────────────────────────────────────
SITEMAP_INDEX_PATH = "/sitemap_index.xml"

DEFAULT_DISALLOW_PATHS = [
    "/wp-admin/",
    "/admin/",
    "/api/",
    "/login",
    "/register",
    "/*?*",
    "/search",
    "/checkout",
    "/cart",
    "/my-account",
]

AI_CRAWLERS = [
    "GPTBot",
    "ChatGPT-User",
    "Claude-Web",
    "CCBot",
    "anthropic-ai",
    "Google-Extended",
    "Amazonbot",
    "Bytespider",
    "FacebookBot",
]

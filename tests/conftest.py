"""
Shared fixtures for the SEO engine tests.
"""
import pytest

from analyzers.orchestrator import AnalysisEngine
from models import AnalysisInput, AnalysisSettings, ImageInput, RedirectSettings
from redirects.matcher import RedirectMatcher

KEYWORD_SENTENCE = "Also, widgets help you save time at home."
FILLER_SENTENCE = "Also, a good tool can make daily tasks much easier."


def _optimized_content(paragraphs: int = 7) -> str:
    """
    H1 + H2 followed by paragraphs of one keyword sentence and four filler
    sentences: 344 words, 9 keyword hits (~2.6% density), 35 sentences.
    """
    blocks = ["# Blue Widgets Guide", "## Why choose widgets"]
    paragraph = " ".join([KEYWORD_SENTENCE] + [FILLER_SENTENCE] * 4)
    blocks.extend([paragraph] * paragraphs)
    return "\n\n".join(blocks)


@pytest.fixture
def settings():
    return AnalysisSettings()


@pytest.fixture
def engine(settings):
    return AnalysisEngine(settings)


@pytest.fixture
def optimized_content():
    return _optimized_content()


@pytest.fixture
def optimized_input(optimized_content):
    """An input every sub-scorer rates 100."""
    return AnalysisInput(
        title="Blue Widgets: A Complete Buying Guide",
        meta_description=(
            "Learn how to choose blue widgets for your home with our complete buying guide, "
            "covering sizes, materials, prices and the best brands to trust."
        ),
        content=optimized_content,
        url="https://example.com/blue-widgets",
        focus_keyword="widgets",
        headings=["Blue Widgets Guide", "Why choose widgets"],
        internal_links=5,
        external_links=2,
        images=[ImageInput(src="/img/blue.jpg", alt="Blue widgets on a shelf")],
        has_canonical=True,
        has_robots_meta=True,
        has_open_graph=True,
        has_twitter_card=True,
        has_schema=True,
        page_load_time=1.2,
        mobile_friendly=True,
    )


@pytest.fixture
def empty_input():
    return AnalysisInput()


@pytest.fixture
def matcher():
    return RedirectMatcher(RedirectSettings())


@pytest.fixture
def sample_robots_txt():
    return (
        "# Example robots file\n"
        "User-agent: *\n"
        "Allow: /public\n"
        "Disallow: /admin/\n"
        "Disallow: /private\n"
        "Crawl-delay: 5\n"
        "\n"
        "User-agent: Googlebot\n"
        "Disallow: /no-google\n"
        "\n"
        "Sitemap: https://example.com/sitemap_index.xml\n"
    )

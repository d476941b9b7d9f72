"""
Builds an AnalysisInput from a rendered HTML page.

Body text is rendered block by block with Markdown heading markers
("# ", "## ", ...) so the analyzers' heading counts work the same for HTML
and Markdown sources. Nothing here fetches anything: broken links, oversized
images and load times are supplied by the caller.
"""
from __future__ import annotations

import json
import logging
from typing import Iterable, Optional
from urllib.parse import urljoin, urlparse

import tldextract
from bs4 import BeautifulSoup, FeatureNotFound, Tag

from models import AnalysisInput, ImageInput

logger = logging.getLogger(__name__)

# Offline extractor: bundled public-suffix snapshot, no network, no disk cache
_tld = tldextract.TLDExtract(cache_dir=None, suffix_list_urls=())

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_BLOCK_TAGS = _HEADING_TAGS + ["p", "li", "blockquote", "pre", "td", "dd", "figcaption"]
_NOISE_TAGS = ["script", "style", "noscript", "template", "nav", "footer"]


def build_input_from_html(
    html: str,
    url: str,
    site_domain: str = "",
    focus_keyword: Optional[str] = None,
    broken_links: Iterable[str] = (),
    large_images: Iterable[str] = (),
    page_load_time: Optional[float] = None,
) -> AnalysisInput:
    """
    Parse `html` (served at `url`) into an AnalysisInput.
    `site_domain` decides which links are internal; it defaults to the host of `url`.
    """
    soup = _make_soup(html or "")
    base_url = _resolve_base_url(soup, url)
    site = site_domain or urlparse(url).netloc

    meta = _parse_meta(soup)
    og, twitter = _parse_social(soup)
    internal, external, nofollow = _count_links(soup, base_url, site)
    images = _parse_images(soup, base_url)
    has_schema = _has_json_ld(soup)
    # Headings and body text come from the page without scripts and chrome
    _strip_noise(soup)
    headings = _parse_headings(soup)
    content = _render_text(soup)

    return AnalysisInput(
        title=_parse_title(soup),
        meta_description=meta.get("description") or None,
        content=content,
        url=url,
        focus_keyword=focus_keyword,
        headings=tuple(headings),
        internal_links=internal,
        external_links=external,
        nofollow_links=nofollow,
        broken_links=tuple(broken_links),
        images=tuple(images),
        large_images=tuple(large_images),
        has_canonical=_find_link_rel(soup, "canonical") is not None,
        has_robots_meta="robots" in meta,
        has_open_graph=bool(og),
        has_twitter_card=bool(twitter),
        has_schema=has_schema,
        page_load_time=page_load_time,
        mobile_friendly="viewport" in meta,
    )


def _make_soup(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "lxml")
    except FeatureNotFound:
        logger.debug("lxml unavailable, falling back to html.parser")
        return BeautifulSoup(html, "html.parser")


def _resolve_base_url(soup: BeautifulSoup, fallback: str) -> str:
    base_tag = soup.find("base", href=True)
    if base_tag:
        return urljoin(fallback, base_tag["href"])
    return fallback


# ── Meta ──────────────────────────────────────────────────────────────────────

def _parse_title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    return title_tag.get_text(strip=True) if title_tag else ""


def _parse_meta(soup: BeautifulSoup) -> dict[str, str]:
    meta: dict[str, str] = {}
    for tag in soup.find_all("meta"):
        name = (tag.get("name") or "").lower().strip()
        if name in ("description", "robots", "viewport"):
            meta[name] = (tag.get("content") or "").strip()
    return meta


def _find_link_rel(soup: BeautifulSoup, rel: str) -> Optional[Tag]:
    return soup.find("link", rel=lambda r: r and rel in (r if isinstance(r, list) else [r]))


def _parse_social(soup: BeautifulSoup) -> tuple[dict[str, str], dict[str, str]]:
    og: dict[str, str] = {}
    twitter: dict[str, str] = {}
    for meta in soup.find_all("meta"):
        prop = (meta.get("property") or "").lower()
        name = (meta.get("name") or "").lower()
        content = meta.get("content") or ""

        if prop.startswith("og:"):
            og[prop] = content
        elif prop.startswith("twitter:") or name.startswith("twitter:"):
            twitter[prop or name] = content
    return og, twitter


def _has_json_ld(soup: BeautifulSoup) -> bool:
    for script in soup.find_all("script", type="application/ld+json"):
        try:
            if json.loads(script.string or ""):
                return True
        except json.JSONDecodeError as exc:
            logger.debug("Ignoring invalid JSON-LD block: %s", exc)
    return False


# ── Headings & text ───────────────────────────────────────────────────────────

def _strip_noise(soup: BeautifulSoup) -> None:
    for tag in soup.find_all(_NOISE_TAGS):
        tag.decompose()


def _parse_headings(soup: BeautifulSoup) -> list[str]:
    headings = []
    for tag in soup.find_all(_HEADING_TAGS):
        text = tag.get_text(" ", strip=True)
        if text:
            headings.append(text)
    return headings


def _render_text(soup: BeautifulSoup) -> str:
    """Body text as blank-line separated blocks, headings prefixed with '#'."""
    root = soup.find("body") or soup

    blocks: list[str] = []
    for tag in root.find_all(_BLOCK_TAGS):
        # Nested blocks (a <p> inside an <li>) are rendered by their outer block
        if tag.find_parent(_BLOCK_TAGS) is not None:
            continue
        text = " ".join(tag.get_text(" ", strip=True).split())
        if not text:
            continue
        if tag.name in _HEADING_TAGS:
            text = "#" * int(tag.name[1]) + " " + text
        blocks.append(text)

    if not blocks:
        return " ".join(root.get_text(" ", strip=True).split())
    return "\n\n".join(blocks)


# ── Links ─────────────────────────────────────────────────────────────────────

def _count_links(soup: BeautifulSoup, base_url: str, site_domain: str) -> tuple[int, int, int]:
    internal = external = nofollow = 0
    seen: set[str] = set()

    for a_tag in soup.find_all("a", href=True):
        href = a_tag.get("href", "").strip()
        if not href or href.startswith(("mailto:", "tel:", "javascript:", "#")):
            continue

        abs_url = urljoin(base_url, href).split("#", 1)[0]
        if abs_url in seen:
            continue
        seen.add(abs_url)

        rel = a_tag.get("rel") or []
        if isinstance(rel, str):
            rel = rel.split()
        if "nofollow" in (r.lower() for r in rel):
            nofollow += 1

        parsed = urlparse(abs_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            continue
        if _is_internal(parsed.netloc, site_domain):
            internal += 1
        else:
            external += 1

    return internal, external, nofollow


def _is_internal(netloc: str, site_domain: str) -> bool:
    ext = _tld(netloc)
    site = _tld(site_domain)
    if not ext.suffix or not site.suffix:
        return netloc.lower() == site_domain.lower()
    return (ext.domain, ext.suffix) == (site.domain, site.suffix)


# ── Images ────────────────────────────────────────────────────────────────────

def _parse_images(soup: BeautifulSoup, base_url: str) -> list[ImageInput]:
    images = []
    for img in soup.find_all("img"):
        src = (img.get("src") or "").strip()
        if not src or src.startswith("data:"):
            continue
        alt = img.get("alt")
        images.append(ImageInput(src=urljoin(base_url, src), alt=alt.strip() if alt is not None else None))
    return images

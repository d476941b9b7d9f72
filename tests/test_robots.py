"""
Unit tests for robots.txt parsing, serialisation, permission checks,
validation and generation.
"""
import pytest

import config
from config import AI_CRAWLERS
from models import RobotsDocument, RobotsRuleBlock, RobotsTxtSettings
from robots.engine import RobotsEngine, default_document, meta_robots_tag
from robots.parser import parse_robots, serialize_robots
from robots.rules import is_allowed, select_block
from robots.validator import validate_robots


class TestParse:

    def test_blocks_and_sitemaps(self, sample_robots_txt):
        doc = parse_robots(sample_robots_txt)

        assert [b.user_agent for b in doc.rules] == ["*", "Googlebot"]
        star = doc.rules[0]
        assert star.allow == ["/public"]
        assert star.disallow == ["/admin/", "/private"]
        assert star.crawl_delay == 5
        assert doc.rules[1].crawl_delay is None
        assert doc.sitemaps == ["https://example.com/sitemap_index.xml"]
        assert doc.crawl_delay is None

    def test_directives_are_case_insensitive(self):
        doc = parse_robots("USER-AGENT: Bot\nDISALLOW: /x\nsItEmAp: https://e.com/s.xml")
        assert doc.rules[0].user_agent == "Bot"
        assert doc.rules[0].disallow == ["/x"]
        assert doc.sitemaps == ["https://e.com/s.xml"]

    def test_rules_before_first_block_are_ignored(self):
        doc = parse_robots("Allow: /a\nDisallow: /b\nUser-agent: *\nDisallow: /c")
        assert len(doc.rules) == 1
        assert doc.rules[0].allow == []
        assert doc.rules[0].disallow == ["/c"]

    def test_document_level_crawl_delay(self):
        doc = parse_robots("Crawl-delay: 10\nUser-agent: *\nDisallow: /x")
        assert doc.crawl_delay == 10
        assert doc.rules[0].crawl_delay is None

    def test_unparseable_crawl_delay_is_ignored(self):
        doc = parse_robots("User-agent: *\nCrawl-delay: soon\nCrawl-delay: -1")
        assert doc.rules[0].crawl_delay is None

    def test_unknown_and_malformed_lines(self):
        doc = parse_robots("User-agent: *\nHost: example.com\nnot a directive\nDisallow: /x")
        assert doc.rules[0].disallow == ["/x"]

    def test_value_keeps_later_colons(self):
        doc = parse_robots("Sitemap: https://example.com:8080/sitemap.xml")
        assert doc.sitemaps == ["https://example.com:8080/sitemap.xml"]

    def test_empty_text(self):
        doc = parse_robots("")
        assert doc.rules == []
        assert doc.sitemaps == []


class TestSerialize:

    def test_layout(self, sample_robots_txt):
        text = serialize_robots(parse_robots(sample_robots_txt))
        assert text == (
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

    @pytest.mark.parametrize("text", [
        "User-agent: *\nAllow: /public\nDisallow: /admin/\n",
        "Crawl-delay: 10\nUser-agent: *\nDisallow: /x\nSitemap: https://e.com/a.xml\n",
        "User-agent: *\nDisallow:\n\nUser-agent: BadBot\nDisallow: /\nCrawl-delay: 30\n",
    ])
    def test_round_trip_is_stable(self, text):
        doc = parse_robots(text)
        reparsed = parse_robots(serialize_robots(doc))

        assert reparsed == doc
        assert serialize_robots(reparsed) == serialize_robots(doc)

    def test_custom_content_is_appended(self):
        doc = RobotsDocument(rules=[RobotsRuleBlock("*", disallow=["/x"])], custom_content="# hello")
        assert serialize_robots(doc).endswith("Disallow: /x\n\n\n# hello\n")

    def test_empty_document(self):
        assert serialize_robots(RobotsDocument()) == ""


class TestIsAllowed:

    def test_allow_checked_before_disallow(self):
        doc = RobotsDocument(rules=[RobotsRuleBlock("*", allow=["/public"], disallow=["/"])])
        assert is_allowed(doc, "/public/x", "*") is True
        assert is_allowed(doc, "/other", "*") is False

    def test_prefix_matching(self, sample_robots_txt):
        doc = parse_robots(sample_robots_txt)
        assert is_allowed(doc, "/admin/settings") is False
        assert is_allowed(doc, "/privateer") is False
        assert is_allowed(doc, "/blog/post") is True

    def test_exact_agent_block_is_used(self, sample_robots_txt):
        doc = parse_robots(sample_robots_txt)
        assert is_allowed(doc, "/admin/settings", "Googlebot") is True
        assert is_allowed(doc, "/no-google/page", "Googlebot") is False

    def test_wildcard_fallback(self, sample_robots_txt):
        doc = parse_robots(sample_robots_txt)
        assert select_block(doc, "Bingbot").user_agent == "*"
        assert is_allowed(doc, "/admin/", "Bingbot") is False

    def test_no_matching_block_allows(self):
        doc = parse_robots("User-agent: Googlebot\nDisallow: /")
        assert select_block(doc, "Bingbot") is None
        assert is_allowed(doc, "/anything", "Bingbot") is True

    def test_empty_disallow_blocks_nothing(self):
        doc = parse_robots("User-agent: *\nDisallow:")
        assert is_allowed(doc, "/anything") is True


class TestValidate:

    def test_valid_document(self, sample_robots_txt):
        result = validate_robots(parse_robots(sample_robots_txt))
        assert result.valid
        assert result.errors == ()
        assert result.warnings == ()

    def test_no_rules_is_only_a_warning(self):
        result = validate_robots(RobotsDocument())
        assert result.valid
        assert result.warnings == ("No user-agent rules defined",)

    def test_empty_user_agent(self):
        result = validate_robots(parse_robots("User-agent:\nDisallow: /"))
        assert not result.valid
        assert result.errors == ("Empty user-agent found",)

    def test_conflicting_paths_warn(self):
        result = validate_robots(parse_robots("User-agent: *\nAllow: /x\nDisallow: /x"))
        assert result.valid
        assert result.warnings == ("Conflicting rules for path '/x' in *",)

    def test_bad_sitemap_url(self):
        result = validate_robots(parse_robots("User-agent: *\nSitemap: /sitemap.xml"))
        assert not result.valid
        assert result.errors == ("Invalid sitemap URL: /sitemap.xml",)


class TestRobotsEngine:

    def test_default_generation(self):
        text = RobotsEngine("https://example.com/").generate()

        assert text.startswith("User-agent: *\nAllow: /\n")
        assert "Disallow: /wp-admin/\n" in text
        assert "Disallow: /my-account\n" in text
        assert text.endswith("Sitemap: https://example.com/sitemap_index.xml\n")

    def test_without_sitemap(self):
        engine = RobotsEngine("https://example.com", RobotsTxtSettings(include_sitemap=False))
        assert "Sitemap:" not in engine.generate()
        assert engine.sitemap_url() is None

    def test_block_ai_crawlers(self):
        engine = RobotsEngine("https://example.com", RobotsTxtSettings(block_ai_crawlers=True))

        assert "User-agent: GPTBot\nDisallow: /\n" in engine.generate()
        assert engine.is_allowed("/blog/post", "GPTBot") is False
        assert engine.is_allowed("/blog/post", "Googlebot") is True

    def test_bot_lists_in_config(self):
        engine = RobotsEngine("https://example.com", RobotsTxtSettings(block_ai_crawlers=True))
        agents = [block.user_agent for block in engine.document.rules]

        assert agents == ["*"] + AI_CRAWLERS
        assert not hasattr(config, "COMMON_BOTS")

    def test_custom_rules(self):
        engine = RobotsEngine("https://example.com", RobotsTxtSettings(custom_rules="# Custom\nUser-agent: X"))
        assert engine.generate().endswith("\n# Custom\nUser-agent: X\n")

    def test_disabled(self):
        engine = RobotsEngine("https://example.com", RobotsTxtSettings(enabled=False))
        assert engine.generate() == ""
        assert engine.document.rules == []
        assert engine.is_allowed("/admin/") is True

    def test_load_swaps_document(self, sample_robots_txt):
        engine = RobotsEngine("https://example.com")
        before = engine.document

        engine.load(sample_robots_txt)

        assert engine.document is not before
        assert before.rules[0].allow == ["/"]
        assert engine.is_allowed("/private/x") is False
        assert engine.sitemap_url() == "https://example.com/sitemap_index.xml"

        engine.reset()
        assert engine.document.rules[0].allow == ["/"]

    def test_returned_documents_are_copies(self, sample_robots_txt):
        engine = RobotsEngine("https://example.com")
        served = engine.generate()

        doc = engine.document
        doc.rules.clear()
        doc.sitemaps.append("https://evil.example/sitemap.xml")
        assert engine.generate() == served

        loaded = engine.load(sample_robots_txt)
        loaded.rules[0].disallow.clear()
        assert engine.is_allowed("/private/x") is False
        assert engine.document == parse_robots(sample_robots_txt)

    def test_validate(self):
        engine = RobotsEngine("https://example.com")
        assert engine.validate().valid
        assert not engine.validate("User-agent: *\nSitemap: nope").valid

    def test_default_document_trims_slash(self):
        doc = default_document("https://example.com///")
        assert doc.sitemaps == ["https://example.com/sitemap_index.xml"]

    @pytest.mark.parametrize("index, follow, content", [
        (True, True, "index, follow"),
        (True, False, "index, nofollow"),
        (False, True, "noindex, follow"),
        (False, False, "noindex, nofollow"),
    ])
    def test_meta_tag(self, index, follow, content):
        assert meta_robots_tag(index, follow) == f'<meta name="robots" content="{content}">'
        assert RobotsEngine.meta_tag(index, follow) == meta_robots_tag(index, follow)

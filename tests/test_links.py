"""Tests for chunkwise.services.links."""

from chunkwise.services.links import discover_links, matches_patterns, normalise_url

_BASE = "https://example.com/docs/intro"

_HTML = """
<html><body>
  <a href="/docs/setup">Setup</a>
  <a href="usage">Usage</a>
  <a href="/docs/setup#install">Setup again</a>
  <a href="https://example.com/blog/post">Blog</a>
  <a href="https://other.com/page">Elsewhere</a>
  <a href="#top">Top</a>
  <a href="mailto:team@example.com">Mail</a>
  <a href="javascript:void(0)">Nothing</a>
  <a href="ftp://example.com/file">FTP</a>
  <a>No href</a>
</body></html>
"""


class TestNormaliseUrl:
    def test_strips_fragment(self):
        assert normalise_url("https://example.com/page#section") == "https://example.com/page"

    def test_keeps_query(self):
        assert normalise_url("https://example.com/page?a=1#x") == "https://example.com/page?a=1"


class TestMatchesPatterns:
    def test_glob_match(self):
        assert matches_patterns("https://example.com/docs/a/b", ["https://example.com/docs/*"])

    def test_no_match(self):
        assert not matches_patterns("https://example.com/blog", ["https://example.com/docs/*"])

    def test_any_pattern_is_enough(self):
        assert matches_patterns("https://example.com/blog/x", ["*/docs/*", "*/blog/*"])


class TestDiscoverLinks:
    def test_same_host_links_in_document_order(self):
        assert discover_links(_HTML, _BASE) == [
            "https://example.com/docs/setup",
            "https://example.com/docs/usage",
            "https://example.com/blog/post",
        ]

    def test_patterns_restrict_links(self):
        links = discover_links(_HTML, _BASE, ["https://example.com/blog/*"])
        assert links == ["https://example.com/blog/post"]

    def test_empty_patterns_do_not_filter(self):
        assert discover_links(_HTML, _BASE, []) == discover_links(_HTML, _BASE)

    def test_respects_base_href(self):
        html = '<html><head><base href="https://example.com/v2/"></head><body><a href="page">P</a></body></html>'
        assert discover_links(html, _BASE) == ["https://example.com/v2/page"]

    def test_no_links(self):
        assert discover_links("<html><body><p>Nothing</p></body></html>", _BASE) == []

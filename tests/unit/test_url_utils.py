"""URL 유틸리티 테스트"""
import pytest

from search_scraper.utils.url_utils import encode_query_component, has_scheme, normalize_href, prefix_origin


class TestEncodeQueryComponent:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("climate change", "climate%20change"),
            ("a&b=c", "a%26b%3Dc"),
            ("it's (fine)!", "it's%20(fine)!"),
            ("한글", "%ED%95%9C%EA%B8%80"),
            ("", ""),
        ],
    )
    def test_matches_encode_uri_component(self, value, expected):
        assert encode_query_component(value) == expected


class TestPrefixOrigin:
    def test_relative_href(self):
        assert prefix_origin("/watch?v=1", "https://www.youtube.com") == "https://www.youtube.com/watch?v=1"

    def test_absolute_href_untouched(self):
        assert prefix_origin("https://x.test/a", "https://www.youtube.com") == "https://x.test/a"

    def test_empty_href_stays_empty(self):
        assert prefix_origin("", "https://www.youtube.com") == ""

    def test_origin_trailing_slash(self):
        assert prefix_origin("/1/", "https://pubmed.ncbi.nlm.nih.gov/") == "https://pubmed.ncbi.nlm.nih.gov/1/"


class TestNormalizeHref:
    def test_protocol_relative(self):
        assert normalize_href("//cdn.test/a") == "https://cdn.test/a"

    def test_relative_against_base(self):
        assert normalize_href("/l/?u=1", "https://duckduckgo.com/?q=x") == "https://duckduckgo.com/l/?u=1"

    def test_blank(self):
        assert normalize_href("   ") == ""


def test_has_scheme():
    assert has_scheme("https://a.test")
    assert has_scheme("mailto:x@y.test")
    assert not has_scheme("/path")
    assert not has_scheme("")

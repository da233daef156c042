# tests/test_normalize.py
import pytest
from urlcounter.normalize import InvalidURL, normalize_url, split_scheme_and_host, top_level_domain


def test_split_scheme_and_host_drops_path_query_fragment():
    assert split_scheme_and_host("https://example.com/a/b?q=1#frag") == ("https", "example.com")


def test_split_scheme_and_host_no_case_folding_or_port_handling():
    assert split_scheme_and_host("HTTP://Example.COM:8080/x") == ("HTTP", "Example.COM:8080")


def test_normalize_url_truncation_order():
    # fragment before query, and query before fragment, both end the host
    assert normalize_url("https://example.com#frag?q=1") == "https://example.com"
    assert normalize_url("https://example.com?q=1#frag") == "https://example.com"
    assert normalize_url("https://example.com?next=/path") == "https://example.com"


def test_normalize_url_empty_query():
    assert normalize_url("https://example.com?") == "https://example.com"


def test_normalize_url_idempotent():
    u = "https://sub.example.com"
    assert normalize_url(u) == u
    assert normalize_url(normalize_url("https://sub.example.com/x?y#z")) == u


def test_normalize_url_splits_on_first_separator_only():
    assert split_scheme_and_host("https://example.com/redirect?to=http://other.com") == ("https", "example.com")


def test_invalid_url_without_scheme_separator():
    with pytest.raises(InvalidURL) as exc:
        normalize_url("example.com/path")
    assert exc.value.url == "example.com/path"
    assert isinstance(exc.value, ValueError)


def test_invalid_url_empty_string():
    with pytest.raises(InvalidURL):
        split_scheme_and_host("")


def test_top_level_domain():
    assert top_level_domain("https://example.com") == "example.com"
    assert top_level_domain("https://subdomain.example.com/path") == "example.com"
    assert top_level_domain("http://a.b.c.example.com?q=1") == "example.com"


def test_top_level_domain_non_com_host():
    # only ".com" is understood; other hosts keep their last label
    assert top_level_domain("https://example.org") == "org.com"


def test_top_level_domain_cuts_at_first_com():
    assert top_level_domain("https://example.com.evil.net") == "example.com"
    assert top_level_domain("https://example.com:8443/") == "example.com"
    assert top_level_domain("https://a.community.com") == "a.com"


def test_top_level_domain_invalid():
    with pytest.raises(InvalidURL):
        top_level_domain("not a url")

# tests/test_utils.py
import pytest

from tinylink import utils


def test_generate_short_code():
    code = utils.generate_short_code()
    assert len(code) == 7
    assert set(code) <= set("abcdefghijklmnopqrstuvwxyz0123456789")


@pytest.mark.parametrize("url", [
    "https://example.com",
    "http://localhost:3000/path?x=1#frag",
    "HTTPS://EXAMPLE.COM",
    "ftp://files.example.com/a.txt",
    "mailto:someone@example.com",
])
def test_valid_urls(url):
    assert utils.is_valid_url(url)


@pytest.mark.parametrize("url", [
    "",
    None,
    "not a url",
    "example.com",
    "/relative/path",
    "http://",
    "https://exa mple.com",
    "http://[::1",
    "http:example.com",
    42,
])
def test_invalid_urls(url):
    assert not utils.is_valid_url(url)


@pytest.mark.parametrize("stored, expected", [
    ("https://example.com", "https://example.com"),
    ("http://example.com", "http://example.com"),
    ("HtTpS://example.com", "HtTpS://example.com"),
    ("ftp://example.com", "https://ftp://example.com"),
    ("www.example.com:80", "https://www.example.com:80"),
])
def test_normalize_redirect_url(stored, expected):
    assert utils.normalize_redirect_url(stored) == expected


@pytest.mark.parametrize("code, expected", [
    ("abc123", True),
    ("abcdefgh", True),
    ("abc123\n", False),
    ("\nabc123", False),
    ("abc12", False),
    (1234567, False),
])
def test_is_valid_code(code, expected):
    assert utils.is_valid_code(code) is expected

# tinylink/utils.py
import re
import secrets
from urllib.parse import urlsplit

from .config import CODE_ALPHABET, CODE_LENGTH, CODE_PATTERN

_code_re = re.compile(CODE_PATTERN)
_scheme_re = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_http_prefix_re = re.compile(r"^https?://", re.IGNORECASE)


def generate_short_code(length: int = CODE_LENGTH) -> str:
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))


def is_valid_code(code: str) -> bool:
    return isinstance(code, str) and bool(_code_re.fullmatch(code))


def is_valid_url(url: str) -> bool:
    """Absolute URL check: a scheme and something after it, a host for http(s)."""
    if not isinstance(url, str) or not url:
        return False
    if any(ch.isspace() or ord(ch) < 32 for ch in url):
        return False
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    if not _scheme_re.match(parts.scheme):
        return False
    if parts.scheme.lower() in ("http", "https"):
        return bool(parts.hostname)
    return bool(parts.netloc or parts.path)


def normalize_redirect_url(url: str) -> str:
    if _http_prefix_re.match(url):
        return url
    return "https://" + url

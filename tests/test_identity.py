# tests/test_identity.py
from starlette.requests import Request
from starlette.responses import Response

from tinylink.config import COOKIE_NAME
from tinylink.identity import remember_identity, resolve_identity


def make_request(cookie=None):
    headers = []
    if cookie is not None:
        headers.append((b"cookie", cookie.encode()))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def test_presented_token_is_returned_unchanged():
    identity = resolve_identity(make_request(f"{COOKIE_NAME}=abc-123"))
    assert identity.owner_id == "abc-123"
    assert identity.issued is False


def test_missing_token_is_issued():
    first = resolve_identity(make_request())
    second = resolve_identity(make_request("other=1"))
    assert first.issued and second.issued
    assert first.owner_id != second.owner_id


def test_empty_token_is_issued():
    identity = resolve_identity(make_request(f"{COOKIE_NAME}="))
    assert identity.issued
    assert identity.owner_id


def test_remember_identity_sets_cookie():
    identity = resolve_identity(make_request())
    response = Response()
    remember_identity(response, identity)

    header = response.headers["set-cookie"]
    assert header.startswith(f"{COOKIE_NAME}={identity.owner_id};")
    assert "HttpOnly" in header
    assert "Max-Age=31536000" in header
    assert "Path=/" in header
    assert "SameSite=lax" in header

# tinylink/identity.py
"""Anonymous owner identity carried in a client-held cookie.

Nothing is stored server side: whatever token the client presents is the
owner id. A request without one gets a fresh uuid4, and the caller has to
send it back with :func:`remember_identity` so later requests resolve to the
same owner.
"""
import logging
import uuid
from dataclasses import dataclass

from fastapi import Request, Response

from .config import COOKIE_NAME, COOKIE_MAX_AGE

logger = logging.getLogger("tinylink.identity")


@dataclass(frozen=True)
class Identity:
    owner_id: str
    issued: bool = False


def generate_owner_id() -> str:
    return str(uuid.uuid4())


def resolve_identity(request: Request) -> Identity:
    owner_id = request.cookies.get(COOKIE_NAME)
    if owner_id:
        return Identity(owner_id=owner_id)
    identity = Identity(owner_id=generate_owner_id(), issued=True)
    logger.debug("Issued owner id %s", identity.owner_id)
    return identity


def remember_identity(response: Response, identity: Identity) -> None:
    response.set_cookie(
        key=COOKIE_NAME,
        value=identity.owner_id,
        max_age=COOKIE_MAX_AGE,
        path="/",
        httponly=True,
        samesite="lax",
    )

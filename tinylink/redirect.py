# tinylink/redirect.py
import logging

from .errors import LinkNotFound
from .store import LinkStore
from .utils import normalize_redirect_url

logger = logging.getLogger("tinylink.redirect")


def resolve_redirect(store: LinkStore, code: str) -> str:
    """Look up ``code``, count the click and return the URL to redirect to.

    Public path: no ownership check. The click is committed before this
    returns so an immediate stats read sees it.
    """
    link = store.get_by_code(code)
    if link is None:
        raise LinkNotFound()

    target = normalize_redirect_url(link.original_url)
    store.record_click(link.id)
    logger.info("Redirect %s -> %s", code, target)
    return target

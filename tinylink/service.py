# tinylink/service.py
import logging
from typing import List, Optional

from . import models, utils
from .allocator import allocate_code
from .errors import CodeConflict, DuplicateCode, InvalidUrl, NotFoundOrForbidden
from .models import utcnow
from .store import LinkStore

logger = logging.getLogger("tinylink.service")


class LinkService:
    """Owner-scoped link operations.

    ``owner_id`` is always the identity resolved for the current request;
    lookups filter on it in the same query as the code, so a link that
    belongs to someone else looks exactly like a missing one.
    """

    def __init__(self, store: LinkStore):
        self.store = store

    def create(self, owner_id: str, url: Optional[str], code: Optional[str] = None) -> models.Link:
        if not url or not utils.is_valid_url(url):
            raise InvalidUrl()

        final_code = allocate_code(self.store, code)
        link = models.Link(
            code=final_code,
            original_url=url,
            click_count=0,
            created_at=utcnow(),
            last_clicked=None,
            owner_id=owner_id,
        )
        try:
            link = self.store.insert(link)
        except DuplicateCode:
            logger.warning("Lost insert race for code %s", final_code)
            raise CodeConflict()

        logger.info("Created link %s for owner %s", link.code, owner_id)
        return link

    def list(self, owner_id: str) -> List[models.Link]:
        return self.store.list_by_owner(owner_id)

    def get(self, owner_id: str, code: str) -> models.Link:
        link = self.store.get_by_code_and_owner(code, owner_id)
        if link is None:
            raise NotFoundOrForbidden()
        return link

    def delete(self, owner_id: str, code: str) -> None:
        if not self.store.delete_by_code_and_owner(code, owner_id):
            raise NotFoundOrForbidden()
        logger.info("Deleted link %s for owner %s", code, owner_id)

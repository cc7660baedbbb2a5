# tinylink/store.py
import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from . import models
from .errors import DuplicateCode
from .models import utcnow

logger = logging.getLogger("tinylink.store")


class LinkStore:
    """Link persistence on top of a SQLAlchemy session.

    Every mutating call is a single SQL statement followed by a commit, so
    uniqueness and click counting are settled by the database rather than
    by read-modify-write in the application.
    """

    def __init__(self, db: Session):
        self.db = db

    def insert(self, link: models.Link) -> models.Link:
        self.db.add(link)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateCode()
        self.db.refresh(link)
        return link

    def code_exists(self, code: str) -> bool:
        stmt = select(models.Link.id).where(models.Link.code == code)
        return self.db.execute(stmt).first() is not None

    def get_by_code(self, code: str):
        stmt = select(models.Link).where(models.Link.code == code)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_code_and_owner(self, code: str, owner_id: str):
        stmt = select(models.Link).where(
            models.Link.code == code,
            models.Link.owner_id == owner_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_owner(self, owner_id: str):
        stmt = (
            select(models.Link)
            .where(models.Link.owner_id == owner_id)
            .order_by(models.Link.created_at.desc(), models.Link.id.desc())
        )
        return list(self.db.execute(stmt).scalars())

    def delete_by_code_and_owner(self, code: str, owner_id: str) -> bool:
        stmt = delete(models.Link).where(
            models.Link.code == code,
            models.Link.owner_id == owner_id,
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount > 0

    def record_click(self, link_id: int) -> bool:
        stmt = (
            update(models.Link)
            .where(models.Link.id == link_id)
            .values(
                click_count=models.Link.click_count + 1,
                last_clicked=utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self.db.commit()
        if result.rowcount == 0:
            logger.warning("Click for link %s not recorded: row is gone", link_id)
            return False
        return True

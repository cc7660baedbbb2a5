# tinylink/models.py
from sqlalchemy import Column, Integer, String, DateTime, Text
from datetime import datetime, timezone
from .database import Base


def utcnow():
    return datetime.now(timezone.utc)


class Link(Base):
    __tablename__ = "links"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(8), unique=True, index=True, nullable=False)
    original_url = Column(Text, nullable=False)
    click_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    last_clicked = Column(DateTime(timezone=True), nullable=True)
    owner_id = Column(String(255), index=True, nullable=False)

    def __repr__(self):
        return f"<Link {self.code} -> {self.original_url[:50]}>"


class ErrorLog(Base):
    __tablename__ = "error_logs"

    id = Column(Integer, primary_key=True, index=True)
    path = Column(String, nullable=False)
    method = Column(String(10), nullable=False)
    status_code = Column(Integer, nullable=False)
    detail = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

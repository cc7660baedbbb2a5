from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Optional
from datetime import datetime, timezone


class LinkCreate(BaseModel):
    # left untyped: the service answers bad values with 400s, not 422s
    url: Optional[Any] = None
    code: Optional[Any] = None


class LinkInfo(BaseModel):
    id: int
    code: str
    original_url: str
    click_count: int
    created_at: datetime
    last_clicked: Optional[datetime] = None
    owner_id: str

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", "last_clicked")
    @classmethod
    def assume_utc(cls, value):
        # SQLite hands back naive datetimes; everything is stored in UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class Message(BaseModel):
    message: str

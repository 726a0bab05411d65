"""Post-related Pydantic schemas."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostRecord(BaseModel):
    """Stored post, decoupled from the ORM row it was read from."""

    id: str
    created_user_id: str
    discussion_id: str
    content: str
    html_content: str
    is_edited: bool = False
    created_at: datetime
    last_updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @field_validator("created_at", "last_updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # SQLite drops the zone on the way back; stored values are always UTC.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    content: str = Field(..., description="Markdown content")


class PostUpdate(BaseModel):
    """Schema for editing the content of a post."""

    content: str = Field(..., description="Markdown content")


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: str
    created_user_id: str
    discussion_id: str
    content: str
    html_content: str
    is_edited: bool
    created_at: datetime
    last_updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)

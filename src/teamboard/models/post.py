# src/teamboard/models/post.py
"""SQLAlchemy model for discussion posts."""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from teamboard.db.session import Base


def _new_id() -> str:
    return uuid4().hex


class Post(Base):
    """A message written by a team member inside a discussion."""

    __tablename__ = "post"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)
    created_user_id: Mapped[str] = mapped_column(String(64), nullable=False)
    # No foreign key; the discussion is checked when the post is written.
    discussion_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)

    content: Mapped[str] = mapped_column(Text, nullable=False)
    # Always derived from content by the markdown renderer.
    html_content: Mapped[str] = mapped_column(Text, nullable=False)

    is_edited: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    last_updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

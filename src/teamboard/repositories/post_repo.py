"""Data access helpers for working with posts."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from teamboard.models.post import Post
from teamboard.schemas.post import PostRecord

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities.

    Every method returns plain ``PostRecord`` values so callers never hold
    on to session-bound ORM instances.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: str) -> PostRecord | None:
        """Return a post by identifier."""
        post = self.session.get(Post, post_id)
        if post is None:
            return None
        return PostRecord.model_validate(post)

    def list_by_discussion(self, discussion_id: str) -> list[PostRecord]:
        """Return the posts of a discussion, oldest first, ties broken by id."""
        result = self.session.execute(
            select(Post)
            .where(Post.discussion_id == discussion_id)
            .order_by(Post.created_at.asc(), Post.id.asc())
        )
        return [PostRecord.model_validate(post) for post in result.scalars()]

    def create(
        self,
        *,
        created_user_id: str,
        discussion_id: str,
        content: str,
        html_content: str,
        created_at: datetime,
    ) -> PostRecord:
        """Insert a new post and return the persisted record."""
        post = Post(
            created_user_id=created_user_id,
            discussion_id=discussion_id,
            content=content,
            html_content=html_content,
            is_edited=False,
            created_at=created_at,
        )
        self.session.add(post)
        self.session.flush()
        return PostRecord.model_validate(post)

    def update_content(
        self,
        post_id: str,
        *,
        content: str,
        html_content: str,
        updated_at: datetime,
    ) -> PostRecord | None:
        """Replace the content of a post in a single statement.

        Returns the updated record, or None when no row matched ``post_id``.
        """
        result = self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(
                content=content,
                html_content=html_content,
                is_edited=True,
                last_updated_at=updated_at,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            return None
        post = self.session.get(Post, post_id, populate_existing=True)
        return PostRecord.model_validate(post)

    def delete(self, post_id: str) -> bool:
        """Delete a post by identifier, returning whether a row was removed."""
        result = self.session.execute(delete(Post).where(Post.id == post_id))
        self.session.flush()
        return result.rowcount > 0

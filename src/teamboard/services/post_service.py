"""Service-level operations on discussion posts."""
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from sqlalchemy.orm import Session

from teamboard.core.settings import AddPermissionMode, Settings, settings
from teamboard.db.time import utcnow
from teamboard.repositories import DiscussionRepository, PostRepository, TeamRepository
from teamboard.schemas.post import PostRecord
from teamboard.services.errors import InvalidInputError, NotFoundError
from teamboard.services.markdown import RenderOptions, markdown_to_html
from teamboard.services.permissions import DiscussionStore, PermissionChecker, TeamStore

logger = logging.getLogger(__name__)

__all__ = ["PostService", "PostStore", "build_post_service", "render_options_from_settings"]


class PostStore(Protocol):
    def get_by_id(self, post_id: str) -> PostRecord | None: ...
    def list_by_discussion(self, discussion_id: str) -> list[PostRecord]: ...
    def create(
        self,
        *,
        created_user_id: str,
        discussion_id: str,
        content: str,
        html_content: str,
        created_at: datetime,
    ) -> PostRecord: ...
    def update_content(
        self,
        post_id: str,
        *,
        content: str,
        html_content: str,
        updated_at: datetime,
    ) -> PostRecord | None: ...
    def delete(self, post_id: str) -> bool: ...


class PostService:
    """List, create, edit and delete the posts of a discussion.

    Every operation except ``add`` in legacy mode goes through the
    ``PermissionChecker`` before touching the post store.
    """

    def __init__(
        self,
        posts: PostStore,
        discussions: DiscussionStore,
        teams: TeamStore,
        *,
        render_options: RenderOptions | None = None,
        add_permission: AddPermissionMode = AddPermissionMode.LEGACY,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.posts = posts
        self.discussions = discussions
        self.permissions = PermissionChecker(discussions, teams)
        self.render_options = render_options or RenderOptions()
        self.add_permission = add_permission
        self.clock = clock

    def render(self, content: str) -> str:
        """Render ``content`` with this service's markdown options."""
        return markdown_to_html(content, self.render_options)

    def get_list(self, *, user_id: str, discussion_id: str) -> list[PostRecord]:
        """Return the posts of a discussion, oldest first.

        Raises:
            InvalidInputError: If an identifier is empty.
            NotFoundError: If the discussion or its team is missing.
            PermissionDeniedError: If the caller is not a member of both.
        """
        self.permissions.check(user_id, discussion_id)
        return self.posts.list_by_discussion(discussion_id)

    def add(self, *, content: str, user_id: str, discussion_id: str) -> PostRecord:
        """Create a post in a discussion.

        In ``legacy`` mode only the existence of the discussion is verified;
        ``strict`` mode applies the full membership check.
        """
        if not content:
            raise InvalidInputError("Bad data")

        if self.add_permission is AddPermissionMode.STRICT:
            self.permissions.check(user_id, discussion_id)
        else:
            if not user_id or not discussion_id:
                raise InvalidInputError("Bad data")
            if self.discussions.get_by_id(discussion_id) is None:
                raise NotFoundError("Discussion not found")

        post = self.posts.create(
            created_user_id=user_id,
            discussion_id=discussion_id,
            content=content,
            html_content=self.render(content),
            created_at=self.clock(),
        )
        logger.info("User %s added post %s to discussion %s", user_id, post.id, discussion_id)
        return post

    def edit(self, *, content: str, user_id: str, id: str) -> PostRecord:
        """Replace the content of a post owned by the caller."""
        if not content or not id:
            raise InvalidInputError("Bad data")

        post = self._get_existing(id)
        self.permissions.check(user_id, post.discussion_id, post)

        updated = self.posts.update_content(
            id,
            content=content,
            html_content=self.render(content),
            updated_at=self.clock(),
        )
        if updated is None:
            raise NotFoundError("Post not found")

        logger.info("User %s edited post %s", user_id, id)
        return updated

    def delete(self, *, user_id: str, id: str) -> None:
        """Delete a post owned by the caller."""
        if not id:
            raise InvalidInputError("Bad data")

        post = self._get_existing(id)
        self.permissions.check(user_id, post.discussion_id, post)

        self.posts.delete(id)
        logger.info("User %s deleted post %s", user_id, id)

    def _get_existing(self, post_id: str) -> PostRecord:
        post = self.posts.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post


def render_options_from_settings(config: Settings) -> RenderOptions:
    """Build markdown options from application settings."""
    return RenderOptions(
        hard_wrap=config.markdown_hard_wrap,
        escape_html=config.markdown_escape_html,
    )


def build_post_service(db: Session, config: Settings = settings) -> PostService:
    """Wire a ``PostService`` to the SQLAlchemy repositories of ``db``."""
    return PostService(
        PostRepository(db),
        DiscussionRepository(db),
        TeamRepository(db),
        render_options=render_options_from_settings(config),
        add_permission=config.post_add_permission,
    )

"""Team and discussion membership checks shared by the post operations."""
from __future__ import annotations

import logging
from typing import NamedTuple, Protocol

from teamboard.schemas.post import PostRecord
from teamboard.schemas.team import DiscussionRecord, TeamRecord
from teamboard.services.errors import (
    InvalidInputError,
    NotFoundError,
    PermissionDeniedError,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DiscussionStore",
    "PermissionChecker",
    "PermissionGrant",
    "TeamStore",
]


class DiscussionStore(Protocol):
    def get_by_id(self, discussion_id: str) -> DiscussionRecord | None: ...


class TeamStore(Protocol):
    def get_by_id(self, team_id: str) -> TeamRecord | None: ...


class PermissionGrant(NamedTuple):
    """Records loaded while authorizing a caller."""

    team: TeamRecord
    discussion: DiscussionRecord


class PermissionChecker:
    """Confirm a user belongs to a discussion and to the team that owns it."""

    def __init__(self, discussions: DiscussionStore, teams: TeamStore) -> None:
        self.discussions = discussions
        self.teams = teams

    def check(
        self,
        user_id: str,
        discussion_id: str,
        post: PostRecord | None = None,
    ) -> PermissionGrant:
        """Authorize ``user_id`` against ``discussion_id``.

        Args:
            user_id: Identifier of the caller.
            discussion_id: Discussion the caller wants to act on.
            post: When given, the caller must also be its author.

        Returns:
            The discussion and its team.

        Raises:
            InvalidInputError: If ``user_id`` or ``discussion_id`` is empty.
            NotFoundError: If the discussion or its team does not exist.
            PermissionDeniedError: If the caller is not the post author or is
                missing from either member list.
        """
        if not user_id or not discussion_id:
            raise InvalidInputError("Bad data")

        if post is not None and post.created_user_id != user_id:
            logger.warning("User %s is not the author of post %s", user_id, post.id)
            raise PermissionDeniedError("Permission denied")

        discussion = self.discussions.get_by_id(discussion_id)
        if discussion is None:
            raise NotFoundError("Discussion not found")

        if user_id not in discussion.member_ids:
            logger.warning("User %s is not a member of discussion %s", user_id, discussion_id)
            raise PermissionDeniedError("Permission denied")

        team = self.teams.get_by_id(discussion.team_id)
        if team is None:
            raise NotFoundError("Team not found")

        if user_id not in team.member_ids:
            logger.warning("User %s is not a member of team %s", user_id, team.id)
            raise PermissionDeniedError("Permission denied")

        return PermissionGrant(team=team, discussion=discussion)

"""Read access to discussions."""
from __future__ import annotations

from sqlalchemy.orm import Session

from teamboard.models.discussion import Discussion
from teamboard.schemas.team import DiscussionRecord

__all__ = ["DiscussionRepository"]


class DiscussionRepository:
    """Look up discussions and their member lists."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, discussion_id: str) -> DiscussionRecord | None:
        """Return a discussion by identifier."""
        discussion = self.session.get(Discussion, discussion_id)
        if discussion is None:
            return None
        return DiscussionRecord.model_validate(discussion)

"""Read access to teams."""
from __future__ import annotations

from sqlalchemy.orm import Session

from teamboard.models.team import Team
from teamboard.schemas.team import TeamRecord

__all__ = ["TeamRepository"]


class TeamRepository:
    """Look up teams and their member lists."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, team_id: str) -> TeamRecord | None:
        """Return a team by identifier."""
        team = self.session.get(Team, team_id)
        if team is None:
            return None
        return TeamRecord.model_validate(team)

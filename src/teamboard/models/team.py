"""SQLAlchemy models for teams and team membership."""

from uuid import uuid4

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from teamboard.db.session import Base


class Team(Base):
    """Top-level container owning discussions."""

    __tablename__ = "team"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=lambda: uuid4().hex)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, unique=True, nullable=False)

    members: Mapped[list["TeamMember"]] = relationship(
        "TeamMember",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def member_ids(self) -> list[str]:
        """Return the ids of every team member."""
        return [member.user_id for member in self.members]


class TeamMember(Base):
    """Join table mapping users into teams."""

    __tablename__ = "team_member"

    team_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("team.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)

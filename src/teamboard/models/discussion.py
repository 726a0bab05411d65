"""SQLAlchemy models for discussions and discussion membership."""

from uuid import uuid4

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from teamboard.db.session import Base


class Discussion(Base):
    """Thread of posts inside a team, visible to its own member list."""

    __tablename__ = "discussion"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=lambda: uuid4().hex)
    team_id: Mapped[str] = mapped_column(String(32), ForeignKey("team.id"), nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False)

    members: Mapped[list["DiscussionMember"]] = relationship(
        "DiscussionMember",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def member_ids(self) -> list[str]:
        """Return the ids of every discussion member."""
        return [member.user_id for member in self.members]


class DiscussionMember(Base):
    """Join table mapping users into discussions."""

    __tablename__ = "discussion_member"

    discussion_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("discussion.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)

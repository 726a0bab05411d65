"""Read-only records for teams and discussions."""

from pydantic import BaseModel, ConfigDict


class TeamRecord(BaseModel):
    """Team as seen by the posts component."""

    id: str
    slug: str
    member_ids: list[str]

    model_config = ConfigDict(from_attributes=True, frozen=True)


class DiscussionRecord(BaseModel):
    """Discussion as seen by the posts component."""

    id: str
    team_id: str
    slug: str
    member_ids: list[str]

    model_config = ConfigDict(from_attributes=True, frozen=True)

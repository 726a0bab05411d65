# src/teamboard/schemas/__init__.py
"""
Pydantic schemas for records and API request/response models.

Records are the plain structures handed out by the repositories; the
request/response schemas define the shape of API data.
"""

from .post import PostCreate, PostRecord, PostResponse, PostUpdate
from .team import DiscussionRecord, TeamRecord

__all__ = [
    "DiscussionRecord",
    "PostCreate", "PostRecord", "PostResponse", "PostUpdate",
    "TeamRecord",
]

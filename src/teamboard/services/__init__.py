# src/teamboard/services/__init__.py
"""Business logic services for the Teamboard application."""

from .errors import (
    InvalidInputError,
    NotFoundError,
    PermissionDeniedError,
    PostServiceError,
)
from .markdown import RenderOptions, markdown_to_html
from .permissions import PermissionChecker, PermissionGrant
from .post_service import PostService, build_post_service

__all__ = [
    "InvalidInputError",
    "NotFoundError",
    "PermissionChecker",
    "PermissionDeniedError",
    "PermissionGrant",
    "PostService",
    "PostServiceError",
    "RenderOptions",
    "build_post_service",
    "markdown_to_html",
]

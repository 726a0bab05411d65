"""Errors raised by the posts service layer.

The API layer translates these into HTTP responses; nothing below it
catches or retries them.
"""


class PostServiceError(Exception):
    """Base class for failures reported by the posts service."""


class InvalidInputError(PostServiceError, ValueError):
    """A required field is missing or empty."""


class NotFoundError(PostServiceError):
    """A referenced post, discussion or team does not exist."""


class PermissionDeniedError(PostServiceError):
    """The caller is not allowed to perform the operation."""

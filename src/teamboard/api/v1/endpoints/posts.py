# src/teamboard/api/v1/endpoints/posts.py
"""Post-related endpoints for the Teamboard API."""

from collections.abc import Callable
from typing import TypeVar

from fastapi import APIRouter, HTTPException, Response, status
from sqlalchemy.orm import Session

from teamboard.api.v1.dependencies import CurrentUserIdDep, PostServiceDep, SessionDep
from teamboard.schemas.post import PostCreate, PostRecord, PostResponse, PostUpdate
from teamboard.services.errors import (
    InvalidInputError,
    NotFoundError,
    PermissionDeniedError,
    PostServiceError,
)

router = APIRouter(tags=["posts"])

T = TypeVar("T")

_ERROR_STATUS: dict[type[PostServiceError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
}


def _run(db: Session, operation: Callable[[], T]) -> T:
    """Run a service call, committing on success and rolling back on failure."""
    try:
        result = operation()
        db.commit()
    except PostServiceError as exc:
        db.rollback()
        raise HTTPException(
            status_code=_ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST),
            detail=str(exc),
        ) from exc
    return result


@router.get(
    "/discussions/{discussion_id}/posts",
    response_model=list[PostResponse],
    summary="List the posts of a discussion",
)
async def list_posts(
    discussion_id: str,
    user_id: CurrentUserIdDep,
    service: PostServiceDep,
    db: SessionDep,
) -> list[PostRecord]:
    """List posts of a discussion, oldest first.

    Raises:
        HTTPException: 403 if the caller is not a member of the discussion and
            its team, 404 if either does not exist.
    """
    return _run(db, lambda: service.get_list(user_id=user_id, discussion_id=discussion_id))


@router.post(
    "/discussions/{discussion_id}/posts",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new post",
)
async def create_post(
    discussion_id: str,
    payload: PostCreate,
    user_id: CurrentUserIdDep,
    service: PostServiceDep,
    db: SessionDep,
) -> PostRecord:
    """Create a post whose HTML is rendered from the submitted markdown."""
    return _run(
        db,
        lambda: service.add(
            content=payload.content,
            user_id=user_id,
            discussion_id=discussion_id,
        ),
    )


@router.patch(
    "/posts/{post_id}",
    response_model=PostResponse,
    summary="Edit the content of a post",
)
async def edit_post(
    post_id: str,
    payload: PostUpdate,
    user_id: CurrentUserIdDep,
    service: PostServiceDep,
    db: SessionDep,
) -> PostRecord:
    """Replace the content of one of the caller's posts."""
    return _run(db, lambda: service.edit(content=payload.content, user_id=user_id, id=post_id))


@router.delete(
    "/posts/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a post",
)
async def delete_post(
    post_id: str,
    user_id: CurrentUserIdDep,
    service: PostServiceDep,
    db: SessionDep,
) -> Response:
    """Delete one of the caller's posts."""
    _run(db, lambda: service.delete(user_id=user_id, id=post_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from teamboard.core.security import decode_subject
from teamboard.db.session import get_db
from teamboard.services.post_service import PostService, build_post_service

# HTTP Bearer scheme for JWT authentication
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
) -> str:
    """Return the user id carried by the bearer token.

    Raises:
        HTTPException: If the token is invalid or has no subject.
    """
    try:
        subject = decode_subject(credentials.credentials)
    except JWTError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err
    if subject is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )
    return subject


def get_post_service(db: SessionDep) -> PostService:
    """Return a post service bound to the request's database session."""
    return build_post_service(db)


# Type alias for current user dependency
CurrentUserIdDep = Annotated[str, Depends(get_current_user_id)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]

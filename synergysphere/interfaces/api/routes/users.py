"""Endpoints exposing the authenticated identity."""

from fastapi import APIRouter, Depends

from synergysphere.domain.entities import User
from synergysphere.interfaces.api.dependencies import get_current_user
from synergysphere.interfaces.api.schemas import UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    """Return the user resolved from the bearer token."""

    return UserRead.model_validate(current_user)


__all__ = ["router"]

"""Use cases for registering users."""

from sqlalchemy.orm import Session

from synergysphere.domain.entities import User
from synergysphere.domain.exceptions import ValidationFailure
from synergysphere.infrastructure.repositories import UserRepository


def create_user(session: Session, *, email: str, display_name: str | None = None) -> User:
    """Register a user mirrored from the identity provider."""

    email = (email or "").strip()
    if "@" not in email:
        raise ValidationFailure("A valid email address is required", field="email")
    return UserRepository(session).create(
        User(id=None, email=email, display_name=display_name)
    )


__all__ = ["create_user"]

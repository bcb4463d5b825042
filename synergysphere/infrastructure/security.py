"""Bearer token helpers shared with the external identity provider."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from synergysphere.config import get_settings

ALGORITHM = "HS256"


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Sign ``data`` as a JWT; used by development tooling and tests."""

    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=ALGORITHM)


def create_user_token(user_id: int, email: str, expires_delta: timedelta | None = None) -> str:
    """Return a token identifying ``user_id`` the way the identity provider does."""

    return create_access_token({"sub": str(user_id), "email": email}, expires_delta)


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, get_settings().secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc

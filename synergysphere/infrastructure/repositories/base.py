"""Shared helpers for repository implementations."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from synergysphere.domain.exceptions import StoreError

logger = logging.getLogger(__name__)

MAX_ROW_ID = 2**63 - 1


def is_storable_id(value: object) -> bool:
    """Return whether ``value`` can be a primary key of a 64-bit integer column."""

    return type(value) is int and 0 < value <= MAX_ROW_ID


def commit_or_raise(session: Session, *, operation: str) -> None:
    """Commit ``session`` or roll it back and raise :class:`StoreError`.

    A failed commit leaves nothing observable: the transaction is rolled back
    before the error propagates.
    """

    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Database commit failed during %s: %s", operation, exc)
        raise StoreError() from exc


__all__ = ["MAX_ROW_ID", "commit_or_raise", "is_storable_id"]

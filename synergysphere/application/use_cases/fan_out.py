"""Isolation of side-effect writes from the action that triggered them."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_fan_out(session: Session, action: str, callback: Callable[[], T]) -> T | None:
    """Run ``callback`` after a committed primary write.

    A failure is logged and rolled back but never re-raised: the primary
    action already succeeded and stays in effect. Returns ``None`` on failure.
    """

    try:
        return callback()
    except Exception:
        session.rollback()
        logger.exception("Fan-out for %s failed; the primary action was kept", action)
        return None


__all__ = ["run_fan_out"]

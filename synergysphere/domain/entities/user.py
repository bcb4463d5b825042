"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Identity of an application user as known to the collaboration API."""

    id: int | None
    email: str
    display_name: str | None
    created_at: datetime | None = None

    @property
    def label(self) -> str:
        """Name shown to teammates, falling back to the email address."""

        return self.display_name or self.email


__all__ = ["User"]

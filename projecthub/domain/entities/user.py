"""Users: recipients of notifications and reminders, and audited actors."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """An account as seen by the reminder and audit features.

    ``role`` is a free-form label (``admin``, ``manager``, ``developer``...)
    copied onto every activity log row the user produces.
    """

    id: int | None
    name: str
    email: str
    role: str | None = None
    is_active: bool = True
    created_at: datetime | None = None

    def has_role(self, alias: str) -> bool:
        return (self.role or "").lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role("admin")


__all__ = ["User"]

"""
Current-user session.

``UserSession`` holds at most one user record in memory.  Login is a
lookup-or-provision flow against the users table: there is no password or
token check.  Each instance is independent; whoever constructs one owns it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from invasive_tracker.dates import now_iso
from invasive_tracker.schemas import NewUser

if TYPE_CHECKING:
    from invasive_tracker.datasources.tables.accessors import UserTable

logger = logging.getLogger(__name__)


class UserSession:
    """Tracks which user is logged in."""

    def __init__(self, users: UserTable) -> None:
        self.users = users
        self._current: dict[str, Any] | None = None

    @property
    def current_user(self) -> dict[str, Any] | None:
        return self._current

    def get_current_user(self) -> dict[str, Any] | None:
        return self._current

    def authenticate(self, email: str, name: str, user_type: str) -> dict[str, Any]:
        """
        Log in as the user registered under ``email``, creating them if needed.

        An existing user only has ``last_login`` refreshed.  A new user is
        created with the username taken from the email's local part and the
        profile defaults of ``NewUser``.  The resulting record replaces any
        previous session user.

        Raises:
            TrackerError: Any lookup, update or create failure (logged first).
        """
        try:
            found = self.users.list({"search": email, "limit": 1})
            if found.data:
                existing = found.data[0]
                last_login = now_iso()
                self.users.update(existing["id"], {"last_login": last_login})
                user = {**existing, "last_login": last_login}
                logger.info("User %s logged in", existing["id"])
            else:
                profile = NewUser.from_email(email, name, user_type)
                user = self.users.create(profile.model_dump(mode="json"))
                logger.info("Provisioned user %s", profile.username)
        except Exception as exc:
            logger.error("Authentication failed: %s", exc)
            raise

        self._current = user
        return user

    def logout(self) -> None:
        self._current = None

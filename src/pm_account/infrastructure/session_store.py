"""InMemorySessionStore: one browser tab, one signed-in user.

Users persist for the life of the process, so logging back in as the same
username restores the balance. clear() only ends the session.
"""

from src.pm_account.domain.models import User


class InMemorySessionStore:
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._current_username: str | None = None

    def get_current_user(self) -> User | None:
        if self._current_username is None:
            return None
        return self._users.get(self._current_username)

    def persist_user(self, user: User) -> None:
        """Save *user* and make it the signed-in user."""
        self._users[user.username] = user
        self._current_username = user.username

    def clear(self) -> None:
        self._current_username = None

    def find_user(self, username: str) -> User | None:
        return self._users.get(username)

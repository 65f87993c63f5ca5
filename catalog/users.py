"""
In-memory registry of users, keyed by user ID.
"""

from typing import Iterable, Iterator, Optional

from catalog.logger import logger
from catalog.models import User
from catalog.parsing import load_records, parse_user_line, read_lines
from catalog.utils import timed


class UserRegistry:
    def __init__(self):
        self._users: dict[str, User] = {}

    def add(self, user: User) -> bool:
        if user.user_id in self._users:
            return False
        self._users[user.user_id] = user
        return True

    def remove(self, user_id: str) -> bool:
        return self._users.pop(user_id, None) is not None

    def count(self) -> int:
        return len(self._users)

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def clear(self) -> None:
        self._users.clear()

    @timed
    def load_from_file(self, path) -> bool:
        try:
            lines = read_lines(path)
        except OSError as exc:
            logger.error(f"users file {path} could not be read: {exc}")
            return False
        return self.load_lines(lines)

    def load_lines(self, lines: Iterable[str]) -> bool:
        """Replace the registry content with the users described by `lines`."""
        self.clear()
        return load_records(
            lines, parse_user_line, lambda record: self.add(record.to_user()), "users"
        )

    def __len__(self):
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users.values())

    def __contains__(self, user_id: str) -> bool:
        return user_id in self._users

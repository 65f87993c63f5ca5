"""
Viewing log: chronologically ordered viewing events and per-film view counts.
"""

from bisect import insort_right
from typing import Iterable, Iterator, Optional

import numpy as np

from catalog.films import FilmRegistry
from catalog.logger import logger
from catalog.models import Film, User, ViewingEvent
from catalog.parsing import load_records, parse_log_line, read_lines
from catalog.users import UserRegistry
from catalog.utils import timed


def _event_time(event: ViewingEvent) -> str:
    return event.timestamp


class ViewingLog:
    """Viewing events sorted by timestamp, plus the number of views per film.

    Events keep the immutable `User` and `Film` values they were created from,
    removing a film from its registry afterwards does not drop its views here.
    """

    def __init__(self):
        self._events: list[ViewingEvent] = []
        # insertion order is the order of first view, used to break ties
        self._view_counts: dict[Film, int] = {}

    def ingest(
        self,
        timestamp: str,
        user_id: str,
        film_name: str,
        users: UserRegistry,
        films: FilmRegistry,
    ) -> bool:
        """Record a view of `film_name` by `user_id`, if both are known."""
        user = users.find_by_id(user_id)
        film = films.find_by_name(film_name)
        if user is None or film is None:
            missing = []
            if user is None:
                missing.append(f"user {user_id!r}")
            if film is None:
                missing.append(f"film {film_name!r}")
            logger.warning(f"viewing event at {timestamp} discarded, unknown {' and '.join(missing)}")
            return False
        self.add_event(ViewingEvent(timestamp, user, film))
        return True

    def add_event(self, event: ViewingEvent) -> None:
        # equal timestamps keep their arrival order
        insort_right(self._events, event, key=_event_time)
        self._view_counts[event.film] = self._view_counts.get(event.film, 0) + 1

    def view_count(self, film: Film) -> int:
        return self._view_counts.get(film, 0)

    def most_popular(self) -> Optional[Film]:
        if not self._view_counts:
            return None
        return max(self._view_counts, key=self._view_counts.__getitem__)

    def top_n(self, n: int) -> list[tuple[Film, int]]:
        """The `n` most viewed films with their count, most viewed first.

        Films with the same count come in the order they were first viewed.
        """
        if n <= 0 or not self._view_counts:
            return []
        films = list(self._view_counts)
        counts = np.fromiter(self._view_counts.values(), dtype=np.int64, count=len(films))
        top_idx = np.argsort(-counts, kind="stable")[:n]
        return [(films[idx], int(counts[idx])) for idx in top_idx]

    def view_count_for_user(self, user: User) -> int:
        return sum(1 for event in self._events if event.user == user)

    def films_seen_by(self, user: User) -> set[Film]:
        return {event.film for event in self._events if event.user == user}

    def count(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
        self._view_counts.clear()

    @timed
    def load_from_file(self, path, users: UserRegistry, films: FilmRegistry) -> bool:
        try:
            lines = read_lines(path)
        except OSError as exc:
            logger.error(f"logs file {path} could not be read: {exc}")
            return False
        return self.load_lines(lines, users, films)

    def load_lines(self, lines: Iterable[str], users: UserRegistry, films: FilmRegistry) -> bool:
        """Replace every event with the ones described by `lines`."""
        self.clear()
        return load_records(
            lines,
            parse_log_line,
            lambda record: self.ingest(
                record.timestamp, record.user_id, record.film_name, users, films
            ),
            "logs",
        )

    def __len__(self):
        return len(self._events)

    def __iter__(self) -> Iterator[ViewingEvent]:
        return iter(self._events)

"""
Data models and types.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple


class Genre(IntEnum):
    ACTION = 0
    ADVENTURE = 1
    COMEDY = 2
    HORROR = 3
    ROMANCE = 4
    SCIENCE_FICTION = 5

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").capitalize()


class Country(IntEnum):
    BRAZIL = 0
    CANADA = 1
    CHINA = 2
    FRANCE = 3
    JAPAN = 4
    MEXICO = 5
    RUSSIA = 6
    UNITED_KINGDOM = 7
    UNITED_STATES = 8

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class User:
    user_id: str
    name: str
    age: int
    country: Country

    def __str__(self) -> str:
        return f"{self.user_id} - {self.name}, {self.age} years old, {self.country.label}"


@dataclass(frozen=True)
class Film:
    name: str
    genre: Genre
    country: Country
    director: str
    year: int

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.year}), {self.genre.label}, "
            f"{self.country.label}, directed by {self.director}"
        )


class ViewingEvent(NamedTuple):
    timestamp: str
    user: User
    film: Film

    def __str__(self) -> str:
        return f"{self.timestamp} - {self.user.user_id} watched {self.film.name}"

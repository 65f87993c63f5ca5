"""
Parsing of the line-oriented data files.

Every line holds one record, fields are separated by whitespace and values
containing spaces are double-quoted:

    users: id "name" age country_code
    films: "name" genre_code country_code "director" year
    logs:  timestamp user_id "film_name"
"""

import shlex
from typing import Callable, Iterable

from pydantic import BaseModel, Field, ValidationError, field_validator

from catalog.logger import logger
from catalog.models import Country, Film, Genre, User


class LineParseError(ValueError):
    """Raised when a line does not hold a valid record."""

    def __init__(self, line: str, reason: str):
        super().__init__(f"line {line!r} could not be parsed: {reason}")
        self.line = line
        self.reason = reason


class UserRecord(BaseModel):
    user_id: str = Field(min_length=1)
    name: str
    age: int = Field(ge=0)
    country: Country

    @field_validator("country", mode="before")
    @classmethod
    def country_from_code(cls, value):
        return int(value) if isinstance(value, str) else value

    def to_user(self) -> User:
        return User(self.user_id, self.name, self.age, self.country)


class FilmRecord(BaseModel):
    name: str = Field(min_length=1)
    genre: Genre
    country: Country
    director: str
    year: int = Field(ge=0)

    @field_validator("genre", "country", mode="before")
    @classmethod
    def enum_from_code(cls, value):
        return int(value) if isinstance(value, str) else value

    def to_film(self) -> Film:
        return Film(self.name, self.genre, self.country, self.director, self.year)


class LogRecord(BaseModel):
    timestamp: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    film_name: str = Field(min_length=1)


def _split(line: str, fields: list[str]) -> dict[str, str]:
    try:
        tokens = shlex.split(line)
    except ValueError as exc:
        raise LineParseError(line, str(exc)) from exc
    if len(tokens) < len(fields):
        raise LineParseError(line, f"expected {len(fields)} fields, got {len(tokens)}")
    # extra trailing tokens are ignored
    return dict(zip(fields, tokens))


def _validate(model, line: str, fields: list[str]):
    raw = _split(line, fields)
    try:
        return model(**raw)
    except ValidationError as exc:
        reason = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors())
        raise LineParseError(line, reason) from exc


def parse_user_line(line: str) -> UserRecord:
    return _validate(UserRecord, line, ["user_id", "name", "age", "country"])


def parse_film_line(line: str) -> FilmRecord:
    return _validate(FilmRecord, line, ["name", "genre", "country", "director", "year"])


def parse_log_line(line: str) -> LogRecord:
    return _validate(LogRecord, line, ["timestamp", "user_id", "film_name"])


def is_blank(line: str) -> bool:
    return not line.strip()


def read_lines(path) -> list[str]:
    """Read all lines of a data file, raising OSError if it can't be opened or decoded."""
    try:
        with open(path, "r", encoding="utf-8") as data_file:
            return [line.rstrip("\n") for line in data_file]
    except UnicodeDecodeError as exc:
        raise OSError(f"{path} is not valid UTF-8: {exc}") from exc


def load_records(lines: Iterable[str], parse: Callable, consume: Callable, source: str) -> bool:
    """Parse every line and hand each record to `consume`.

    Bad lines are logged and skipped, loading goes on with the next one.
    Returns False if any line failed to parse or was refused by `consume`.
    """
    success = True
    loaded = 0
    for line in lines:
        if is_blank(line):
            continue
        try:
            record = parse(line)
        except LineParseError as exc:
            logger.error(f"{source}: {exc}")
            success = False
            continue
        if consume(record):
            loaded += 1
        else:
            logger.error(f"{source}: line {line!r} was rejected")
            success = False
    logger.info(f"{source}: loaded {loaded} records")
    return success

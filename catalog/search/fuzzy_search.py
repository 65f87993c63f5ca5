import re
from typing import Iterable

from rapidfuzz import distance, process
from unidecode import unidecode

from catalog.logger import logger
from catalog.models import Film


def _clean_string(string):
    string = unidecode(string).lower()
    return re.sub(r"[^\x00-\x7F]", "", string)


class FilmSearcher:
    """Approximate film lookup by title."""

    def __init__(self, films: Iterable[Film]):
        self.films = {film.name: film for film in films}
        self.clean_titles = {name: _clean_string(name) for name in self.films}

    def search(self, query: str, limit: int = 10) -> list[Film]:
        if len(query) == 0:
            raise ValueError("search query is empty")

        query = _clean_string(query)
        # https://maxbachmann.github.io/RapidFuzz/Usage/distance/JaroWinkler.html
        top_matches = process.extract(
            query,
            self.clean_titles,
            limit=limit,
            scorer=distance.JaroWinkler.normalized_distance,
        )
        logger.debug(top_matches)
        return [self.films[name] for _, _, name in top_matches]

    def __len__(self):
        return len(self.films)

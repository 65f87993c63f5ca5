"""
Human readable listings of the catalog content.
"""

from catalog.films import FilmRegistry
from catalog.logs import ViewingLog
from catalog.users import UserRegistry


def format_films(films: FilmRegistry) -> str:
    lines = [f"The film registry holds {films.count()} films.", "Listing by genre:"]
    for genre, genre_films in films.genres():
        lines.append(f"Genre: {genre.label} ({len(genre_films)} films):")
        lines.extend(f"\t{film}" for film in genre_films)
    return "\n".join(lines) + "\n"


def format_users(users: UserRegistry) -> str:
    lines = [f"The user registry holds {users.count()} users:"]
    lines.extend(f"\t{user}" for user in users)
    return "\n".join(lines) + "\n"


def format_top_films(log: ViewingLog, n: int) -> str:
    lines = [f"{rank}. {film.name} - {count} views" for rank, (film, count) in enumerate(log.top_n(n), 1)]
    return "\n".join(lines) + "\n" if lines else "No views recorded.\n"

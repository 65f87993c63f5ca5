"""
Load the catalog data files and print the listings and most viewed films.

Data files are read from $CATALOG_DATA_DIR (./data by default):
    python -m scripts.show_catalog --top 3
"""

import argparse
import os
import sys

from catalog.films import FilmRegistry
from catalog.logger import logger
from catalog.logs import ViewingLog
from catalog.report import format_films, format_top_films, format_users
from catalog.users import UserRegistry

DATA_DIR = os.environ.get("CATALOG_DATA_DIR", "./data")


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--users", default=os.path.join(DATA_DIR, "users.txt"))
    parser.add_argument("--films", default=os.path.join(DATA_DIR, "films.txt"))
    parser.add_argument("--logs", default=os.path.join(DATA_DIR, "logs.txt"))
    parser.add_argument("--top", type=int, default=5, help="number of most viewed films to show")
    args = parser.parse_args()

    users = UserRegistry()
    films = FilmRegistry()
    log = ViewingLog()

    # logs must be loaded after users and films
    loaded = all([
        users.load_from_file(args.users),
        films.load_from_file(args.films),
        log.load_from_file(args.logs, users, films),
    ])
    if not loaded:
        logger.warning("some records could not be loaded, see errors above")

    print(format_users(users))
    print(format_films(films))
    print(f"Most viewed films ({log.count()} views in total):")
    print(format_top_films(log, args.top))
    return 0 if loaded else 1


if __name__ == "__main__":
    sys.exit(main())

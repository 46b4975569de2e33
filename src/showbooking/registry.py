"""Movie registry: one ``MovieIdentity`` per movie code."""

import logging
from typing import Dict, List, Optional

from showbooking.models import MovieIdentity

logger = logging.getLogger(__name__)


class MovieRegistry:
    """
    Maps normalized (upper-case) movie codes to their identity.

    The first row seen for a code defines title, language and genre; later
    rows with the same code reuse that identity and their metadata is ignored.
    """

    def __init__(self):
        self._movies: Dict[str, MovieIdentity] = {}

    def resolve(self, code: str, title: str, language: str = "", genre: str = "") -> MovieIdentity:
        key = code.strip().upper()
        movie = self._movies.get(key)
        if movie is None:
            movie = MovieIdentity(code=key, title=title, language=language, genre=genre)
            self._movies[key] = movie
            logger.debug(f"Registered movie {key}: {title}")
        elif movie.title != title:
            logger.debug(f"Movie {key} already registered as {movie.title!r}, ignoring {title!r}")
        return movie

    def get(self, code: str) -> Optional[MovieIdentity]:
        return self._movies.get(code.strip().upper())

    def movies(self) -> List[MovieIdentity]:
        """All movies in the order they were first seen."""
        return list(self._movies.values())

    def __len__(self) -> int:
        return len(self._movies)

    def __contains__(self, code: str) -> bool:
        return code.strip().upper() in self._movies

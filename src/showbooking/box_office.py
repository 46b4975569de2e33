"""Query and booking surface used by the menu and any other front end."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from showbooking.config import MAX_TICKETS, MIN_TICKETS
from showbooking.errors import InvalidQuantity, UnknownMovie, UnknownShowtime
from showbooking.ledger import ShowtimeLedger
from showbooking.loader import CatalogLoader
from showbooking.models import BookingResult, LoadResult, MovieIdentity, ShowtimeRecord
from showbooking.registry import MovieRegistry

logger = logging.getLogger(__name__)


class BoxOffice:
    """
    Lists movies and showtimes and takes bookings.

    Showtimes are addressed by natural key: ``"M/d/yyyy Slot"`` such as
    ``"4/1/2025 Evening"``, matched case-insensitively. If a movie has two
    showtimes with the same key, only the first in catalog order is reachable.
    """

    def __init__(self, registry: MovieRegistry, ledger: ShowtimeLedger,
                 min_tickets: int = MIN_TICKETS, max_tickets: int = MAX_TICKETS):
        self.registry = registry
        self.ledger = ledger
        self.min_tickets = min_tickets
        self.max_tickets = max_tickets
        self.load_result: Optional[LoadResult] = None

    @classmethod
    def from_catalog(cls, source: Union[str, Path], **kwargs) -> "BoxOffice":
        """Build a fresh registry and ledger and load them from ``source``.

        Raises CatalogUnavailable if the file cannot be read.
        """
        registry = MovieRegistry()
        ledger = ShowtimeLedger()
        load_result = CatalogLoader(registry, ledger).load(source)
        office = cls(registry, ledger, **kwargs)
        office.load_result = load_result
        return office

    def list_movies(self) -> List[MovieIdentity]:
        return self.registry.movies()

    def list_showtimes(self, movie_code: str) -> List[ShowtimeRecord]:
        movie = self.registry.get(movie_code)
        if movie is None:
            return []
        return self.ledger.for_movie(movie)

    def find_showtime(self, movie_code: str, natural_key: str) -> Optional[ShowtimeRecord]:
        wanted = natural_key.strip().lower()
        for showtime in self.list_showtimes(movie_code):
            if showtime.natural_key.lower() == wanted:
                return showtime
        return None

    def book(self, movie_code: str, natural_key: str, quantity: int) -> BookingResult:
        """
        Book ``quantity`` seats for a movie's showtime.

        Checks run in order: movie code, showtime key, quantity bounds, then
        capacity. Any failure leaves every seat count unchanged.
        """
        movie = self.registry.get(movie_code)
        if movie is None:
            logger.debug(f"Booking refused: unknown movie {movie_code!r}")
            return BookingResult.failure(UnknownMovie(movie_code), quantity)

        showtime = self.find_showtime(movie.code, natural_key)
        if showtime is None:
            logger.debug(f"Booking refused: {movie.code} has no showtime {natural_key!r}")
            return BookingResult.failure(UnknownShowtime(movie.code, natural_key), quantity)

        if not self.min_tickets <= quantity <= self.max_tickets:
            logger.debug(f"Booking refused: quantity {quantity} out of range")
            error = InvalidQuantity(quantity, self.min_tickets, self.max_tickets)
            return BookingResult.failure(error, quantity, showtime)

        overbooked = self.ledger.book(showtime, quantity)
        if overbooked is not None:
            return BookingResult.failure(overbooked, quantity, showtime)

        return BookingResult.success(showtime, quantity)

"""Showtime ledger: ordered showtimes and the only place seat counts change."""

import logging
import threading
from typing import Iterator, List, Optional

from showbooking.errors import OverbookingError
from showbooking.models import MovieIdentity, ShowtimeRecord

logger = logging.getLogger(__name__)


class ShowtimeLedger:
    """
    Append-only list of showtimes in catalog order.

    ``book`` is the single critical section: the capacity check and the
    increment happen under one lock, so concurrent callers can never push
    ``booked_seats`` past ``total_seats``.
    """

    def __init__(self):
        self._showtimes: List[ShowtimeRecord] = []
        self._lock = threading.Lock()

    def append(self, record: ShowtimeRecord) -> None:
        self._showtimes.append(record)

    def book(self, record: ShowtimeRecord, quantity: int) -> Optional[OverbookingError]:
        """Reserve ``quantity`` seats. Returns None on success, an error otherwise.

        On error the record is left untouched (no partial booking).
        """
        with self._lock:
            if record.booked_seats + quantity > record.total_seats:
                error = OverbookingError(available=record.available_seats, requested=quantity)
                logger.info(
                    f"Rejected {quantity} seats for {record.movie.code} {record.natural_key}: "
                    f"only {error.available} left"
                )
                return error
            record.booked_seats += quantity

        logger.debug(
            f"Booked {quantity} seats for {record.movie.code} {record.natural_key} "
            f"({record.available_seats}/{record.total_seats} left)"
        )
        return None

    @staticmethod
    def available_seats(record: ShowtimeRecord) -> int:
        return record.total_seats - record.booked_seats

    def for_movie(self, movie: MovieIdentity) -> List[ShowtimeRecord]:
        return [st for st in self._showtimes if st.movie == movie]

    def showtimes(self) -> List[ShowtimeRecord]:
        return list(self._showtimes)

    def __iter__(self) -> Iterator[ShowtimeRecord]:
        return iter(list(self._showtimes))

    def __len__(self) -> int:
        return len(self._showtimes)

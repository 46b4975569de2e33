"""Showtime inventory and ticket booking engine."""

from showbooking.box_office import BoxOffice
from showbooking.errors import (
    CatalogUnavailable,
    InvalidDate,
    InvalidNumber,
    InvalidQuantity,
    InvalidTimeSlot,
    MalformedRow,
    OverbookingError,
    UnknownMovie,
    UnknownShowtime,
)
from showbooking.ledger import ShowtimeLedger
from showbooking.loader import CatalogLoader
from showbooking.models import BookingResult, LoadResult, MovieIdentity, ShowtimeRecord, TimeSlot
from showbooking.registry import MovieRegistry

__all__ = [
    "BoxOffice",
    "BookingResult",
    "CatalogLoader",
    "CatalogUnavailable",
    "InvalidDate",
    "InvalidNumber",
    "InvalidQuantity",
    "InvalidTimeSlot",
    "LoadResult",
    "MalformedRow",
    "MovieIdentity",
    "MovieRegistry",
    "OverbookingError",
    "ShowtimeLedger",
    "ShowtimeRecord",
    "TimeSlot",
    "UnknownMovie",
    "UnknownShowtime",
]

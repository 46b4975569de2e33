"""Data models for movies, showtimes and booking outcomes."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from showbooking.errors import (
    InvalidQuantity,
    InvalidTimeSlot,
    OverbookingError,
    UnknownMovie,
    UnknownShowtime,
)


class TimeSlot(Enum):
    """Part of the day a showtime runs in. Closed set."""

    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "TimeSlot":
        """Map a catalog label to a slot, ignoring case."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            raise InvalidTimeSlot(f"Invalid time of day: {text!r}") from None


def format_show_date(value: date) -> str:
    """M/d/yyyy, no zero padding (4/1/2025)."""
    return f"{value.month}/{value.day}/{value.year}"


class MovieIdentity(BaseModel):
    """One movie, shared by every showtime with the same code."""

    model_config = ConfigDict(frozen=True)

    code: str
    title: str
    language: str = ""
    genre: str = ""

    @field_validator("code")
    @classmethod
    def _normalize_code(cls, value: str) -> str:
        return value.strip().upper()


class ShowtimeRecord(BaseModel):
    """Single bookable screening with a fixed capacity and price."""

    model_config = ConfigDict(validate_assignment=True)

    movie: MovieIdentity
    show_date: date
    slot: TimeSlot
    total_seats: int = Field(ge=0)
    booked_seats: int = Field(ge=0)
    price: Decimal = Field(ge=0)

    @model_validator(mode="after")
    def _check_capacity(self) -> "ShowtimeRecord":
        if self.booked_seats > self.total_seats:
            raise ValueError(
                f"booked seats ({self.booked_seats}) exceed total seats ({self.total_seats})"
            )
        return self

    @property
    def available_seats(self) -> int:
        return self.total_seats - self.booked_seats

    @property
    def natural_key(self) -> str:
        """Key callers use to pick this showtime, e.g. '4/1/2025 Evening'."""
        return f"{format_show_date(self.show_date)} {self.slot.label}"


class CatalogRow(BaseModel):
    """One parsed catalog line, before it is bound to a movie identity."""

    model_config = ConfigDict(frozen=True)

    code: str
    title: str
    show_date: date
    slot: TimeSlot
    total_seats: int
    available_seats: int
    price: Decimal
    language: str
    genre: str


# =============================================================================
# LOAD / BOOKING RESULTS
# =============================================================================

@dataclass
class RowFailure:
    row_number: int  # 1-based line number in the source file
    error_type: str
    reason: str
    line: str = ""


@dataclass
class LoadResult:
    source: str
    rows_read: int = 0
    showtimes_loaded: int = 0
    failures: List[RowFailure] = field(default_factory=list)
    duplicates: List[str] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.failures)


BookingError = Union[UnknownMovie, UnknownShowtime, InvalidQuantity, OverbookingError]


@dataclass(frozen=True)
class BookingResult:
    """Outcome of a booking request.

    On success ``available_seats`` is the count left after the booking and
    ``price`` is the per-ticket price; the total is ``quantity * price``.
    On failure ``error`` holds exactly one booking error and nothing changed.
    """

    ok: bool
    quantity: int
    showtime: Optional[ShowtimeRecord] = None
    available_seats: Optional[int] = None
    price: Optional[Decimal] = None
    error: Optional[BookingError] = None

    @classmethod
    def success(cls, showtime: ShowtimeRecord, quantity: int) -> "BookingResult":
        return cls(
            ok=True,
            quantity=quantity,
            showtime=showtime,
            available_seats=showtime.available_seats,
            price=showtime.price,
        )

    @classmethod
    def failure(cls, error: BookingError, quantity: int,
                showtime: Optional[ShowtimeRecord] = None) -> "BookingResult":
        return cls(ok=False, quantity=quantity, showtime=showtime, error=error)

"""Error taxonomy for catalog loading and booking.

Catalog problems are exceptions: a bad row raises a ``CatalogRowError`` that the
loader records and skips, and an unreadable file raises ``CatalogUnavailable``.

Booking problems are plain values returned inside a ``BookingResult``. They are
never raised, so a caller can branch on them without try/except.
"""

from dataclasses import dataclass


# =============================================================================
# CATALOG (LOAD-TIME) ERRORS
# =============================================================================

class CatalogError(Exception):
    """Base class for everything that can go wrong while reading a catalog."""


class CatalogUnavailable(CatalogError):
    """The catalog source could not be opened at all."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Catalog '{path}' is unavailable: {reason}")


class CatalogRowError(CatalogError):
    """A single catalog line could not be turned into a showtime."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class MalformedRow(CatalogRowError):
    pass


class InvalidDate(CatalogRowError):
    pass


class InvalidTimeSlot(CatalogRowError):
    pass


class InvalidNumber(CatalogRowError):
    pass


# =============================================================================
# BOOKING (CALL-TIME) ERRORS - returned, not raised
# =============================================================================

@dataclass(frozen=True)
class UnknownMovie:
    code: str

    @property
    def message(self) -> str:
        return f"The movie code '{self.code}' is not valid. Please check available movies."


@dataclass(frozen=True)
class UnknownShowtime:
    code: str
    key: str

    @property
    def message(self) -> str:
        return f"The date/time '{self.key}' is not available. Please select from valid showtimes."


@dataclass(frozen=True)
class InvalidQuantity:
    quantity: int
    minimum: int
    maximum: int

    @property
    def message(self) -> str:
        return (
            f"Ticket quantity {self.quantity} is invalid. "
            f"Must book between {self.minimum}-{self.maximum} tickets."
        )


@dataclass(frozen=True)
class OverbookingError:
    available: int
    requested: int

    @property
    def message(self) -> str:
        return f"Cannot book {self.requested} tickets. Only {self.available} seats remaining."

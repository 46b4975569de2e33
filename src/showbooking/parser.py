"""Parse a single pipe-delimited catalog line into a ``CatalogRow``."""

import re
from datetime import date
from decimal import Decimal, InvalidOperation

from showbooking.config import DELIMITER, MIN_FIELDS
from showbooking.errors import InvalidDate, InvalidNumber, MalformedRow
from showbooking.models import CatalogRow, TimeSlot

# Month/day without padding, four-digit year: 4/1/2025, 12/31/2025
DATE_PATTERN = re.compile(r'^(\d{1,2})/(\d{1,2})/(\d{4})$')
INT_PATTERN = re.compile(r'^[+-]?\d+$')


def parse_show_date(text: str) -> date:
    match = DATE_PATTERN.match(text)
    if not match:
        raise InvalidDate(f"Date {text!r} does not match M/d/yyyy")
    month, day, year = (int(g) for g in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDate(f"Date {text!r} is not a calendar date: {e}") from None


def _parse_int(text: str, column: str) -> int:
    if not INT_PATTERN.match(text):
        raise InvalidNumber(f"{column} {text!r} is not a whole number")
    return int(text)


def _parse_price(text: str) -> Decimal:
    try:
        price = Decimal(text)
    except InvalidOperation:
        raise InvalidNumber(f"Price {text!r} is not a number") from None
    if not price.is_finite():
        raise InvalidNumber(f"Price {text!r} is not a number")
    if price < 0:
        raise InvalidNumber(f"Price {text!r} is negative")
    return price


def parse_record_line(line: str, delimiter: str = DELIMITER) -> CatalogRow:
    """
    Split and validate one catalog line.

    Column order:
        code | title | date | time | total | available | price | language | genre

    Extra columns past the ninth are ignored.

    Raises:
        MalformedRow: fewer than nine columns
        InvalidDate: date is not M/d/yyyy or not a real day
        InvalidTimeSlot: time is not Morning, Afternoon or Evening
        InvalidNumber: seats/price not numeric, negative, or available > total
    """
    parts = [p.strip() for p in line.split(delimiter)]
    if len(parts) < MIN_FIELDS:
        raise MalformedRow(f"Expected at least {MIN_FIELDS} fields, got {len(parts)}")

    code, title, date_str, time_str, total_str, avail_str, price_str, language, genre = parts[:MIN_FIELDS]
    if not code:
        raise MalformedRow("Movie code is empty")

    show_date = parse_show_date(date_str)
    slot = TimeSlot.parse(time_str)

    total_seats = _parse_int(total_str, "Total seats")
    available_seats = _parse_int(avail_str, "Available seats")
    price = _parse_price(price_str)

    if total_seats < 0 or available_seats < 0:
        raise InvalidNumber(f"Seat counts must not be negative ({available_seats}/{total_seats})")
    if available_seats > total_seats:
        raise InvalidNumber(
            f"Available seats ({available_seats}) exceed total seats ({total_seats})"
        )

    return CatalogRow(
        code=code,
        title=title,
        show_date=show_date,
        slot=slot,
        total_seats=total_seats,
        available_seats=available_seats,
        price=price,
        language=language,
        genre=genre,
    )

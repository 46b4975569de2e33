"""Text and table views of the catalog for the menu and reports."""

from typing import Iterable, List

import pandas as pd

from showbooking.ledger import ShowtimeLedger
from showbooking.models import MovieIdentity, ShowtimeRecord, format_show_date

FRAME_COLUMNS = [
    'code', 'title', 'date', 'slot', 'total_seats', 'booked_seats', 'available_seats', 'price',
]


def format_movie(movie: MovieIdentity) -> str:
    return f"{movie.code} - {movie.title} ({movie.genre})"


def format_showtime(showtime: ShowtimeRecord) -> str:
    return (
        f"{showtime.natural_key} - {showtime.available_seats}/{showtime.total_seats} "
        f"seats available (${showtime.price:.2f})"
    )


def render_catalog(movies: Iterable[MovieIdentity], ledger: ShowtimeLedger) -> str:
    """Every movie followed by its showtimes, blank line between movies."""
    movies = list(movies)
    if not movies:
        return "No movies available."

    lines: List[str] = []
    for movie in movies:
        lines.append(format_movie(movie))
        lines.extend(format_showtime(st) for st in ledger.for_movie(movie))
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def showtimes_frame(ledger: ShowtimeLedger) -> pd.DataFrame:
    """One row per showtime, in catalog order."""
    rows = [
        {
            'code': st.movie.code,
            'title': st.movie.title,
            'date': format_show_date(st.show_date),
            'slot': st.slot.label,
            'total_seats': st.total_seats,
            'booked_seats': st.booked_seats,
            'available_seats': st.available_seats,
            'price': float(st.price),
        }
        for st in ledger
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def availability_summary(ledger: ShowtimeLedger) -> pd.DataFrame:
    """Seat totals per movie: showtimes, total, booked and available seats."""
    df = showtimes_frame(ledger)
    if df.empty:
        return pd.DataFrame(columns=['code', 'title', 'showtimes', 'total_seats', 'booked_seats', 'available_seats'])

    return (
        df.groupby(['code', 'title'], sort=False)
        .agg(
            showtimes=('slot', 'size'),
            total_seats=('total_seats', 'sum'),
            booked_seats=('booked_seats', 'sum'),
            available_seats=('available_seats', 'sum'),
        )
        .reset_index()
    )

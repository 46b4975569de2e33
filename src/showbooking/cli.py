#!/usr/bin/env python3
"""
Movie ticket reservation desk
=============================

Loads a pipe-delimited catalog and runs the interactive menu:
    1. View movies and showtimes
    2. Make a reservation
    3. Exit

Usage:
    showbooking movies.txt
    showbooking movies.txt --summary
    SHOWBOOKING_CATALOG=movies.txt showbooking --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from showbooking.box_office import BoxOffice
from showbooking.config import CATALOG_PATH, LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL
from showbooking.display import (
    availability_summary,
    format_showtime,
    render_catalog,
    showtimes_frame,
)
from showbooking.errors import CatalogUnavailable

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def show_movies(office: BoxOffice) -> None:
    print("\nAvailable Movies:")
    print(render_catalog(office.list_movies(), office.ledger))


def make_reservation(office: BoxOffice, input_fn: InputFn = input) -> None:
    code = input_fn("\nEnter the Movie Code from the available movies: ").strip().upper()
    movie = office.registry.get(code)
    if movie is None:
        print("Invalid Movie Code. Please try again.")
        return

    print(f"You selected: {movie.title}")
    showtimes = office.list_showtimes(code)
    if not showtimes:
        print("No available showtimes for this movie.")
        return

    print("\nAvailable Showtimes:")
    for showtime in showtimes:
        print(format_showtime(showtime))

    key = input_fn("\nEnter the showtime (e.g., 4/1/2025 Morning): ").strip()
    showtime = office.find_showtime(code, key)
    if showtime is None:
        print("Invalid showtime. Please try again.")
        return
    print(f"You selected the showtime: {format_showtime(showtime)}")

    raw = input_fn(f"Enter the number of tickets to book ({office.min_tickets}-{office.max_tickets}): ").strip()
    try:
        quantity = int(raw)
    except ValueError:
        print("Please enter a valid number.")
        return

    result = office.book(code, key, quantity)
    if not result.ok:
        print(result.error.message)
        return

    total = result.quantity * result.price
    print(f"✅ Successfully booked {result.quantity} tickets for the showtime: {format_showtime(result.showtime)}")
    print(f"   Total: ${total:.2f}")


def run_menu(office: BoxOffice, input_fn: InputFn = input) -> None:
    print("Welcome to the cinema reservation desk!")

    while True:
        print("\nMain Menu:")
        print("1. View Movies and Showtimes")
        print("2. Make a Reservation")
        print("3. Exit")
        try:
            choice = input_fn("Enter your choice: ").strip()
        except EOFError:
            print()
            choice = "3"

        if choice == "1":
            show_movies(office)
        elif choice == "2":
            try:
                make_reservation(office, input_fn)
            except EOFError:
                print()
                choice = "3"
        elif not choice.isdigit():
            print("Please enter a valid number.")
        elif choice != "3":
            print("Invalid choice. Please try again.")

        if choice == "3":
            print("Thank you for using our system!")
            return


def print_summary(office: BoxOffice) -> None:
    df = showtimes_frame(office.ledger)
    if df.empty:
        print("No showtimes loaded.")
        return

    print("\n" + "=" * 60)
    print("📊 SHOWTIME AVAILABILITY")
    print("=" * 60)
    print(df.to_string(index=False))
    print("\n" + "-" * 60)
    for row in availability_summary(office.ledger).itertuples(index=False):
        print(f"   {row.code} - {row.title}: {row.available_seats}/{row.total_seats} seats "
              f"across {row.showtimes} showtimes")
    print("=" * 60 + "\n")


def main(argv: Optional[List[str]] = None, input_fn: InputFn = input) -> int:
    parser = argparse.ArgumentParser(description='Movie ticket reservation desk')
    parser.add_argument('catalog', nargs='?', default=str(CATALOG_PATH),
                        help=f'Pipe-delimited catalog file (default: {CATALOG_PATH})')
    parser.add_argument('--summary', action='store_true', help='Print seat availability and exit')
    parser.add_argument('--log-level', type=str, default=LOG_LEVEL, help='Logging level (default: %(default)s)')
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        office = BoxOffice.from_catalog(args.catalog)
    except CatalogUnavailable as e:
        print(f"❌ {e}")
        return 1

    if office.load_result and office.load_result.skipped:
        print(f"⚠️  {office.load_result.skipped} catalog rows were skipped. Check logs for details.")

    if args.summary:
        print_summary(office)
        return 0

    logger.debug(f"Starting menu with {len(office.ledger)} showtimes")
    run_menu(office, input_fn)
    return 0


if __name__ == "__main__":
    sys.exit(main())

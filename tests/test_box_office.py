from decimal import Decimal

import pytest

from showbooking.box_office import BoxOffice
from showbooking.errors import InvalidQuantity, OverbookingError, UnknownMovie, UnknownShowtime

from conftest import HEADER, INCEPTION_ROWS


class TestQueries:

    def test_list_movies_in_catalog_order(self, office):
        assert [m.code for m in office.list_movies()] == ["AAA", "BBB", "CCC"]

    def test_list_showtimes(self, office):
        showtimes = office.list_showtimes("aaa")
        assert [st.natural_key for st in showtimes] == ["4/1/2025 Morning", "4/1/2025 Evening"]

    def test_list_showtimes_unknown_movie_is_empty(self, office):
        assert office.list_showtimes("ZZZ") == []

    def test_find_showtime_ignores_case(self, office):
        showtime = office.find_showtime("AAA", "  4/1/2025 EVENING ")
        assert showtime is not None
        assert showtime.total_seats == 50

    def test_find_showtime_not_found(self, office):
        assert office.find_showtime("AAA", "4/2/2025 Evening") is None
        assert office.find_showtime("AAA", "04/01/2025 Evening") is None

    def test_load_result_is_kept(self, office):
        assert office.load_result.showtimes_loaded == 4


class TestBooking:

    def test_successful_booking(self, office):
        result = office.book("aaa", "4/1/2025 Morning", 3)

        assert result.ok
        assert result.error is None
        assert result.quantity == 3
        assert result.available_seats == 97
        assert result.price == Decimal("12.50")
        assert result.showtime.booked_seats == 3

    def test_unknown_movie(self, office):
        result = office.book("ZZZ", "4/1/2025 Morning", 1)
        assert not result.ok
        assert result.error == UnknownMovie("ZZZ")

    def test_unknown_showtime(self, office):
        result = office.book("AAA", "4/1/2025 Afternoon", 1)
        assert result.error == UnknownShowtime("AAA", "4/1/2025 Afternoon")

    def test_movie_checked_before_quantity(self, office):
        result = office.book("ZZZ", "nope", 0)
        assert isinstance(result.error, UnknownMovie)

    @pytest.mark.parametrize("quantity", [0, 11, -1])
    def test_quantity_out_of_range(self, office, quantity):
        showtime = office.find_showtime("AAA", "4/1/2025 Morning")

        result = office.book("AAA", "4/1/2025 Morning", quantity)

        assert result.error == InvalidQuantity(quantity, 1, 10)
        assert showtime.booked_seats == 0

    @pytest.mark.parametrize("quantity", [1, 10])
    def test_quantity_bounds_are_inclusive(self, office, quantity):
        result = office.book("AAA", "4/1/2025 Morning", quantity)
        assert result.ok
        assert result.available_seats == 100 - quantity

    def test_overbooking_leaves_state_unchanged(self, office):
        result = office.book("CCC", "4/3/2025 Evening", 6)

        assert result.error == OverbookingError(available=5, requested=6)
        assert result.showtime.available_seats == 5

    def test_invariant_holds_across_bookings(self, office):
        for quantity in [10, 10, 10, 10, 10, 3, 7]:
            office.book("BBB", "4/2/2025 Afternoon", quantity)
            for showtime in office.ledger:
                assert 0 <= showtime.booked_seats <= showtime.total_seats

    def test_custom_ticket_limits(self, catalog_path):
        office = BoxOffice.from_catalog(catalog_path, max_tickets=2)
        assert isinstance(office.book("AAA", "4/1/2025 Morning", 3).error, InvalidQuantity)


def test_end_to_end_booking(write_catalog):
    office = BoxOffice.from_catalog(write_catalog([HEADER, *INCEPTION_ROWS]))

    showtimes = office.list_showtimes("AAA")
    assert [st.natural_key for st in showtimes] == ["4/1/2025 Morning", "4/1/2025 Evening"]

    first = office.book("AAA", "4/1/2025 Evening", 10)
    assert first.ok
    assert first.available_seats == 0

    second = office.book("AAA", "4/1/2025 Evening", 1)
    assert not second.ok
    assert second.error == OverbookingError(available=0, requested=1)


def test_duplicate_showtime_only_first_is_bookable(write_catalog):
    office = BoxOffice.from_catalog(write_catalog([
        "AAA|Inception|4/1/2025|Evening|50|10|12.50|English|Sci-Fi",
        "AAA|Inception|4/1/2025|Evening|200|200|12.50|English|Sci-Fi",
    ]))

    result = office.book("AAA", "4/1/2025 Evening", 10)

    assert result.ok
    assert result.showtime.total_seats == 50
    assert office.book("AAA", "4/1/2025 Evening", 1).error == OverbookingError(0, 1)

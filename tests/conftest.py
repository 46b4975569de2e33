import pytest

from showbooking.box_office import BoxOffice

HEADER = "Movie Code|Title|Date|Time|Total Seats|Available Seats|Price|Language|Genre"

INCEPTION_ROWS = [
    "AAA|Inception|4/1/2025|Morning|100|100|12.50|English|Sci-Fi",
    "AAA|Inception|4/1/2025|Evening|50|10|12.50|English|Sci-Fi",
]


@pytest.fixture
def write_catalog(tmp_path):
    """Write catalog lines to a temp file and return its path."""
    def _write(lines, name="movies.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def catalog_path(write_catalog):
    return write_catalog([
        HEADER,
        *INCEPTION_ROWS,
        "BBB|Dune|4/2/2025|Afternoon|80|80|9.99|English|Adventure",
        "ccc|Amélie|4/3/2025|evening|40|5|8.00|French|Comedy",
    ])


@pytest.fixture
def office(catalog_path):
    return BoxOffice.from_catalog(catalog_path)

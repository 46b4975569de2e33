"""Catalog loader: reads the source file and fills a registry and ledger."""

import logging
from pathlib import Path
from typing import Iterable, Set, Tuple, Union

from showbooking.config import CATALOG_ENCODING, DELIMITER, HEADER_MARKER
from showbooking.errors import CatalogRowError, CatalogUnavailable
from showbooking.ledger import ShowtimeLedger
from showbooking.models import LoadResult, RowFailure, ShowtimeRecord
from showbooking.parser import parse_record_line
from showbooking.registry import MovieRegistry

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Loads a pipe-delimited catalog into a ``MovieRegistry`` and ``ShowtimeLedger``.

    Bad rows are logged, recorded in the ``LoadResult`` and skipped; only an
    unreadable file stops the load. Loading twice into the same registry and
    ledger duplicates every showtime.
    """

    def __init__(self, registry: MovieRegistry, ledger: ShowtimeLedger, delimiter: str = DELIMITER):
        self.registry = registry
        self.ledger = ledger
        self.delimiter = delimiter

    def load(self, source: Union[str, Path]) -> LoadResult:
        path = Path(source)
        try:
            lines = path.read_text(encoding=CATALOG_ENCODING).splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read catalog {path}: {e}")
            raise CatalogUnavailable(path, str(e)) from e

        return self.load_lines(lines, source=str(path))

    def load_lines(self, lines: Iterable[str], source: str = "<lines>") -> LoadResult:
        result = LoadResult(source=source)
        seen: Set[Tuple[str, str]] = set()

        for row_number, line in enumerate(lines, 1):
            if row_number == 1 and HEADER_MARKER in line:
                logger.debug(f"Skipping header: {line.strip()}")
                continue
            if not line.strip():
                continue

            result.rows_read += 1
            try:
                row = parse_record_line(line, self.delimiter)
            except CatalogRowError as e:
                failure = RowFailure(
                    row_number=row_number,
                    error_type=type(e).__name__,
                    reason=e.reason,
                    line=line,
                )
                result.failures.append(failure)
                logger.warning(f"Row {row_number} skipped ({failure.error_type}): {failure.reason}")
                continue

            movie = self.registry.resolve(row.code, row.title, row.language, row.genre)
            record = ShowtimeRecord(
                movie=movie,
                show_date=row.show_date,
                slot=row.slot,
                total_seats=row.total_seats,
                booked_seats=row.total_seats - row.available_seats,
                price=row.price,
            )

            key = (movie.code, record.natural_key.lower())
            if key in seen:
                # find_showtime only ever returns the first of these
                label = f"{movie.code} {record.natural_key}"
                result.duplicates.append(label)
                logger.warning(f"Row {row_number} duplicates showtime {label}; only the first is bookable")
            seen.add(key)

            self.ledger.append(record)
            result.showtimes_loaded += 1

        logger.info(
            f"Loaded {source}: {result.showtimes_loaded} showtimes, "
            f"{len(self.registry)} movies, {result.skipped} rows skipped"
        )
        return result

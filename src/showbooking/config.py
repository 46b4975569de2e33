"""Configuration for the showtime catalog and booking desk."""

import os
from pathlib import Path

# =============================================================================
# CATALOG FILE FORMAT
# =============================================================================

# MovieCode | Title | M/D/YYYY | Morning/Afternoon/Evening | Total | Available | Price | Language | Genre
DELIMITER = "|"
MIN_FIELDS = 9

# First line is a header only if it contains this (case-sensitive)
HEADER_MARKER = "Movie Code"

CATALOG_ENCODING = "utf-8-sig"  # tolerates a BOM
CATALOG_PATH = Path(os.environ.get("SHOWBOOKING_CATALOG", "movies.txt"))

# =============================================================================
# BOOKING POLICY
# =============================================================================

MIN_TICKETS = 1
MAX_TICKETS = 10

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("SHOWBOOKING_LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'
LOG_DATEFMT = '%H:%M:%S'

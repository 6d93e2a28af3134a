from datetime import datetime, UTC
from typing import Optional

from .. import config
from ..exceptions import ListingParseError


def find_filename_timestamp(filename: str) -> Optional[datetime]:
    """
    Returns the timestamp embedded in an object key as YYYYMMDD_HHMMSS.

    Only the first candidate is considered. Returns None when the key has no
    candidate at all; raises ListingParseError when the first candidate is
    not a real date (e.g. '20231399_250000').
    """
    match = config.FILENAME_TIMESTAMP_PATTERN.search(filename)
    if not match:
        return None

    try:
        dt = datetime.strptime(match.group(0), config.FILENAME_TIMESTAMP_FORMAT)
    except ValueError as e:
        raise ListingParseError(f"unable to parse file timestamp '{match.group(0)}': {e}") from e
    return dt.replace(tzinfo=UTC)


def extract_content_timestamp(filename: str, fallback: datetime) -> datetime:
    """Filename timestamp if present, otherwise `fallback`."""
    found = find_filename_timestamp(filename)
    return found if found is not None else fallback

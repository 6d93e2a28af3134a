import logging
from datetime import datetime, UTC
from pathlib import Path
from typing import Iterable, Iterator, List

from tqdm import tqdm

from .. import config
from ..exceptions import ListingParseError, ListingReadError
from ..models import ObjectRecord
from .timestamps import extract_content_timestamp


def parse_line(line: str, extract_content: bool = True) -> ObjectRecord:
    """
    Parses one `aws s3 ls` line: date, time, size, key.

    The key is every field after the size, rejoined with single spaces.
    Raises ListingParseError if the line is short or a field is malformed.
    """
    fields = line.split()
    if len(fields) < config.MIN_LISTING_FIELDS:
        raise ListingParseError(
            f"expected at least {config.MIN_LISTING_FIELDS} fields, got {len(fields)}"
        )

    stamp = f"{fields[0]} {fields[1]}"
    if not (config.LISTING_DATE_PATTERN.fullmatch(fields[0])
            and config.LISTING_CLOCK_PATTERN.fullmatch(fields[1])):
        raise ListingParseError(f"bad S3 modification timestamp '{stamp}'")
    try:
        mod_time = datetime.strptime(stamp, config.LISTING_TIME_FORMAT).replace(tzinfo=UTC)
    except ValueError as e:
        raise ListingParseError(f"bad S3 modification timestamp '{stamp}': {e}") from e

    # Plain ASCII base-10 digits only: no sign, no underscores
    if not (fields[2].isascii() and fields[2].isdecimal()):
        raise ListingParseError(f"bad file size '{fields[2]}'")
    size = int(fields[2])

    filename = " ".join(fields[3:])

    if extract_content:
        content_ts = extract_content_timestamp(filename, mod_time)
    else:
        content_ts = mod_time

    return ObjectRecord(
        modification_time=mod_time,
        size_bytes=size,
        filename=filename,
        content_timestamp=content_ts,
    )


class ListingParser:
    def __init__(self, extract_content: bool = True, show_progress: bool = False):
        self.extract_content = extract_content
        self.show_progress = show_progress
        self.parsed_count = 0
        self.skipped_count = 0

    def parse_lines(self, lines: Iterable[str]) -> Iterator[ObjectRecord]:
        """
        Yields a record for every parseable line.
        Malformed lines are logged and dropped; blank lines are ignored.
        """
        for line in lines:
            line = line.rstrip("\r\n")
            if not line.strip():
                continue

            try:
                record = parse_line(line, self.extract_content)
            except ListingParseError as e:
                self.skipped_count += 1
                logging.warning(f"Skipping line '{line}': {e}")
                continue

            self.parsed_count += 1
            yield record

    def parse_file(self, path: Path) -> List[ObjectRecord]:
        """Reads the whole listing. Any I/O failure is fatal."""
        logging.info(f"Reading listing {path}")
        try:
            # A bad byte only spoils its own line
            with path.open("r", encoding="utf-8", errors="replace") as f:
                lines = tqdm(f, desc="Parsing listing", unit=" lines", disable=not self.show_progress)
                records = list(self.parse_lines(lines))
        except OSError as e:
            raise ListingReadError(f"Cannot read listing {path}: {e}") from e

        logging.info(f"Parsed {self.parsed_count} records ({self.skipped_count} lines skipped).")
        return records

import math
import sys
from datetime import datetime, UTC
from typing import Iterable, Optional, TextIO

import humanize

from .models import ObjectRecord

LINE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
SI_BASE = 1000


def human_size(size_bytes: int) -> str:
    """
    SI units: 500 -> '500 B', 1024 -> '1.0 kB', 15000 -> '15 kB'.
    One decimal below 10 of a unit, none from 10 up.
    """
    if size_bytes < SI_BASE:
        return f"{size_bytes} B"

    exponent = 0
    while size_bytes >= SI_BASE ** (exponent + 1):
        exponent += 1
    # Round to one decimal first so 9999 reads '10 kB', not '10.0 kB'
    scaled = math.floor(size_bytes / SI_BASE ** exponent * 10 + 0.5) / 10
    fmt = "%.0f" if scaled >= 10 else "%.1f"
    return humanize.naturalsize(size_bytes, format=fmt)


def format_age(timestamp: datetime, now: Optional[datetime] = None) -> str:
    """
    Time elapsed since `timestamp` as 'Nd Nh Nm Ns', skipping zero parts.
    Anything not in the past renders as '0s'.
    """
    now = now or datetime.now(UTC)
    total = int((now - timestamp).total_seconds())
    if total <= 0:
        return "0s"

    days, rem = divmod(total, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, seconds = divmod(rem, 60)

    parts = []
    for value, unit in ((days, "d"), (hours, "h"), (minutes, "m"), (seconds, "s")):
        if value > 0:
            parts.append(f"{value}{unit}")
    return " ".join(parts)


def format_record(record: ObjectRecord, now: Optional[datetime] = None) -> str:
    """The report line for one record; age is measured from the content timestamp."""
    return (
        f"S3 Modification Time: {record.modification_time.strftime(LINE_TIME_FORMAT)}, "
        f"{human_size(record.size_bytes)}, {record.filename}, "
        f"age: {format_age(record.content_timestamp, now)}"
    )


class ReportGenerator:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def write_header(self):
        print("Sorted Files:", file=self.stream)

    def write_record(self, record: ObjectRecord, now: Optional[datetime] = None) -> str:
        line = format_record(record, now)
        print(line, file=self.stream)
        return line

    def write_report(self, records: Iterable[ObjectRecord], now: Optional[datetime] = None):
        """Prints the header and one line per record, in the given order."""
        self.write_header()
        for record in records:
            self.write_record(record, now)

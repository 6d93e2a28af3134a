"""
Configuration constants and run settings for the S3 listing sorter.
"""
import re
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ConfigurationError

# --- Input ---
DEFAULT_INPUT_FILE = Path("list.txt")

# `aws s3 ls` prints "2023-01-15 08:30:00       1024 key"
LISTING_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
# strptime alone accepts unpadded fields like "2023-1-5 8:3:0"
LISTING_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
LISTING_CLOCK_PATTERN = re.compile(r"\d{2}:\d{2}:\d{2}", re.ASCII)
MIN_LISTING_FIELDS = 4

# --- Filename Timestamps ---
FILENAME_TIMESTAMP_PATTERN = re.compile(r"\d{8}_\d{6}", re.ASCII)
FILENAME_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

# --- Sorting ---
# Sort key -> record attribute
SORT_KEYS = {
    'timestamp': 'content_timestamp',
    's3': 'modification_time',
}
SORT_ORDERS = ('asc', 'desc')
DEFAULT_SORT_KEY = 'timestamp'
DEFAULT_SORT_ORDER = 'asc'

# --- Output ---
DEFAULT_BUCKET = "streamboxdineorb"
DEFAULT_SYNC_DEST = "/tmp/video"
RM_SCRIPT_NAME = "rm.sh"
SYNC_SCRIPT_NAME = "sync.sh"
RESULTS_FILE_NAME = "results.json"
JSON_INDENT = 2


@dataclass(frozen=True)
class SorterConfig:
    """
    Settings for a single run, built once at startup and passed down.

    `extract_content` switches on the variant behaviour: filename timestamps,
    rm/sync scripts and the JSON dump.
    """
    input_file: Path = DEFAULT_INPUT_FILE
    sort_key: str = DEFAULT_SORT_KEY
    sort_order: str = DEFAULT_SORT_ORDER
    output_dir: Path = Path(".")
    bucket: str = DEFAULT_BUCKET
    sync_dest: str = DEFAULT_SYNC_DEST
    extract_content: bool = True
    append_scripts: bool = False
    show_progress: bool = True

    def __post_init__(self):
        if self.sort_key not in SORT_KEYS:
            raise ConfigurationError(
                f"Invalid sort option '{self.sort_key}'. Use 'timestamp' or 's3'."
            )
        if self.sort_order not in SORT_ORDERS:
            raise ConfigurationError(
                f"Invalid sort order '{self.sort_order}'. Use 'asc' or 'desc'."
            )

    @property
    def results_path(self) -> Path:
        return self.output_dir / RESULTS_FILE_NAME

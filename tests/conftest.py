import logging
import pytest
from datetime import datetime, UTC

SAMPLE_LISTING = """\
2023-03-01 10:00:00       2048 clip_20230110_120000.mp4
2023-01-15 08:30:00       1024 video_20230115_083000.mp4
this line is garbage
2023-02-01 09:00:00    5000000 no timestamp here.mov
2023-02-02 09:00:00       nope broken_size.mp4
"""

@pytest.fixture
def listing_file(tmp_path):
    """Writes SAMPLE_LISTING to a temp file and returns its path."""
    p = tmp_path / "list.txt"
    p.write_text(SAMPLE_LISTING, encoding="utf-8")
    return p

@pytest.fixture
def now():
    """Fixed reference time for age calculations."""
    return datetime(2023, 6, 1, 0, 0, 0, tzinfo=UTC)

@pytest.fixture(autouse=True)
def restore_root_logging():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)

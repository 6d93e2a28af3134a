import pytest
from datetime import datetime, UTC
from s3_list_sorter.exceptions import ConfigurationError
from s3_list_sorter.models import ObjectRecord
from s3_list_sorter.sorting import sort_records

def _rec(name, mod_day, content_day):
    return ObjectRecord(
        modification_time=datetime(2023, 1, mod_day, tzinfo=UTC),
        size_bytes=1,
        filename=name,
        content_timestamp=datetime(2023, 1, content_day, tzinfo=UTC),
    )

# Modification order is a, b, c; content order is the reverse.
RECORDS = [_rec("b", 2, 2), _rec("c", 3, 1), _rec("a", 1, 3)]

@pytest.mark.parametrize(
    "key,order,expected",
    [
        ("s3", "asc", ["a", "b", "c"]),
        ("s3", "desc", ["c", "b", "a"]),
        ("timestamp", "asc", ["c", "b", "a"]),
        ("timestamp", "desc", ["a", "b", "c"]),
    ],
)
def test_sort_orderings(key, order, expected):
    result = sort_records(RECORDS, key, order)
    assert [r.filename for r in result] == expected

def test_sort_returns_new_list():
    before = list(RECORDS)
    sort_records(RECORDS, "s3", "asc")
    assert RECORDS == before

def test_unknown_sort_key():
    with pytest.raises(ConfigurationError):
        sort_records(RECORDS, "size", "asc")

def test_unknown_sort_order():
    with pytest.raises(ConfigurationError):
        sort_records(RECORDS, "s3", "sideways")

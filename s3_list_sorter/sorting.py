from operator import attrgetter
from typing import Iterable, List

from . import config
from .exceptions import ConfigurationError
from .models import ObjectRecord


def sort_records(records: Iterable[ObjectRecord],
                 sort_key: str = config.DEFAULT_SORT_KEY,
                 order: str = config.DEFAULT_SORT_ORDER) -> List[ObjectRecord]:
    """
    Returns a new list ordered by 'timestamp' (content timestamp) or
    's3' (modification time), ascending or descending.
    """
    attr = config.SORT_KEYS.get(sort_key)
    if attr is None:
        raise ConfigurationError(f"Invalid sort option '{sort_key}'. Use 'timestamp' or 's3'.")
    if order not in config.SORT_ORDERS:
        raise ConfigurationError(f"Invalid sort order '{order}'. Use 'asc' or 'desc'.")

    return sorted(records, key=attrgetter(attr), reverse=(order == 'desc'))

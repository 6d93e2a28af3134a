import json
import logging
from pathlib import Path
from typing import Iterable

from .. import config
from ..exceptions import OutputWriteError
from ..models import ObjectRecord


def write_results(records: Iterable[ObjectRecord], path: Path) -> Path:
    """Dumps records, in order, as an indented JSON list."""
    data = [r.to_dict() for r in records]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=config.JSON_INDENT), encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Failed to write JSON data to {path}: {e}") from e

    logging.debug(f"Wrote {len(data)} records to {path}")
    return path

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

@dataclass(frozen=True)
class ObjectRecord:
    """
    One parsed line of an S3 listing.
    """
    modification_time: datetime   # as reported by the listing (UTC)
    size_bytes: int
    filename: str                 # object key

    # Taken from the key when it embeds YYYYMMDD_HHMMSS, else modification_time
    content_timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "s3_modification_time": self.modification_time.isoformat(),
            "size_bytes": self.size_bytes,
            "filename": self.filename,
            "content_timestamp": self.content_timestamp.isoformat(),
        }

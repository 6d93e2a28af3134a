"""
Custom exception hierarchy for the S3 listing sorter.

Only ListingParseError is recoverable: the offending line is skipped.
Everything else ends the run.
"""


class ListingSorterError(Exception):
    """Base exception for all listing sorter errors."""
    pass


class ListingParseError(ListingSorterError):
    """Raised when a single listing line cannot be parsed."""
    pass


class ListingReadError(ListingSorterError):
    """Raised when the listing file cannot be opened or read."""
    pass


class ConfigurationError(ListingSorterError):
    """Raised for an unknown sort key or sort order."""
    pass


class OutputWriteError(ListingSorterError):
    """Raised when a script or results file cannot be written."""
    pass

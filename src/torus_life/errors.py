"""Exception hierarchy for usage and pattern loading failures."""

from typing import Optional


class LifeError(Exception):
    """Base class for all torus_life errors."""


class UsageError(LifeError):
    """Command line arguments are missing or malformed."""


class PatternLoadError(LifeError):
    """A pattern file could not be turned into a cell group.

    Attributes:
        path: Source the pattern was read from
    """

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class FileOpenError(PatternLoadError):
    """Pattern file cannot be opened for reading."""


class ParseError(PatternLoadError):
    """A pattern line is not two non-negative integers.

    Attributes:
        line_number: 1-based line number of the offending record
    """

    def __init__(self, message: str, path: str, line_number: Optional[int] = None):
        super().__init__(message, path)
        self.line_number = line_number


class BoundsError(PatternLoadError):
    """A pattern coordinate lies outside the grid."""

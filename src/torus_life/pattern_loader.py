"""Pattern file loading.

A pattern file holds one live cell per line as two whitespace-separated
non-negative integers, ``row col``. Blank lines are skipped. Every
coordinate is validated against the grid dimensions so the engine can
be seeded without further checks.
"""

import re
from pathlib import Path
from typing import Iterable, Union
import logging

from .core.grid import CellGroup
from .errors import BoundsError, FileOpenError, ParseError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# ASCII decimal digits, optional leading plus sign
COORDINATE_PATTERN = re.compile(r'\+?[0-9]+')


def parse_cell_group(lines: Iterable[str], height: int, width: int,
                     source: str = "<string>") -> CellGroup:
    """Parse pattern records into a validated cell group.

    Args:
        lines: Pattern lines, with or without trailing newlines
        height: Grid height the coordinates must fit
        width: Grid width the coordinates must fit
        source: Name used in error messages

    Returns:
        Coordinates in file order

    Raises:
        ParseError: If a nonblank line is not exactly two non-negative integers
        BoundsError: If a coordinate does not fit the grid
    """
    group: CellGroup = []

    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue

        if len(tokens) != 2:
            raise ParseError(
                f"file read failed: {source}, line {line_number}: "
                f"expected 'row col', got {line.strip()!r}",
                source, line_number)

        if not all(COORDINATE_PATTERN.fullmatch(token) for token in tokens):
            raise ParseError(
                f"file read failed: {source}, line {line_number}: "
                f"not a non-negative integer pair: {line.strip()!r}",
                source, line_number)

        row, col = int(tokens[0]), int(tokens[1])

        if row >= height:
            raise BoundsError(f"row number should be less than: {height}", source)

        if col >= width:
            raise BoundsError(f"column number should be less than: {width}", source)

        group.append((row, col))

    return group


def load_cell_group(path: PathLike, height: int, width: int) -> CellGroup:
    """Load a cell group from a pattern file.

    Args:
        path: Pattern file path
        height: Grid height the coordinates must fit
        width: Grid width the coordinates must fit

    Returns:
        Validated coordinates in file order

    Raises:
        FileOpenError: If the file cannot be opened
        ParseError: If a record is malformed
        BoundsError: If a coordinate does not fit the grid
    """
    source = str(path)

    try:
        handle = open(path, 'r', encoding='utf-8')
    except OSError as e:
        raise FileOpenError(f"cannot open file: {source}", source) from e

    with handle:
        try:
            group = parse_cell_group(handle, height, width, source)
        except UnicodeDecodeError as e:
            raise ParseError(f"file read failed: {source}: not a text file", source) from e

    logger.info(f"Loaded {len(group)} cells from {source}")
    return group

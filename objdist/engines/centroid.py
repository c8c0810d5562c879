"""
OBJDIST Centroid Engine

Reduces one object's point file to the mean position of its points.

Point file layout (one point per line, single-space separated):

    <meta> <meta> <x> <y> <z> [more fields ignored]

The x field sits at a configurable offset (2 by default).

Averaging rule:
    The file is trimmed once, then split on newlines. Blank lines are
    skipped but still count toward the denominator, so interior blank
    lines pull the mean toward the origin. This is the long-standing
    behavior of the distance batch and existing outputs depend on it.

A coordinate field that does not parse is logged and contributes nothing;
the other fields on the line still count.
"""

import logging
import re
from typing import List

import numpy as np

from objdist.config.defaults import (
    FIELD_SEPARATOR,
    FILE_TRIM_CHARS,
    LINE_SEPARATOR,
    POINT_OFFSET,
)
from objdist.core.types import Centroid, Point
from objdist.utils import format_number

logger = logging.getLogger(__name__)

_FLOAT_RE = re.compile(
    r"(?:[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?)|nan)\Z",
    re.IGNORECASE,
)


def parse_coordinate(text: str) -> float:
    """
    Parse one coordinate field.

    Stricter than float(): surrounding whitespace (e.g. a stray '\\r'), '_'
    digit separators and signed nan are rejected. A finite literal too large
    for float64 is logged and returned as +/-inf.

    Raises:
        ValueError: if text is not a plain decimal float literal
    """
    if not _FLOAT_RE.match(text):
        raise ValueError(f"invalid syntax: {text!r}")
    value = float(text)
    if np.isinf(value) and "inf" not in text.lower():
        logger.warning(f"Unable to parse {text}: value out of range")
    return value


def parse_point(line: str, offset: int = POINT_OFFSET) -> Point:
    """
    Parse the x, y, z fields of one line.

    Fields that are missing or fail to parse are logged and left at 0.0.
    """
    args = line.split(FIELD_SEPARATOR)
    values = [0.0, 0.0, 0.0]

    for axis in range(3):
        index = offset + axis
        if index >= len(args):
            logger.warning(f"Unable to parse field {index}: line has only {len(args)} fields")
            continue
        try:
            values[axis] = parse_coordinate(args[index])
        except ValueError as e:
            logger.warning(f"Unable to parse {args[index]}:{e}")

    return Point(*values)


def split_lines(content: str) -> List[str]:
    """Trim the whole file once and split into lines (blank lines kept)."""
    return content.strip(FILE_TRIM_CHARS).split(LINE_SEPARATOR)


def compute_centroid(content: str, *, offset: int = POINT_OFFSET) -> Centroid:
    """
    Compute the centroid of one object's point file.

    Args:
        content: Full text of the point file
        offset: Index of the x field on each line

    Returns:
        (x, y, z) as float32. An empty file gives (0, 0, 0); a zero
        denominator gives non-finite values rather than an error.
    """
    lines = split_lines(content)

    sums = np.zeros(3, dtype=np.float64)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for line in lines:
            if line == "":
                continue
            sums += parse_point(line, offset).as_array()

        mean = sums / np.float64(len(lines))
        narrowed = mean.astype(np.float32)

    logger.info("avg : " + " ".join(format_number(v) for v in mean))

    x, y, z = narrowed
    return (x, y, z)

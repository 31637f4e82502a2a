"""
Decoding raw spreadsheet rows into RowRecords.

Layout of a content row:
    Column 0: content type name   ('ArticlePage')
    Column 1: content name        ('About us')
    Column 2: level               (0, 1, 2 ...; numeric cell)
    Column 3+: field cells        ('title:About us', 'intro:Who we are')
"""

import math
from dataclasses import dataclass
from numbers import Real

from .config import TYPE_COLUMN, NAME_COLUMN, LEVEL_COLUMN, FIRST_FIELD_COLUMN
from .exceptions import MalformedRowError


@dataclass(frozen=True)
class RowRecord:
    type_name: str
    name: str
    level: int
    raw_fields: tuple = ()
    row_number: int = 0


def _cell(cells, index):
    return cells[index] if index < len(cells) else None


def _required_text(cells, index, label, row_number):
    value = _cell(cells, index)
    if not isinstance(value, str) or not value.strip():
        raise MalformedRowError(row_number, f"{label} (column {index + 1}) must be non-empty text, got {value!r}")
    return value


def decode_level(value, row_number=0):
    """
    Read the level cell as a whole number.

    Non-integral values are truncated toward zero (1.9 -> 1).

    Examples:
        >>> decode_level(2.0)
        2
        >>> decode_level(1.9)
        1

    Text cells ('2'), booleans, NaN and negative numbers are rejected with
    MalformedRowError.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise MalformedRowError(row_number, f"level must be numeric, got {value!r}")
    if not math.isfinite(value):
        raise MalformedRowError(row_number, f"level must be a finite number, got {value!r}")
    level = math.trunc(value)
    if level < 0:
        raise MalformedRowError(row_number, f"level must not be negative, got {value!r}")
    return int(level)


def decode_row(cells, row_number=0):
    """
    Turn one row of cells into a RowRecord.

    Field cells that are empty, whitespace-only or not text are dropped; the
    rest keep their sheet order and are not otherwise touched.

    Raises:
        MalformedRowError: missing type or name, or a level that is not a
                           non-negative number
    """
    # Type names are lookup keys, so surrounding spaces go; the name is kept as typed
    type_name = _required_text(cells, TYPE_COLUMN, 'content type', row_number).strip()
    name = _required_text(cells, NAME_COLUMN, 'name', row_number)
    level = decode_level(_cell(cells, LEVEL_COLUMN), row_number)

    raw_fields = tuple(
        cell for cell in cells[FIRST_FIELD_COLUMN:]
        if isinstance(cell, str) and cell.strip()
    )
    return RowRecord(type_name, name, level, raw_fields, row_number)


def decode_rows(rows):
    """Decode every (row_number, cells) pair; the first bad row aborts."""
    return [decode_row(cells, row_number) for row_number, cells in rows]

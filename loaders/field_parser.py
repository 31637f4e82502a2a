"""
Parsing of "propertyName:propertyValue" field cells.

Only the first ':' separates the name from the value, so values may contain
colons of their own ('link:https://example.com'). Line breaks inside a value
become '<br />' so multi-line cells keep their breaks in rich-text properties.
"""

import re
from dataclasses import dataclass

from .config import FIELD_DELIMITER, LINE_BREAK_MARKER
from .exceptions import NoDelimiterError

LINE_BREAK_PATTERN = re.compile(r'\r\n?|\n')


@dataclass(frozen=True)
class PropertyAssignment:
    name: str
    value: str


def normalize_line_breaks(value):
    return LINE_BREAK_PATTERN.sub(LINE_BREAK_MARKER, value)


def parse_field(raw_field):
    """
    Parse one field cell.

    Returns:
        PropertyAssignment, or None when the name or the value is blank

    Raises:
        NoDelimiterError: the cell contains no ':' at all

    Examples:
        >>> parse_field('color:blue')
        PropertyAssignment(name='color', value='blue')
        >>> parse_field('body:line one\\r\\nline two')
        PropertyAssignment(name='body', value='line one<br />line two')
        >>> parse_field('color:') is None
        True
    """
    name, delimiter, value = raw_field.partition(FIELD_DELIMITER)
    if not delimiter:
        raise NoDelimiterError(raw_field)

    if not name.strip():
        return None
    if not value.strip():
        return None

    return PropertyAssignment(name, normalize_line_breaks(value))

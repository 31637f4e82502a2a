"""
Rebuilding the content hierarchy from the level column.

The sheet never names a row's parent. It is inferred from how the row's level
compares with the level of the row just before it:

    level 0                 -> configured root
    same as previous        -> previous row's parent (sibling)
    deeper than previous    -> previous row's own node (child)
    shallower than previous -> parent of the previous row's parent

Example (root = 1, new node ids shown after the arrow):

    Page  Home     0   -> parent 1,  node 10
    Page  About    1   -> parent 10, node 11
    Page  Team     2   -> parent 11, node 12
    Page  Contact  1   -> parent 10 (parent of 11), node 13
    Page  Blog     0   -> parent 1

The state carried between rows is a TreeCursor. It is replaced once per row,
after the row's node has been saved, via TreeBuilder.advance().
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from .config import SENTINEL_LEVEL
from .exceptions import MalformedRowError, ParentLookupError
from .row_decoder import RowRecord

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TreeCursor:
    previous_level: int = SENTINEL_LEVEL
    previous_parent: Optional[int] = None
    previous_node: Optional[int] = None


@dataclass(frozen=True)
class PlacedNode:
    parent: int
    record: RowRecord
    order: int


class TreeBuilder:
    """
    Resolves the parent of each row, one import run per instance.

    Args:
        root_id: Content id level-0 rows are placed under
        parent_of: Callable returning the parent id of a content id (or None
                   when it has none); only used when a row ascends
    """

    def __init__(self, root_id, parent_of):
        self.root_id = root_id
        self.parent_of = parent_of
        self._next_order = 0

    @staticmethod
    def initial_cursor():
        return TreeCursor()

    def resolve_parent(self, record, cursor):
        level = record.level

        if level == 0:
            return self.root_id

        if level == cursor.previous_level:
            return cursor.previous_parent

        if level > cursor.previous_level:
            if cursor.previous_node is None:
                raise MalformedRowError(
                    record.row_number,
                    f"level {level} has no preceding content to nest under; the first row must be level 0",
                )
            return cursor.previous_node

        parent = self.parent_of(cursor.previous_parent)
        if parent is None:
            raise ParentLookupError(cursor.previous_parent, record.row_number)
        return parent

    def place(self, record, cursor):
        parent = self.resolve_parent(record, cursor)
        placed = PlacedNode(parent=parent, record=record, order=self._next_order)
        self._next_order += 1
        log.debug('row_placed', row=record.row_number, level=record.level, parent=parent, order=placed.order)
        return placed

    @staticmethod
    def advance(placed, node_id):
        """Cursor for the next row, once `placed` has been saved as `node_id`."""
        return TreeCursor(
            previous_level=placed.record.level,
            previous_parent=placed.parent,
            previous_node=node_id,
        )

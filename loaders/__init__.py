"""
Spreadsheet loaders for the content tree importer.

This package turns the rows of a content workbook into placed tree nodes,
ready to be materialized in the content store.

Architecture:
    Excel → excel_loader → row_decoder → tree_builder (+ field_parser per field)

Modules:
    config: Configuration constants and environment overrides
    exceptions: Import error taxonomy
    excel_loader: Reading rows from the first worksheet
    row_decoder: Raw row → RowRecord
    field_parser: 'name:value' cell → PropertyAssignment
    tree_builder: Parent resolution from the level column
    logging_config: structlog setup
"""

from .excel_loader import read_rows, source_available
from .row_decoder import RowRecord, decode_row, decode_rows
from .field_parser import PropertyAssignment, parse_field
from .tree_builder import TreeBuilder, TreeCursor, PlacedNode

__all__ = [
    'read_rows', 'source_available',
    'RowRecord', 'decode_row', 'decode_rows',
    'PropertyAssignment', 'parse_field',
    'TreeBuilder', 'TreeCursor', 'PlacedNode',
]

"""
Reading raw rows from the source workbook.

Only the first worksheet is read, without a header row: every non-blank row is
a content item. Cells come back as plain Python values (str, int, float,
datetime) with empty cells as None, ready for the row decoder.

Functions:
    source_available: Whether there is a workbook worth opening at a path
    read_rows: Load the first worksheet as a list of (row_number, cells)
"""

import os
import warnings

import openpyxl
import structlog

log = structlog.get_logger(__name__)

# Suppress openpyxl warnings about styles/formatting (we only read data values)
warnings.filterwarnings('ignore', category=UserWarning, module='openpyxl')


def source_available(path):
    """
    True when `path` is an existing, non-empty file.

    A missing or zero-byte file means there is nothing to import, which is a
    normal outcome rather than an error.
    """
    return os.path.isfile(path) and os.path.getsize(path) > 0


def read_rows(path):
    """
    Read the first worksheet of the workbook at `path`.

    Args:
        path: Path of an .xlsx workbook

    Returns:
        list: [(row_number, [cell, ...]), ...] in sheet order. row_number is
              the 1-based spreadsheet row, kept for error messages. Rows with
              no values at all are skipped.

    Raises:
        OSError and openpyxl errors (InvalidFileException, BadZipFile) when the
        file cannot be read; these are fatal for the import.

    Examples:
        >>> read_rows('App_Data/Content.xlsx')[:2]
        [(1, ['Page', 'Home', 0, 'title:Hi']), (2, ['Page', 'About', 1])]
    """
    # Full (not read_only) load: the sheet size comes from the cells themselves,
    # not from a <dimension> tag that some writers leave stale
    wb = openpyxl.load_workbook(path, data_only=True)
    try:
        ws = wb.worksheets[0]
        rows = []
        for row_number, values in enumerate(ws.iter_rows(values_only=True), start=1):
            cells = list(values)
            # Drop trailing empties so short rows stay short
            while cells and cells[-1] is None:
                cells.pop()
            if not cells:
                continue
            rows.append((row_number, cells))
    finally:
        wb.close()

    log.info('rows_read', path=str(path), rows=len(rows))
    return rows

"""
Errors raised while turning spreadsheet rows into content.

Only NoDelimiterError is recoverable: it concerns a single field cell and the
materializer logs it and moves on. Everything else aborts the import run.
"""


class ContentImportError(Exception):
    """Base class for all import failures."""


class ConfigurationError(ContentImportError):
    pass


class MalformedRowError(ContentImportError, ValueError):
    """A row is missing its type, name or a usable level."""

    def __init__(self, row_number, message):
        self.row_number = row_number
        super().__init__(f"Row {row_number}: {message}")


class NoDelimiterError(ContentImportError, ValueError):
    def __init__(self, raw_field):
        self.raw_field = raw_field
        super().__init__(f"Field {raw_field!r} has no ':' between property name and value")


class UnknownTypeError(ContentImportError, LookupError):
    def __init__(self, type_name, row_number=None):
        self.type_name = type_name
        self.row_number = row_number
        where = f" (row {row_number})" if row_number is not None else ""
        super().__init__(f"The content type provided could not be matched: {type_name!r}{where}")


class ParentLookupError(ContentImportError, LookupError):
    """Ascending from a content item that has no parent of its own."""

    def __init__(self, content_id, row_number=None):
        self.content_id = content_id
        self.row_number = row_number
        where = f"Row {row_number}: " if row_number is not None else ""
        super().__init__(f"{where}content {content_id} has no parent to ascend to")

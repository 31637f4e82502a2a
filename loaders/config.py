"""
Configuration for the content import job.

Constants live here so thresholds and names can be adjusted without touching
core logic. The two job settings (source file and parent id) can be overridden
through environment variables, the same way they would be set per deployment.
"""

import os

from models.database import START_PAGE_ID, CHILD_ORDER_INDEX

from .exceptions import ConfigurationError

# Environment variable names
APP_ROOT_KEY = 'CONTENT_IMPORT_APP_ROOT'
SOURCE_FILE_KEY = 'CONTENT_IMPORT_FILE'
PARENT_ID_KEY = 'CONTENT_IMPORT_PARENT_ID'
LOG_LEVEL_KEY = 'LOG_LEVEL'
LOG_FORMAT_KEY = 'LOG_FORMAT'

# Source workbook location: <app root>/App_Data/<file name>
DATA_DIR_NAME = 'App_Data'
DEFAULT_FILE_NAME = 'Content.xlsx'

# Spreadsheet columns
TYPE_COLUMN = 0
NAME_COLUMN = 1
LEVEL_COLUMN = 2
FIRST_FIELD_COLUMN = 3

# Field cells look like "propertyName:propertyValue"
FIELD_DELIMITER = ':'
LINE_BREAK_MARKER = '<br />'

# Ordering metadata written on every imported node
CHILD_ORDER_RULE = CHILD_ORDER_INDEX

# Level of the cursor before the first row; never equal to a real level
SENTINEL_LEVEL = -1

# Summary strings reported back to the scheduler host
NO_FILE_MESSAGE = 'No file found to process'
STOPPED_MESSAGE = 'Stop of job was called'
IMPORTED_MESSAGE = '{count} items imported.'


def _setting(environ, key):
    value = (environ if environ is not None else os.environ).get(key)
    if value is None or not value.strip():
        return None
    return value.strip()


def source_file_path(environ=None):
    """
    Path of the workbook to import.

    Falls back to App_Data/Content.xlsx under the app root (current directory
    unless CONTENT_IMPORT_APP_ROOT is set) when no file name is configured.

    Examples:
        >>> source_file_path({'CONTENT_IMPORT_APP_ROOT': '/srv/site'})
        '/srv/site/App_Data/Content.xlsx'
        >>> source_file_path({'CONTENT_IMPORT_APP_ROOT': '/srv/site',
        ...                   'CONTENT_IMPORT_FILE': 'Menu.xlsx'})
        '/srv/site/App_Data/Menu.xlsx'
    """
    app_root = _setting(environ, APP_ROOT_KEY) or os.getcwd()
    file_name = _setting(environ, SOURCE_FILE_KEY) or DEFAULT_FILE_NAME
    return os.path.join(app_root, DATA_DIR_NAME, file_name)


def parent_content_id(environ=None):
    """
    Id of the content item the imported tree is placed under.

    Defaults to the start page. A value that is not an integer is a
    deployment mistake and raises ConfigurationError.
    """
    value = _setting(environ, PARENT_ID_KEY)
    if value is None:
        return START_PAGE_ID
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{PARENT_ID_KEY} must be an integer content id, got {value!r}") from None


def log_level(environ=None):
    return (_setting(environ, LOG_LEVEL_KEY) or 'INFO').upper()


def log_format(environ=None):
    return (_setting(environ, LOG_FORMAT_KEY) or 'console').lower()

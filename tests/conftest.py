import os
import sys

import openpyxl
import pytest
from sqlalchemy.orm import Session

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from models import get_engine, create_schema
from services import ContentRepository, TypeRepository

PAGE_PROPERTIES = [
    {'name': 'title', 'type': 'string', 'required': True},
    {'name': 'body', 'type': 'xhtml'},
    {'name': 'color', 'type': 'string'},
    {'name': 'weight', 'type': 'integer'},
    {'name': 'hideInMenu', 'type': 'boolean', 'default': False},
]

LINK_PROPERTIES = [
    {'name': 'target', 'type': 'url', 'required': True},
]


@pytest.fixture
def engine():
    engine = get_engine('sqlite://')
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def content_repo(session):
    repository = ContentRepository(session)
    repository.ensure_root()
    return repository


@pytest.fixture
def type_repo(session):
    repository = TypeRepository(session)
    repository.register('Page', PAGE_PROPERTIES)
    repository.register('Link', LINK_PROPERTIES)
    return repository


@pytest.fixture
def make_workbook(tmp_path):
    """Writes rows to the first sheet of App_Data/<file_name> under tmp_path."""
    def _make(rows, file_name='Content.xlsx'):
        data_dir = tmp_path / 'App_Data'
        data_dir.mkdir(exist_ok=True)
        path = data_dir / file_name
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = 'Content'
        for row_idx, row in enumerate(rows, 1):
            for col_idx, value in enumerate(row, 1):
                if value is not None:
                    ws.cell(row=row_idx, column=col_idx, value=value)
        wb.save(path)
        return str(path)
    return _make

import json
import os
import sys

# Add project root to sys.path
sys.path.append(os.getcwd())

from sqlalchemy.orm import Session

from models import get_engine, create_schema
from services import ContentRepository, TypeRepository

DEFAULT_TYPES_FILE = 'content_types.json'


def init_db(types_file=DEFAULT_TYPES_FILE, engine=None):
    print("Initializing Database...")
    engine = engine or get_engine()
    create_schema(engine)

    definitions = []
    if os.path.exists(types_file):
        with open(types_file, encoding='utf-8') as f:
            definitions = json.load(f)
    else:
        print(f"Warning: '{types_file}' not found, no content types registered")

    with Session(engine) as session:
        root = ContentRepository(session).ensure_root()
        print(f"Root content: {root.id} ({root.name})")

        types = TypeRepository(session)
        for definition in definitions:
            types.register(
                definition['name'],
                definition.get('properties', []),
                display_name=definition.get('display_name'),
            )
            print(f"  Registered content type: {definition['name']}")

    print("Database initialized successfully.")


if __name__ == "__main__":
    init_db(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_TYPES_FILE)

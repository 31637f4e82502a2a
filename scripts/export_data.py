import json
import os
import sys

# Add project root to sys.path
sys.path.append(os.getcwd())

import pandas as pd
from sqlalchemy.orm import Session

from models import get_engine, START_PAGE_ID
from services import ContentRepository, TypeRepository


def flatten_tree(tree, type_names, depth=0):
    """Depth-first rows (one per node) for a tree returned by ContentRepository.tree()."""
    rows = [{
        'id': tree['id'],
        'parent_id': tree['parent_id'],
        'depth': depth,
        'type': type_names.get(tree['content_type_id'], ''),
        'name': tree['name'],
        'peer_order': tree['peer_order'],
        'status': tree['status'],
        **{f"property:{k}": v for k, v in tree['properties'].items()},
    }]
    for child in tree['children']:
        rows.extend(flatten_tree(child, type_names, depth + 1))
    return rows


def export_content(output_dir='export', engine=None):
    engine = engine or get_engine()
    os.makedirs(output_dir, exist_ok=True)

    with Session(engine) as session:
        tree = ContentRepository(session).tree(START_PAGE_ID)
        type_names = {t.id: t.name for t in TypeRepository(session).list_types()}

    print("Exporting content tree...")
    with open(os.path.join(output_dir, 'content_tree.json'), 'w', encoding='utf-8') as f:
        json.dump(tree, f, indent=2)

    print("Exporting content list...")
    df = pd.DataFrame(flatten_tree(tree, type_names))
    df.to_excel(os.path.join(output_dir, 'content_list.xlsx'), index=False, engine='openpyxl')

    print(f"Export complete. {len(df)} rows saved to {output_dir}")
    return df


if __name__ == '__main__':
    export_content(sys.argv[1] if len(sys.argv) > 1 else 'export')

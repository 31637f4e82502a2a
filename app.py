from flask import Flask, jsonify, abort, g

from models import get_engine, get_session_factory, ContentNotFoundError, START_PAGE_ID
from services import ContentRepository, TypeRepository

app = Flask(__name__)

# Initialize DB connection factory
engine = get_engine()
SessionLocal = get_session_factory(engine)


# Request Context Config
@app.before_request
def get_db():
    if 'db' not in g:
        g.db = SessionLocal()


@app.teardown_request
def close_db(e=None):
    db = g.pop('db', None)
    if db is not None:
        db.close()


def get_content_repository():
    return ContentRepository(g.db)


@app.route('/api/content')
def api_content_tree():
    repository = get_content_repository()
    try:
        return jsonify(repository.tree(START_PAGE_ID))
    except ContentNotFoundError:
        abort(404)


@app.route('/api/content/<int:content_id>')
def api_content(content_id):
    repository = get_content_repository()
    try:
        node = repository.get(content_id)
    except ContentNotFoundError:
        abort(404)

    data = node.to_dict()
    data['children'] = [
        {'id': child.id, 'name': child.name, 'peer_order': child.peer_order}
        for child in repository.children(node.id)
    ]
    return jsonify(data)


@app.route('/api/types')
def api_types():
    types = TypeRepository(g.db).list_types()
    return jsonify([
        {'id': t.id, 'name': t.name, 'display_name': t.display_name, 'properties': t.properties or []}
        for t in types
    ])


if __name__ == '__main__':
    app.run(debug=True, port=5000)

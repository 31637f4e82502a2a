"""Tests for content instances, the content repository and the type repository."""

import pytest

from models import (
    ContentNode,
    ContentNotFoundError,
    ContentValidationError,
    UnknownPropertyError,
    PropertyCoercionError,
    PropertyError,
    START_PAGE_ID,
    CHILD_ORDER_INDEX,
    CHILD_ORDER_NAME,
)
from services import SaveAction


def new_page(content_repo, type_repo, name, parent_id=START_PAGE_ID):
    instance = content_repo.get_default(parent_id, type_repo.load('Page').id)
    instance.name = name
    return instance


class TestContentInstance:

    def test_defaults_come_from_type(self, content_repo, type_repo):
        instance = new_page(content_repo, type_repo, 'Home')
        assert instance.properties == {'hideInMenu': False}
        assert instance.parent_id == START_PAGE_ID
        assert instance.type_name == 'Page'

    def test_set_string_property(self, content_repo, type_repo):
        instance = new_page(content_repo, type_repo, 'Home')
        instance.set_property('title', 'Welcome')
        assert instance.get_property('title') == 'Welcome'

    def test_set_integer_property(self, content_repo, type_repo):
        instance = new_page(content_repo, type_repo, 'Home')
        instance.set_property('weight', ' 12 ')
        assert instance.get_property('weight') == 12

    @pytest.mark.parametrize('raw, expected', [('true', True), ('No', False), ('1', True), ('0', False)])
    def test_set_boolean_property(self, content_repo, type_repo, raw, expected):
        instance = new_page(content_repo, type_repo, 'Home')
        instance.set_property('hideInMenu', raw)
        assert instance.get_property('hideInMenu') is expected

    def test_unknown_property(self, content_repo, type_repo):
        instance = new_page(content_repo, type_repo, 'Home')
        with pytest.raises(UnknownPropertyError) as excinfo:
            instance.set_property('colour', 'red')
        assert excinfo.value.property_name == 'colour'
        assert 'colour' not in instance.properties

    def test_value_that_does_not_coerce(self, content_repo, type_repo):
        instance = new_page(content_repo, type_repo, 'Home')
        with pytest.raises(PropertyCoercionError):
            instance.set_property('weight', 'heavy')
        with pytest.raises(PropertyError):
            instance.set_property('hideInMenu', 'maybe')

    def test_url_property(self, content_repo, type_repo):
        instance = content_repo.get_default(START_PAGE_ID, type_repo.load('Link').id)
        instance.set_property('target', 'https://example.com/a:b')
        assert instance.get_property('target') == 'https://example.com/a:b'
        instance.set_property('target', '/about')
        with pytest.raises(PropertyCoercionError):
            instance.set_property('target', 'example')

    def test_missing_required(self, content_repo, type_repo):
        instance = new_page(content_repo, type_repo, 'Home')
        assert instance.missing_required() == ['title']
        instance.set_property('title', 'Hi')
        assert instance.missing_required() == []


class TestContentRepository:

    def test_ensure_root_is_idempotent(self, content_repo, session):
        content_repo.ensure_root()
        assert session.query(ContentNode).count() == 1
        assert content_repo.get(START_PAGE_ID).parent_id is None

    def test_get_missing_node(self, content_repo):
        with pytest.raises(ContentNotFoundError):
            content_repo.get(999)

    def test_get_default_under_missing_parent(self, content_repo, type_repo):
        with pytest.raises(ContentNotFoundError):
            content_repo.get_default(999, type_repo.load('Page').id)

    def test_save_skipping_validation_and_publishing(self, content_repo, type_repo):
        instance = new_page(content_repo, type_repo, 'Home')
        instance.set_property('color', 'blue')
        node_id = content_repo.save(instance, SaveAction.SKIP_VALIDATION | SaveAction.PUBLISH)

        node = content_repo.get(node_id)
        assert node.name == 'Home'
        assert node.parent_id == START_PAGE_ID
        assert node.properties == {'hideInMenu': False, 'color': 'blue'}
        assert node.is_published
        assert node.published_at is not None

    def test_save_validates_required_properties(self, content_repo, type_repo, session):
        instance = new_page(content_repo, type_repo, 'Home')
        with pytest.raises(ContentValidationError) as excinfo:
            content_repo.save(instance)
        assert excinfo.value.missing == ['title']
        assert session.query(ContentNode).count() == 1

    def test_save_without_publish_is_draft(self, content_repo, type_repo):
        instance = new_page(content_repo, type_repo, 'Home')
        instance.set_property('title', 'Home')
        node = content_repo.get(content_repo.save(instance))
        assert not node.is_published
        assert node.published_at is None

    def test_parent_of(self, content_repo, type_repo):
        node_id = content_repo.save(new_page(content_repo, type_repo, 'Home'), SaveAction.SKIP_VALIDATION)
        assert content_repo.parent_of(node_id) == START_PAGE_ID
        assert content_repo.parent_of(START_PAGE_ID) is None

    def test_children_by_index(self, content_repo, type_repo):
        for order, name in [(2, 'C'), (0, 'B'), (1, 'A')]:
            instance = new_page(content_repo, type_repo, name)
            instance.peer_order = order
            content_repo.save(instance, SaveAction.SKIP_VALIDATION)
        assert [c.name for c in content_repo.children(START_PAGE_ID)] == ['B', 'A', 'C']

    def test_children_by_name(self, content_repo, type_repo, session):
        root = content_repo.get(START_PAGE_ID)
        root.child_order_rule = CHILD_ORDER_NAME
        session.commit()
        for order, name in [(0, 'B'), (1, 'A')]:
            instance = new_page(content_repo, type_repo, name)
            instance.peer_order = order
            content_repo.save(instance, SaveAction.SKIP_VALIDATION)
        assert [c.name for c in content_repo.children(START_PAGE_ID)] == ['A', 'B']

    def test_tree(self, content_repo, type_repo):
        home_id = content_repo.save(new_page(content_repo, type_repo, 'Home'), SaveAction.SKIP_VALIDATION)
        content_repo.save(new_page(content_repo, type_repo, 'Child', parent_id=home_id), SaveAction.SKIP_VALIDATION)

        tree = content_repo.tree(START_PAGE_ID)
        assert tree['name'] == 'Start'
        assert tree['child_order_rule'] == CHILD_ORDER_INDEX
        assert [c['name'] for c in tree['children']] == ['Home']
        assert [c['name'] for c in tree['children'][0]['children']] == ['Child']


class TestTypeRepository:

    def test_load_unknown_type(self, type_repo):
        assert type_repo.load('Missing') is None

    def test_register_replaces_properties(self, type_repo):
        type_repo.register('Page', [{'name': 'title'}])
        assert type_repo.load('Page').properties == [{'name': 'title'}]
        assert len(type_repo.list_types()) == 2

    def test_register_rejects_unknown_kind(self, type_repo):
        with pytest.raises(ValueError):
            type_repo.register('Odd', [{'name': 'x', 'type': 'blob'}])

    def test_list_types_sorted(self, type_repo):
        assert [t.name for t in type_repo.list_types()] == ['Link', 'Page']


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

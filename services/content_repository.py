import enum
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from models import (
    ContentNode,
    ContentType,
    ContentInstance,
    ContentNotFoundError,
    ContentValidationError,
    START_PAGE_ID,
    CHILD_ORDER_INDEX,
)
from models.database import START_PAGE_NAME, STATUS_DRAFT, STATUS_PUBLISHED


class SaveAction(enum.Flag):
    DEFAULT = 0
    SKIP_VALIDATION = enum.auto()
    PUBLISH = enum.auto()


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ContentRepository:
    def __init__(self, session: Session):
        self.session = session

    def ensure_root(self):
        """Creates the start page if the tree has no root yet."""
        root = self.session.get(ContentNode, START_PAGE_ID)
        if root is None:
            now = _utcnow()
            root = ContentNode(
                id=START_PAGE_ID,
                name=START_PAGE_NAME,
                properties={},
                peer_order=0,
                child_order_rule=CHILD_ORDER_INDEX,
                status=STATUS_PUBLISHED,
                created_at=now,
                published_at=now,
            )
            self.session.add(root)
            self.session.commit()
        return root

    def get(self, content_id):
        """Fetches a content node; raises ContentNotFoundError if it does not exist."""
        node = self.session.get(ContentNode, content_id)
        if node is None:
            raise ContentNotFoundError(content_id)
        return node

    def parent_of(self, content_id):
        return self.get(content_id).parent_id

    def get_default(self, parent_id, type_id):
        """
        A new, unsaved instance of the content type `type_id` under `parent_id`,
        with the type's property defaults filled in.
        """
        self.get(parent_id)
        content_type = self.session.get(ContentType, type_id)
        if content_type is None:
            raise LookupError(f"No content type with id {type_id}")
        return ContentInstance(content_type, parent_id)

    def save(self, instance, action=SaveAction.DEFAULT):
        """
        Persists `instance` as a new content node and returns its id.

        Required properties are checked unless SKIP_VALIDATION is given;
        PUBLISH makes the node published straight away.
        """
        if not action & SaveAction.SKIP_VALIDATION:
            missing = instance.missing_required()
            if missing:
                raise ContentValidationError(instance.name, missing)

        now = _utcnow()
        publish = bool(action & SaveAction.PUBLISH)
        node = ContentNode(
            parent_id=instance.parent_id,
            content_type_id=instance.content_type.id,
            name=instance.name,
            properties=instance.properties,
            peer_order=instance.peer_order,
            child_order_rule=instance.child_order_rule,
            status=STATUS_PUBLISHED if publish else STATUS_DRAFT,
            created_at=now,
            published_at=now if publish else None,
        )
        self.session.add(node)
        self.session.commit()
        return node.id

    def children(self, content_id):
        """Children of a node, sorted by the node's child order rule."""
        parent = self.get(content_id)
        query = self.session.query(ContentNode).filter(ContentNode.parent_id == parent.id)
        if parent.child_order_rule == CHILD_ORDER_INDEX:
            query = query.order_by(ContentNode.peer_order, ContentNode.id)
        else:
            query = query.order_by(ContentNode.name, ContentNode.id)
        return query.all()

    def tree(self, content_id):
        """Nested dict of a node and all its descendants."""
        node = self.get(content_id)
        data = node.to_dict()
        data['children'] = [self.tree(child.id) for child in self.children(node.id)]
        return data

import os

from sqlalchemy import create_engine, Column, String, Integer, JSON, DateTime, ForeignKey
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

DEFAULT_DATABASE_URL = 'sqlite:///content.db'

# Well-known root of the content tree (the "start page")
START_PAGE_ID = 1
START_PAGE_NAME = 'Start'

STATUS_DRAFT = 'draft'
STATUS_PUBLISHED = 'published'

# Child order rules a node can declare for its children
CHILD_ORDER_INDEX = 'Index'
CHILD_ORDER_NAME = 'Name'


Base = declarative_base()


class ContentType(Base):
    """
    A registered content type and the properties its instances may carry.

    `properties` is a list of property definitions:
        [{'name': 'title', 'type': 'string', 'required': True},
         {'name': 'body', 'type': 'xhtml'},
         {'name': 'weight', 'type': 'integer', 'default': 0}]
    """
    __tablename__ = 'content_types'

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, index=True, nullable=False)
    display_name = Column(String)
    properties = Column(JSON, default=list)

    def property_definition(self, name):
        for definition in self.properties or []:
            if definition.get('name') == name:
                return definition
        return None

    def __repr__(self):
        return f"<ContentType {self.name}>"


class ContentNode(Base):
    __tablename__ = 'content_nodes'

    id = Column(Integer, primary_key=True)
    parent_id = Column(Integer, ForeignKey('content_nodes.id'), index=True, nullable=True)
    content_type_id = Column(Integer, ForeignKey('content_types.id'), nullable=True)
    name = Column(String, nullable=False)

    # Property bag, keyed by property name
    properties = Column(JSON, default=dict)

    # Sort key among siblings and the rule this node applies to its own children
    peer_order = Column(Integer, default=0)
    child_order_rule = Column(String, default=CHILD_ORDER_INDEX)

    status = Column(String, default=STATUS_DRAFT)
    created_at = Column(DateTime)
    published_at = Column(DateTime, nullable=True)

    @property
    def is_published(self):
        return self.status == STATUS_PUBLISHED

    def to_dict(self):
        return {
            'id': self.id,
            'parent_id': self.parent_id,
            'content_type_id': self.content_type_id,
            'name': self.name,
            'properties': dict(self.properties or {}),
            'peer_order': self.peer_order,
            'child_order_rule': self.child_order_rule,
            'status': self.status,
        }

    def __repr__(self):
        return f"<ContentNode {self.id} {self.name!r} parent={self.parent_id}>"


def get_engine(db_url=None):
    db_url = db_url or os.environ.get('DATABASE_URL', DEFAULT_DATABASE_URL)
    if db_url in ('sqlite://', 'sqlite:///:memory:'):
        # One shared connection so every session sees the same in-memory database
        return create_engine(
            db_url,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
        )
    return create_engine(db_url)


def get_session_factory(engine):
    return sessionmaker(bind=engine)


def create_schema(engine):
    Base.metadata.create_all(engine)

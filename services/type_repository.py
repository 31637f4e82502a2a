from sqlalchemy.orm import Session

from models import ContentType
from models.content import COERCERS


class TypeRepository:
    def __init__(self, session: Session):
        self.session = session

    def load(self, name):
        """Returns the content type registered under `name`, or None."""
        return self.session.query(ContentType).filter(ContentType.name == name).one_or_none()

    def get(self, type_id):
        return self.session.get(ContentType, type_id)

    def list_types(self):
        return self.session.query(ContentType).order_by(ContentType.name).all()

    def register(self, name, properties=None, display_name=None):
        """
        Creates the content type `name`, or replaces the property definitions
        of an existing one.
        """
        properties = list(properties or [])
        for definition in properties:
            if not definition.get('name'):
                raise ValueError(f"Property definition without a name on type '{name}'")
            kind = definition.get('type', 'string')
            if kind not in COERCERS:
                raise ValueError(f"Unknown property type '{kind}' for '{name}.{definition['name']}'")

        content_type = self.load(name)
        if content_type is None:
            content_type = ContentType(name=name)
            self.session.add(content_type)
        content_type.display_name = display_name or name
        content_type.properties = properties
        self.session.commit()
        return content_type

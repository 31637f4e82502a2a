"""
Creating and saving one content node per placed spreadsheet row.
"""

import structlog

from loaders.config import CHILD_ORDER_RULE
from loaders.exceptions import NoDelimiterError, UnknownTypeError
from loaders.field_parser import parse_field
from models import PropertyError

from .content_repository import SaveAction

log = structlog.get_logger(__name__)

IMPORT_SAVE_ACTION = SaveAction.SKIP_VALIDATION | SaveAction.PUBLISH


class ContentMaterializer:
    def __init__(self, type_repository, content_repository):
        self.type_repository = type_repository
        self.content_repository = content_repository

    def materialize(self, placed):
        """
        Build, populate and publish the content node for `placed`.

        Returns the new node's id. An unknown content type raises
        UnknownTypeError and must stop the import; a field that cannot be
        parsed or assigned is logged and skipped.
        """
        record = placed.record
        content_type = self.type_repository.load(record.type_name)
        if content_type is None:
            raise UnknownTypeError(record.type_name, record.row_number)

        instance = self.content_repository.get_default(placed.parent, content_type.id)
        instance.name = record.name

        self.assign_fields(instance, record)

        instance.peer_order = placed.order
        instance.child_order_rule = CHILD_ORDER_RULE

        content_id = self.content_repository.save(instance, IMPORT_SAVE_ACTION)
        log.debug('content_created', id=content_id, name=record.name, type=record.type_name, parent=placed.parent)
        return content_id

    def assign_fields(self, instance, record):
        for raw_field in record.raw_fields:
            property_name = None
            try:
                assignment = parse_field(raw_field)
                if assignment is None:
                    continue
                property_name = assignment.name
                instance.set_property(assignment.name, assignment.value)
            except (NoDelimiterError, PropertyError) as e:
                log.error(
                    'property_assignment_failed',
                    row=record.row_number,
                    content=record.name,
                    property=property_name,
                    field=raw_field,
                    error=str(e),
                )

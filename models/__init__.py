from .database import (
    Base,
    ContentType,
    ContentNode,
    get_engine,
    get_session_factory,
    create_schema,
    START_PAGE_ID,
    CHILD_ORDER_INDEX,
    CHILD_ORDER_NAME,
)
from .content import ContentInstance
from .exceptions import (
    PropertyError,
    UnknownPropertyError,
    PropertyCoercionError,
    ContentNotFoundError,
    ContentValidationError,
)

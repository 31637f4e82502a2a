"""
Unsaved content instances and property value coercion.

A ContentInstance is what the content repository hands out from get_default()
and takes back in save(). It exposes the property bag through a single narrow
capability, set_property(name, value), which checks the name against the
content type's definitions and coerces the value to the declared kind.

Property kinds:
    string, xhtml: stored as given
    url:           absolute http(s) URL or site-relative path ('/about')
    integer:       int('42')
    number:        float('4.2')
    boolean:       true/false, yes/no, 1/0 (case-insensitive)
    date:          ISO date ('2024-05-01'), stored as ISO text
"""

import re
from datetime import date
from urllib.parse import urlparse

from .database import CHILD_ORDER_INDEX
from .exceptions import UnknownPropertyError, PropertyCoercionError

TRUE_WORDS = {'true', 'yes', '1'}
FALSE_WORDS = {'false', 'no', '0'}


def _coerce_text(value):
    return str(value)


def _coerce_url(value):
    text = str(value).strip()
    if text.startswith('/'):
        return text
    parsed = urlparse(text)
    if parsed.scheme in ('http', 'https') and parsed.netloc:
        return text
    raise ValueError(f"not a URL: {text!r}")


def _coerce_integer(value):
    return int(str(value).strip())


def _coerce_number(value):
    return float(str(value).strip())


def _coerce_boolean(value):
    word = str(value).strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _coerce_date(value):
    # Excel-exported dates sometimes carry a time part ('2024-05-01 00:00:00')
    text = re.split(r'[ T]', str(value).strip(), maxsplit=1)[0]
    return date.fromisoformat(text).isoformat()


COERCERS = {
    'string': _coerce_text,
    'xhtml': _coerce_text,
    'url': _coerce_url,
    'integer': _coerce_integer,
    'number': _coerce_number,
    'boolean': _coerce_boolean,
    'date': _coerce_date,
}


def coerce_value(kind, property_name, value):
    coercer = COERCERS.get(kind or 'string')
    if coercer is None:
        raise PropertyCoercionError(property_name, kind, value)
    try:
        return coercer(value)
    except (TypeError, ValueError):
        raise PropertyCoercionError(property_name, kind, value) from None


class ContentInstance:
    """A content item that has not been saved yet."""

    def __init__(self, content_type, parent_id, name=''):
        self.content_type = content_type
        self.parent_id = parent_id
        self.name = name
        self.peer_order = 0
        self.child_order_rule = CHILD_ORDER_INDEX
        self._values = {}

        for definition in content_type.properties or []:
            if 'default' in definition:
                self._values[definition['name']] = definition['default']

    @property
    def type_name(self):
        return self.content_type.name

    @property
    def properties(self):
        return dict(self._values)

    def set_property(self, name, value):
        """
        Assign `value` to the property `name`.

        Raises:
            UnknownPropertyError: the content type does not define `name`
            PropertyCoercionError: `value` does not fit the property's kind
        """
        definition = self.content_type.property_definition(name)
        if definition is None:
            raise UnknownPropertyError(name, self.content_type.name)
        self._values[name] = coerce_value(definition.get('type'), name, value)

    def get_property(self, name, default=None):
        return self._values.get(name, default)

    def missing_required(self):
        missing = []
        for definition in self.content_type.properties or []:
            if not definition.get('required'):
                continue
            value = self._values.get(definition['name'])
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(definition['name'])
        return missing

    def __repr__(self):
        return f"<ContentInstance {self.type_name} {self.name!r} parent={self.parent_id}>"

"""
Errors raised by the content store.

PropertyError and its subclasses are per-field problems: the importer logs
them and carries on with the next field. The rest are raised to the caller.
"""


class PropertyError(Exception):
    """A value could not be assigned to a named property of a content instance."""

    def __init__(self, property_name, message):
        self.property_name = property_name
        super().__init__(message)


class UnknownPropertyError(PropertyError):
    def __init__(self, property_name, type_name):
        self.type_name = type_name
        super().__init__(
            property_name,
            f"Content type '{type_name}' has no property named '{property_name}'",
        )


class PropertyCoercionError(PropertyError):
    def __init__(self, property_name, kind, value):
        self.kind = kind
        self.value = value
        super().__init__(
            property_name,
            f"Value {value!r} cannot be stored in {kind} property '{property_name}'",
        )


class ContentNotFoundError(LookupError):
    def __init__(self, content_id):
        self.content_id = content_id
        super().__init__(f"No content exists with id {content_id}")


class ContentValidationError(Exception):
    def __init__(self, name, missing):
        self.missing = list(missing)
        super().__init__(
            f"Content '{name}' is missing required properties: {', '.join(self.missing)}"
        )

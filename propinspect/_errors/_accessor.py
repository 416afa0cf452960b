"""
This module defines the exception raised by `PropertyAccessor` when the
requested property does not exist on the target object.
"""


class PropertyAccessError(AttributeError):
    """Raised when a property cannot be resolved on an object."""

    def __init__(self, obj: object, property_name: str):
        self.obj_type = type(obj).__name__
        self.property_name = property_name
        super().__init__(
            f"Property {property_name!r} does not exist on object of type "
            f"'{self.obj_type}'."
        )

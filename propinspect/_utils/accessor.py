"""
This module provides `PropertyAccessor`, a scoped read/write handle on one
named property of an arbitrary object.

Python has no enforced visibility, but objects still guard their state:
private attributes are name-mangled (`__secret` is stored as
`_Owner__secret`), frozen dataclasses reject assignment and `__setattr__` may
be overridden. The accessor resolves the actual storage name once, at
construction, and treats any private or frozen property as not externally
accessible. Every read and write runs inside the `accessible()` scope, which
forces access for the duration of the operation and always restores the
previous state, including when the read or write itself raises.
"""

import inspect
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from propinspect._errors import PropertyAccessError

from .helpers import _is_frozen_dataclass, _iter_slots

logger = logging.getLogger(__name__)


def _declared_names(cls: type) -> set[str]:
    """Names declared through annotations or __slots__ anywhere in the MRO."""
    names = set(_iter_slots(cls))
    for klass in cls.__mro__:
        names.update(inspect.get_annotations(klass))
    return names


def _has_property(obj: object, name: str) -> bool:
    return hasattr(obj, name) or name in _declared_names(type(obj))


def _resolve_storage_name(obj: object, property_name: str) -> str:
    """Resolve the name a property is actually stored under."""
    if property_name.startswith("__") and not property_name.endswith("__"):
        for klass in type(obj).__mro__:
            mangled = f"_{klass.__name__.lstrip('_')}{property_name}"
            if _has_property(obj, mangled):
                return mangled

    if _has_property(obj, property_name):
        return property_name

    raise PropertyAccessError(obj, property_name)


def _is_private(storage_name: str) -> bool:
    return storage_name.startswith("_")


class PropertyAccessor:
    """Read and write a single named property regardless of its visibility.

    Args:
        obj (object): The object owning the property.
        property_name (str): The property name. Private names may be given
            either mangled (`_Owner__secret`) or as declared (`__secret`).

    Raises:
        PropertyAccessError: If the property does not exist on obj.
    """

    def __init__(self, obj: object, property_name: str):
        self._obj = obj
        self.property_name = property_name
        self.storage_name = _resolve_storage_name(obj, property_name)
        self.was_accessible = not (
            _is_private(self.storage_name) or _is_frozen_dataclass(obj)
        )
        self._accessible = self.was_accessible

    @property
    def is_accessible(self) -> bool:
        """Whether the property is currently accessible through this accessor."""
        return self._accessible

    @contextmanager
    def accessible(self) -> Iterator["PropertyAccessor"]:
        """Force the property accessible for the duration of the block."""
        forced = not self._accessible
        if forced:
            self._accessible = True
        try:
            yield self
        finally:
            if forced:
                self._accessible = self.was_accessible

    def get_value(self) -> Any:
        """Read the current value of the property."""
        with self.accessible():
            return getattr(self._obj, self.storage_name)

    def set_value(self, value: Any) -> None:
        """Write value to the property, bypassing frozen or private guards."""
        with self.accessible():
            if self.was_accessible:
                setattr(self._obj, self.storage_name, value)
            else:
                # Frozen dataclasses and custom __setattr__ guards are bypassed
                logger.debug(
                    "Forcing write to %s.%s",
                    type(self._obj).__name__,
                    self.storage_name,
                )
                object.__setattr__(self._obj, self.storage_name, value)

    def __repr__(self) -> str:
        return (
            f"PropertyAccessor({type(self._obj).__name__}.{self.storage_name}, "
            f"accessible={self._accessible})"
        )

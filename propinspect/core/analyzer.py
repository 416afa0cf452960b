"""
This module contains the metadata analyzer of propinspect.

The `AttributeAnalyzer` inspects an object instance and returns, for every
property carrying metadata of a selected kind, the property's current value
together with the matching metadata instances.

Properties and their metadata are declared with `typing.Annotated`:

    class User:
        name: Annotated[str, rule("trim")]
        __token: Annotated[str, rule("trim"), Audited]

Discovery resolves the type hints of the whole class hierarchy (base classes
first, then declaration order), keeps every metadata entry that is an
instance of the selected class, and instantiates metadata given as a class.
The resulting shape (which properties, which metadata, and a reusable
descriptor per property) is stored in a `TypeMetadataCache` keyed by the
runtime type. Values are never cached; they are re-read on every call.

Failures are classified:
- `AnalysisReflectionError` when type hints or metadata classes cannot be
  resolved (e.g. an unresolvable forward reference);
- `AnalysisGeneralError` for any other fault during discovery or value
  extraction.
Nothing is cached and no partial result is returned when analysis fails.
"""

import logging
import weakref
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from threading import RLock
from typing import Annotated, Any, get_origin, get_type_hints

from propinspect._errors import (
    AnalysisError,
    AnalysisGeneralError,
    AnalysisReflectionError,
)
from propinspect._utils import PropertyAccessor

from ._abstracts import _BaseAnalyzer

logger = logging.getLogger(__name__)

# Errors raised by get_type_hints for unresolvable or invalid annotations
_REFLECTION_ERRORS = (NameError, AttributeError, ImportError, TypeError)


@dataclass(frozen=True)
class PropertyDescriptor:
    """Structural handle on a property, reusable across instances of a type."""

    name: str

    def read(self, instance: object) -> Any:
        return PropertyAccessor(instance, self.name).get_value()


@dataclass(frozen=True)
class PropertyMetadata:
    """Cached shape of one property: its metadata and its descriptor."""

    attributes: tuple[object, ...]
    descriptor: PropertyDescriptor


@dataclass(frozen=True)
class AnalysisEntry:
    """Current value of a property and the metadata found on it."""

    value: Any
    attributes: tuple[object, ...]


class TypeMetadataCache:
    """
    Per-type store of discovered property shapes.

    Types are held weakly, so classes created at runtime can still be garbage
    collected. Lookups are lock-free; population on a miss is serialized so
    a shape is discovered once even when the cache is shared across threads.
    """

    def __init__(self):
        self._store: weakref.WeakKeyDictionary[type, dict[str, PropertyMetadata]] = (
            weakref.WeakKeyDictionary()
        )
        self._lock = RLock()

    def get(self, cls: type) -> dict[str, PropertyMetadata] | None:
        return self._store.get(cls)

    def set(self, cls: type, shape: Mapping[str, PropertyMetadata]) -> None:
        with self._lock:
            self._store[cls] = dict(shape)

    def get_or_create(
        self, cls: type, factory: Callable[[type], dict[str, PropertyMetadata]]
    ) -> dict[str, PropertyMetadata]:
        """Return the cached shape of cls, discovering it with factory on a miss."""
        shape = self._store.get(cls)
        if shape is not None:
            logger.debug("Type metadata cache hit for %s", cls.__qualname__)
            return shape

        with self._lock:
            shape = self._store.get(cls)
            if shape is None:
                logger.debug("Type metadata cache miss for %s", cls.__qualname__)
                shape = factory(cls)
                self.set(cls, shape)

        return shape

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __contains__(self, cls: type) -> bool:
        return cls in self._store

    def __len__(self) -> int:
        return len(self._store)


class AttributeAnalyzer(_BaseAnalyzer):
    """
    Discover metadata of a selected kind on the properties of objects.

    Args:
        attribute_class (type): The metadata class to look for. Metadata
            matches if it is an instance of this class (or of a subclass), or
            a subclass of it, in which case it is instantiated without
            arguments.
        cache (TypeMetadataCache | None, optional): The cache to store
            discovered shapes in. Pass a shared cache to reuse discovery
            across analyzers. Defaults to a cache owned by this analyzer.
    """

    def __init__(self, attribute_class: type, cache: TypeMetadataCache | None = None):
        if not isinstance(attribute_class, type):
            raise TypeError("Argument 'attribute_class' must be a class.")

        self.attribute_class = attribute_class
        self._cache = cache if cache is not None else TypeMetadataCache()

    @property
    def cache(self) -> TypeMetadataCache:
        return self._cache

    def analyze_object(self, instance: object) -> dict[str, AnalysisEntry]:
        """
        Analyze instance for properties carrying matching metadata.

        Args:
            instance (object): The object to analyze.

        Returns:
            dict[str, AnalysisEntry]: Property name to its current value and
                metadata instances. Properties without matching metadata are
                omitted.

        Raises:
            AnalysisReflectionError: If type hints or metadata classes cannot
                be resolved.
            AnalysisGeneralError: For any other fault during analysis.
        """
        try:
            shape = self._cache.get_or_create(type(instance), self._discover)
            return self._extract_values(instance, shape)
        except AnalysisError:
            raise
        except Exception as e:
            raise AnalysisGeneralError.from_exception(e) from e

    def clear_cache(self) -> None:
        self._cache.clear()

    @staticmethod
    def _resolve_type_hints(cls: type) -> dict[str, Any]:
        try:
            return get_type_hints(cls, include_extras=True)
        except _REFLECTION_ERRORS as e:
            raise AnalysisReflectionError.from_exception(e) from e

    def _discover(self, cls: type) -> dict[str, PropertyMetadata]:
        shape: dict[str, PropertyMetadata] = {}

        for name, hint in self._resolve_type_hints(cls).items():
            if get_origin(hint) is not Annotated:
                continue

            attributes = tuple(
                self._instantiate(meta) for meta in hint.__metadata__ if self._matches(meta)
            )
            if attributes:
                descriptor = PropertyDescriptor(name)
                shape[name] = PropertyMetadata(attributes, descriptor)

        logger.debug(
            "Discovered %d annotated properties with %s metadata on %s",
            len(shape),
            self.attribute_class.__name__,
            cls.__qualname__,
        )
        return shape

    def _matches(self, meta: object) -> bool:
        if isinstance(meta, type):
            return issubclass(meta, self.attribute_class)
        return isinstance(meta, self.attribute_class)

    @staticmethod
    def _instantiate(meta: object) -> object:
        return meta() if isinstance(meta, type) else meta

    @staticmethod
    def _extract_values(
        instance: object, shape: Mapping[str, PropertyMetadata]
    ) -> dict[str, AnalysisEntry]:
        return {
            name: AnalysisEntry(meta.descriptor.read(instance), meta.attributes)
            for name, meta in shape.items()
        }

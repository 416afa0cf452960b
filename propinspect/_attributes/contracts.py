"""
This module defines the capabilities a metadata instance can carry.

Capabilities are plain abstract base classes, so the attribute handler can
tell what a metadata instance is able to do with a single `isinstance` check:

`ProcessableAttribute`:
    The metadata yields a processor specification through `get_processors()`.
    Only processable metadata is handled; anything else is passed through.

`CustomizableMessageAttribute`:
    The metadata supplies a human-readable message per processor name, which
    overrides the generated default in validation errors.

`FallbackValueAttribute`:
    The metadata supplies a value to use instead of the original one when
    the processing pipeline fails.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any


class ProcessableAttribute(ABC):
    """Metadata that can produce a processor specification."""

    @abstractmethod
    def get_processors(self) -> Mapping[str | int, Any] | Iterable[Any]:
        """Return the raw processor specification.

        The specification is either a mapping (string keys for named
        configurable processors, integer keys for positional entries) or an
        iterable of positional entries. Each entry is a bare processor name
        or a mapping of options.
        """


class CustomizableMessageAttribute(ABC):
    """Metadata that can supply a message per processor name."""

    @abstractmethod
    def get_message(self, processor_name: str) -> str | None:
        """Return the custom message for processor_name, or None."""


class FallbackValueAttribute(ABC):
    """Metadata that can supply a fallback value for failed processing."""

    @abstractmethod
    def get_fallback_value(self) -> Any:
        """Return the fallback value, or None to keep the original value."""

"""
This module provides abstract base classes for the core components of
propinspect. These classes define the interfaces the inspector relies on, so
analyzers and handlers can be swapped independently.
"""

from abc import ABC, abstractmethod
from typing import Any


class _BaseAnalyzer(ABC):
    """Abstract base class for attribute analyzers."""

    @abstractmethod
    def analyze_object(self, instance: object) -> dict[str, Any]:
        """Return, per property carrying matching metadata, its value and metadata.

        Raises:
            AnalysisError: If the object cannot be analyzed.
        """

    @abstractmethod
    def clear_cache(self) -> None:
        """Drop every cached type shape."""


class PropertyAttributeHandler(ABC):
    """Handles one metadata instance found on a property."""

    @abstractmethod
    def handle_attribute(self, property_name: str, attribute: object, value: Any) -> Any:
        """Handle attribute for property_name holding value.

        Returns None when the attribute is not meant for this handler.
        """


class PropertyChangeApplier(ABC):
    """Applies processed changes to an object."""

    @abstractmethod
    def apply_changes(self, target: object) -> None:
        """Write the processed values onto target."""


class _BaseInspector(ABC):
    """Abstract base class for property inspectors."""

    @abstractmethod
    def inspect(
        self, instance: object, handler: PropertyAttributeHandler
    ) -> PropertyAttributeHandler:
        """Dispatch every discovered (property, metadata) pair to handler."""


__all__ = [
    "PropertyAttributeHandler",
    "PropertyChangeApplier",
    "_BaseAnalyzer",
    "_BaseInspector",
]

"""
This module contains the `PropertyInspector`, the driver composing an
attribute analyzer with an attribute handler.

`inspect` analyzes the object, then hands every (property, metadata) pair to
the handler, in discovery order: properties in declaration order (base
classes first) and, within a property, metadata in the order it was
declared in `Annotated`. Every metadata instance of a property receives the
value the property held when it was analyzed. The handler is returned so the
caller can query its accumulated results.

Failures are re-classified at this layer, most specific first:
- `InspectionReflectionError` when analysis could not reflect the type;
- `InspectionCriticalError` for fatal faults: type violations, exhausted
  recursion or memory, interpreter errors;
- `InspectionGeneralError` for any other exception.
The original exception is always kept as the cause.
"""

import logging

from propinspect._errors import (
    AnalysisReflectionError,
    InspectionCriticalError,
    InspectionGeneralError,
    InspectionReflectionError,
)

from ._abstracts import PropertyAttributeHandler, _BaseAnalyzer, _BaseInspector

logger = logging.getLogger(__name__)

_CRITICAL_ERRORS = (TypeError, RecursionError, MemoryError, SystemError)


class PropertyInspector(_BaseInspector):
    """Dispatch the metadata found on an object's properties to a handler."""

    def __init__(self, analyzer: _BaseAnalyzer):
        self.analyzer = analyzer

    def inspect(
        self, instance: object, handler: PropertyAttributeHandler
    ) -> PropertyAttributeHandler:
        """
        Inspect instance and dispatch its property metadata to handler.

        Args:
            instance (object): The object to inspect.
            handler (PropertyAttributeHandler): Receives every discovered
                (property, metadata, value) triple.

        Returns:
            PropertyAttributeHandler: The handler, holding the results.

        Raises:
            InspectionReflectionError: If the type could not be reflected.
            InspectionCriticalError: On fatal faults.
            InspectionGeneralError: On any other failure.
        """
        try:
            analysis = self.analyzer.analyze_object(instance)
            for property_name, entry in analysis.items():
                for attribute in entry.attributes:
                    handler.handle_attribute(property_name, attribute, entry.value)

            return handler
        except AnalysisReflectionError as e:
            raise InspectionReflectionError.from_exception(e) from e
        except _CRITICAL_ERRORS as e:
            logger.error("Critical failure inspecting %s: %s", type(instance).__name__, e)
            raise InspectionCriticalError.from_exception(e) from e
        except Exception as e:
            raise InspectionGeneralError.from_exception(e) from e

"""
This module serves as the main entry point for the propinspect package,
exposing its primary public API.
"""

from propinspect._attributes import (
    CustomizableMessageAttribute,
    FallbackValueAttribute,
    ProcessableAttribute,
    Rule,
    rule,
    rule_from_file,
)
from propinspect._errors import (
    AnalysisError,
    AnalysisGeneralError,
    AnalysisReflectionError,
    InspectionCriticalError,
    InspectionError,
    InspectionGeneralError,
    InspectionReflectionError,
    ProcessingError,
    PropertyAccessError,
    PropertyInspectionError,
)
from propinspect._utils import PropertyAccessor
from propinspect.core import (
    AttributeAnalyzer,
    AttributeHandler,
    PropertyInspector,
    TypeMetadataCache,
)

# --- Define main API for propinspect module ---
__all__ = [
    "AnalysisError",
    "AnalysisGeneralError",
    "AnalysisReflectionError",
    "AttributeAnalyzer",
    "AttributeHandler",
    "CustomizableMessageAttribute",
    "FallbackValueAttribute",
    "InspectionCriticalError",
    "InspectionError",
    "InspectionGeneralError",
    "InspectionReflectionError",
    "ProcessableAttribute",
    "ProcessingError",
    "PropertyAccessError",
    "PropertyAccessor",
    "PropertyInspectionError",
    "PropertyInspector",
    "Rule",
    "TypeMetadataCache",
    "rule",
    "rule_from_file",
]

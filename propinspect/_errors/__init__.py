"""
This module centralizes custom exception types for the propinspect package,
making them easily importable from a single location.
"""

from ._accessor import PropertyAccessError
from ._inspection import (
    AnalysisError,
    AnalysisGeneralError,
    AnalysisReflectionError,
    InspectionCriticalError,
    InspectionError,
    InspectionGeneralError,
    InspectionReflectionError,
    PropertyInspectionError,
)
from ._processing import ProcessingError, ProcessorNotFoundError
from ._report import InvalidErrorCollectionError, _validate_error_collection

__all__ = [
    "AnalysisError",
    "AnalysisGeneralError",
    "AnalysisReflectionError",
    "InspectionCriticalError",
    "InspectionError",
    "InspectionGeneralError",
    "InspectionReflectionError",
    "InvalidErrorCollectionError",
    "ProcessingError",
    "ProcessorNotFoundError",
    "PropertyAccessError",
    "PropertyInspectionError",
    "_validate_error_collection",
]

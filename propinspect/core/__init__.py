"""
This module exposes the core components of the propinspect engine:
the metadata analyzer, the attribute handler, the inspector driving them and
the error report.
"""

from propinspect.core._report import PROCESSING_ERRORS_KEY, ProcessingReport
from propinspect.core.analyzer import (
    AnalysisEntry,
    AttributeAnalyzer,
    PropertyDescriptor,
    PropertyMetadata,
    TypeMetadataCache,
)
from propinspect.core.handler import AttributeHandler, ProcessedValue
from propinspect.core.inspector import PropertyInspector

__all__ = [
    "PROCESSING_ERRORS_KEY",
    "AnalysisEntry",
    "AttributeAnalyzer",
    "AttributeHandler",
    "ProcessedValue",
    "ProcessingReport",
    "PropertyDescriptor",
    "PropertyInspector",
    "PropertyMetadata",
    "TypeMetadataCache",
]

"""
This module defines the exceptions raised while analyzing and inspecting
objects, i.e. whenever property metadata is discovered on a class or the
discovered metadata is dispatched to an attribute handler.

The hierarchy mirrors the two layers of the package:

`AnalysisError`:
    Raised by the `AttributeAnalyzer`. It comes in a reflection variant
    (`AnalysisReflectionError`), raised when type hints or metadata classes
    cannot be resolved, and a general variant (`AnalysisGeneralError`) for
    any other runtime fault during discovery or value extraction.

`InspectionError`:
    Raised by the `PropertyInspector`. The same faults are re-classified at
    this layer with a distinct severity so callers can log or alert on them
    differently: `InspectionReflectionError`, `InspectionGeneralError` and
    `InspectionCriticalError`.

Every error carries a numeric `code` and a symbolic `error_code` and keeps
the original exception as its `__cause__`.
"""


class PropertyInspectionError(Exception):
    """Base class for all analysis and inspection failures."""

    code: int = 2500
    error_code: str = "PROPERTY_INSPECTION_ERROR"
    prefix: str = "Property inspection failed"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @classmethod
    def from_exception(cls, exc: BaseException) -> "PropertyInspectionError":
        """Build the error from the exception that caused it."""
        return cls(f"{cls.prefix}: {exc}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code}, error_code={self.error_code!r})"


class AnalysisError(PropertyInspectionError):
    """Raised when an object cannot be analyzed for property metadata."""


class AnalysisReflectionError(AnalysisError):
    """Raised when a type hint or metadata class cannot be resolved."""

    code = 2501
    error_code = "REFLECTION_ANALYSIS_ERROR"
    prefix = "Failed to analyze object using reflection"


class AnalysisGeneralError(AnalysisError):
    """Raised for any other fault during discovery or value extraction."""

    code = 2503
    error_code = "GENERAL_ANALYSIS_ERROR"
    prefix = "An error occurred during object analysis"


class InspectionError(PropertyInspectionError):
    """Raised when an object cannot be inspected."""


class InspectionReflectionError(InspectionError):
    """Raised when inspection fails because analysis could not reflect the type."""

    code = 2502
    error_code = "REFLECTION_INSPECTION_ERROR"
    prefix = "Failed to inspect object using reflection"


class InspectionGeneralError(InspectionError):
    """Raised for recognized but unexpected runtime faults during inspection."""

    code = 2504
    error_code = "GENERAL_INSPECTION_ERROR"
    prefix = "An exception occurred during object inspection"


class InspectionCriticalError(InspectionError):
    """Raised for fatal faults (type violations, exhausted resources)."""

    code = 2505
    error_code = "CRITICAL_INSPECTION_ERROR"
    prefix = "A critical error occurred during object inspection"

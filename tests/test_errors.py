import pytest

from propinspect import (
    AnalysisError,
    AnalysisGeneralError,
    AnalysisReflectionError,
    InspectionCriticalError,
    InspectionError,
    InspectionGeneralError,
    InspectionReflectionError,
    PropertyInspectionError,
)


@pytest.mark.parametrize(
    "error_cls, base, code, error_code",
    [
        (AnalysisReflectionError, AnalysisError, 2501, "REFLECTION_ANALYSIS_ERROR"),
        (InspectionReflectionError, InspectionError, 2502, "REFLECTION_INSPECTION_ERROR"),
        (AnalysisGeneralError, AnalysisError, 2503, "GENERAL_ANALYSIS_ERROR"),
        (InspectionGeneralError, InspectionError, 2504, "GENERAL_INSPECTION_ERROR"),
        (InspectionCriticalError, InspectionError, 2505, "CRITICAL_INSPECTION_ERROR"),
    ],
)
def test_error_codes(error_cls, base, code, error_code):
    error = error_cls.from_exception(RuntimeError("cause"))

    assert isinstance(error, base)
    assert isinstance(error, PropertyInspectionError)
    assert error.code == code
    assert error.error_code == error_code
    assert repr(error) == f"{error_cls.__name__}(code={code}, error_code={error_code!r})"


@pytest.mark.parametrize(
    "error_cls, message",
    [
        (AnalysisReflectionError, "Failed to analyze object using reflection: cause"),
        (InspectionReflectionError, "Failed to inspect object using reflection: cause"),
        (AnalysisGeneralError, "An error occurred during object analysis: cause"),
        (InspectionGeneralError, "An exception occurred during object inspection: cause"),
        (
            InspectionCriticalError,
            "A critical error occurred during object inspection: cause",
        ),
    ],
)
def test_messages_wrap_the_cause(error_cls, message):
    error = error_cls.from_exception(RuntimeError("cause"))

    assert str(error) == message
    assert error.message == message


def test_analysis_and_inspection_errors_are_distinct():
    assert not issubclass(AnalysisReflectionError, InspectionError)
    assert not issubclass(InspectionGeneralError, AnalysisError)

import pandas as pd
import pytest
from pandas.testing import assert_frame_equal

from propinspect._errors import InvalidErrorCollectionError
from propinspect.core import PROCESSING_ERRORS_KEY, ProcessingReport


def test_empty_errors_build_empty_frame():
    assert ProcessingReport({}).build().empty
    assert ProcessingReport(None).build().empty


def test_report_matrix_layout():
    errors = {
        "name": {"length": {"errorKey": "invalidLength", "message": "Too long"}},
        "email": {
            "email": {"errorKey": "invalidFormat", "message": "Bad email"},
            "length": {"errorKey": "invalidLength", "message": "Too long"},
        },
        "age": {PROCESSING_ERRORS_KEY: ["not a number", "negative"]},
    }

    frame = ProcessingReport(errors).build()

    expected = pd.DataFrame(
        {
            "email": ["", "invalidFormat", ""],
            "length": ["", "invalidLength", "invalidLength"],
            PROCESSING_ERRORS_KEY: ["not a number; negative", "", ""],
        },
        index=["age", "email", "name"],
    )
    assert_frame_equal(frame, expected)


@pytest.mark.parametrize(
    "errors, detail",
    [
        (["not", "a", "mapping"], "Errors must be a mapping"),
        ({1: {}}, "Property names must be strings"),
        ({"name": ["x"]}, "Property errors must be a mapping"),
        ({"name": {"length": "invalid"}}, "must be a mapping with an 'errorKey'"),
        ({"name": {PROCESSING_ERRORS_KEY: "oops"}}, "must be a list of strings"),
    ],
)
def test_invalid_error_collection(errors, detail):
    with pytest.raises(InvalidErrorCollectionError, match=detail):
        ProcessingReport(errors)

"""
This module defines the ProcessingReport class, which provides a tabular,
matrix-like view of the errors an `AttributeHandler` collected. It serves as
an introspection tool for understanding why an object failed processing.

- **Rows**: the properties that recorded at least one error.
- **Columns**: the processors that failed validation on any property, plus a
  `__processing__` column for pipeline failures.
- **Cells**: the error key of the failed validation, or the joined messages
  of the processing failures, "" otherwise.
"""

from collections.abc import Mapping

import pandas as pd

from propinspect._errors import _validate_error_collection

# Reserved key under which processing failure messages are recorded
PROCESSING_ERRORS_KEY = "__processing__"


class ProcessingReport:
    """Matrix view of the errors collected while handling attributes."""

    def __init__(self, errors: Mapping[str, Mapping]):
        self._errors = _validate_error_collection(errors or {}, PROCESSING_ERRORS_KEY)

    def build(self) -> pd.DataFrame:
        """Construct and return the error matrix as a pandas DataFrame."""
        rows = sorted(self._errors)
        col_names: set[str] = set()
        for entries in self._errors.values():
            col_names.update(entries)

        if not rows:
            return pd.DataFrame()

        cols = sorted(col_names - {PROCESSING_ERRORS_KEY})
        if PROCESSING_ERRORS_KEY in col_names:
            cols.append(PROCESSING_ERRORS_KEY)

        data: dict[str, list[str]] = {}
        for processor_name in cols:
            col_values: list[str] = []
            for property_name in rows:
                error = self._errors[property_name].get(processor_name)
                if error is None:
                    col_values.append("")
                elif processor_name == PROCESSING_ERRORS_KEY:
                    col_values.append("; ".join(error))
                else:
                    col_values.append(error["errorKey"])
            data[processor_name] = col_values

        return pd.DataFrame(data, index=rows, columns=cols)

"""
This module defines exceptions related to the `ProcessingReport` class,
which is used for creating a tabular representation of the errors an
`AttributeHandler` collected.

`InvalidErrorCollectionError`:
This `ValueError` is raised when the report is initialized with a data
structure that does not conform to its expected input format. The report
builder requires a mapping of property names to their error entries, and
this exception ensures that malformed inputs are caught early with a
descriptive error message.
"""

from collections.abc import Mapping


class InvalidErrorCollectionError(ValueError):
    """Raised when ProcessingReport receives an invalid error collection.

    Expected a mapping of the form:
    {
        property_name: {
            processor_name: {"errorKey": str, "message": str},
            "__processing__": list[str],
        }
    }
    """

    def __init__(self, detail: str):
        """Initialize the InvalidErrorCollectionError with a detailed message."""
        super().__init__(f"Invalid error collection for ProcessingReport: {detail}")


def _validate_error_collection(errors: Mapping, processing_key: str) -> Mapping:
    """Validate the shape of an error collection.

    Args:
        errors (Mapping): The error collection to validate.
        processing_key (str): The reserved key holding processing failures.

    Returns:
        Mapping: The validated error collection.

    Raises:
        InvalidErrorCollectionError: If any level has an unexpected type.
    """
    if not isinstance(errors, Mapping):
        raise InvalidErrorCollectionError("Errors must be a mapping")

    for property_name, entries in errors.items():
        if not isinstance(property_name, str):
            raise InvalidErrorCollectionError("Property names must be strings")
        if not isinstance(entries, Mapping):
            raise InvalidErrorCollectionError("Property errors must be a mapping")
        for processor_name, error in entries.items():
            if processor_name == processing_key:
                if not isinstance(error, list) or not all(
                    isinstance(m, str) for m in error
                ):
                    raise InvalidErrorCollectionError(
                        "Processing failures must be a list of strings"
                    )
                continue
            if not isinstance(error, Mapping) or "errorKey" not in error:
                raise InvalidErrorCollectionError(
                    f"Validation error for {processor_name!r} must be a mapping "
                    f"with an 'errorKey'"
                )

    return errors

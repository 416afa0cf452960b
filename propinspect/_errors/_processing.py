"""
This module defines the exceptions exchanged with processors and pipelines.

`ProcessingError`:
    The single failure type a pipeline is allowed to raise. The
    `AttributeHandler` catches it and downgrades it to a per-property error
    entry, so one failing property never aborts the inspection of the rest
    of the object.

`ProcessorNotFoundError`:
    Raised by the default processor builder when no processor is registered
    under the requested type and name. It is a `ProcessingError`, so the
    handler treats a misconfigured property like any other processing
    failure.
"""


class ProcessingError(Exception):
    """Raised when a processor or pipeline fails to process a value."""

    def __init__(self, message: str, processor_name: str | None = None):
        super().__init__(message)
        self.message = message
        self.processor_name = processor_name


class ProcessorNotFoundError(ProcessingError, LookupError):
    """Raised when a processor is not registered for the given type."""

    def __init__(self, processor_type: str, processor_name: str):
        self.processor_type = processor_type
        super().__init__(
            f"Processor {processor_name!r} is not registered for type "
            f"{processor_type!r}.",
            processor_name=processor_name,
        )

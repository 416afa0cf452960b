"""
This module provides the default processor validator.

Validation failures are not exceptions: a validatable processor that reports
itself invalid yields a structured error, `{"errorKey": ..., "message": ...}`,
which the attribute handler collects per property and processor name.
"""

from collections.abc import Mapping

from propinspect._utils import _get_option

from .contracts import Processor, ValidatableProcessor


class ProcessorValidator:
    """Check a processor's validation state after it processed a value."""

    def validate(
        self,
        processor: Processor,
        processor_name: str,
        messages: Mapping[str, str],
    ) -> dict[str, str] | None:
        """
        Return a structured error if processor is invalid, else None.

        The custom message recorded for processor_name takes precedence over
        the generated default ("Validation failed for <name>").
        """
        if isinstance(processor, ValidatableProcessor) and not processor.is_valid():
            default = _get_option("default_error_message").format(name=processor_name)
            return {
                "errorKey": processor.get_error_key(),
                "message": messages.get(processor_name) or default,
            }

        return None

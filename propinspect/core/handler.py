"""
This module contains the attribute handler, the orchestrator that runs a
property's value through the processors its metadata declares.

For every (property, metadata) pair it is given, the `AttributeHandler`:

1. Ignores metadata that is not a `ProcessableAttribute` by returning None,
   without touching its state. This tells the driving loop the metadata is
   not meant for this handler.
2. Normalizes the metadata's processor specification into a processor
   configuration map (`ProcessorConfigBuilder`).
3. If the metadata is a `CustomizableMessageAttribute`, injects every
   non-empty custom message into the configuration of its processor under
   the reserved `customMessage` option, and records it.
4. Builds a pipeline for its processor type and runs the value through it.
   A `ProcessingError` never escapes: its message is recorded for the
   property and the original value (or the metadata's fallback value) is
   returned instead of a partially processed one.
5. Validates every configured processor and collects structured
   `{"errorKey", "message"}` errors per processor name. Validation failures
   are values, not exceptions, and never interrupt later processors.
6. Records the processed value and the messages for the property.

Outcomes accumulate over the lifetime of the handler. Handling the same
property again overwrites its previous outcome (last write wins), which is
also what happens when a property carries several processable metadata
instances.

`apply_changes` writes the accumulated values onto a target object through
`PropertyAccessor`. It keeps the accumulated state, so the same results can
be applied to several objects; call `reset` to start over.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

import pandas as pd

from propinspect._attributes import (
    CustomizableMessageAttribute,
    FallbackValueAttribute,
    ProcessableAttribute,
)
from propinspect._errors import ProcessingError
from propinspect._utils import PropertyAccessor, _get_option, _stable_config_key
from propinspect.processor import (
    Processor,
    ProcessorBuilder,
    ProcessorConfigBuilder,
    ProcessorValidator,
)

from ._abstracts import PropertyAttributeHandler, PropertyChangeApplier
from ._report import PROCESSING_ERRORS_KEY, ProcessingReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessedValue:
    """Final value of a property and the custom messages used to produce it."""

    value: Any
    messages: Mapping[str, str]


class AttributeHandler(PropertyAttributeHandler, PropertyChangeApplier):
    """
    Process property values according to their processable metadata.

    Args:
        processor_type (str): The kind of processors to build (e.g.
            "sanitizer"), passed through to the builder.
        builder (ProcessorBuilder): Builds processors and pipelines.
        validator (ProcessorValidator | None, optional): Checks processors
            after processing. Defaults to `ProcessorValidator()`.
        config_builder (ProcessorConfigBuilder | None, optional): Normalizes
            processor specifications. Defaults to `ProcessorConfigBuilder()`.
    """

    def __init__(
        self,
        processor_type: str,
        builder: ProcessorBuilder,
        validator: ProcessorValidator | None = None,
        config_builder: ProcessorConfigBuilder | None = None,
    ):
        self.processor_type = processor_type
        self.builder = builder
        self.validator = validator or ProcessorValidator()
        self.config_builder = config_builder or ProcessorConfigBuilder()

        self._processed_values: dict[str, ProcessedValue] = {}
        self._errors: dict[str, dict[str, Any]] = {}
        self._messages: dict[str, dict[str, str]] = {}
        self._processor_cache: dict[tuple[str, str], Processor] = {}

    def handle_attribute(self, property_name: str, attribute: object, value: Any) -> Any:
        """
        Run value through the processors declared by attribute.

        Args:
            property_name (str): The property the value was read from.
            attribute (object): A metadata instance found on the property.
            value (Any): The current value of the property.

        Returns:
            Any: The processed value; the original (or fallback) value if
                processing failed; None if attribute is not processable.
        """
        if not isinstance(attribute, ProcessableAttribute):
            return None

        # A new handling replaces the previous outcome of the property
        self._errors.pop(property_name, None)
        self._messages.pop(property_name, None)

        config = self.config_builder.build(attribute)
        messages = self._inject_custom_messages(attribute, config)

        try:
            processed_value = self._process_value(value, config)
            errors = self._validate_processors(config, messages)
        except ProcessingError as e:
            return self._recover(property_name, attribute, value, messages, e)

        if errors:
            self._errors[property_name] = errors

        self._processed_values[property_name] = ProcessedValue(
            processed_value, MappingProxyType(dict(messages))
        )
        self._messages[property_name] = messages

        return processed_value

    @staticmethod
    def _inject_custom_messages(
        attribute: ProcessableAttribute, config: dict[str, dict[str, Any]]
    ) -> dict[str, str]:
        messages: dict[str, str] = {}
        if not isinstance(attribute, CustomizableMessageAttribute):
            return messages

        message_key = _get_option("custom_message_key")
        for processor_name, processor_config in config.items():
            message = attribute.get_message(processor_name)
            if message:
                processor_config[message_key] = message
                messages[processor_name] = message

        return messages

    def _process_value(self, value: Any, config: dict[str, dict[str, Any]]) -> Any:
        return self.builder.build_pipeline(self.processor_type, config).process(value)

    def _validate_processors(
        self, config: dict[str, dict[str, Any]], messages: Mapping[str, str]
    ) -> dict[str, dict[str, str]]:
        errors = {}
        for processor_name, processor_config in config.items():
            processor = self._get_processor(processor_name, processor_config)
            error = self.validator.validate(processor, processor_name, messages)
            if error:
                errors[processor_name] = error

        return errors

    def _get_processor(self, processor_name: str, config: Mapping[str, Any]) -> Processor:
        # Keyed by name and configuration, differently configured uses never share
        key = _stable_config_key(processor_name, config)
        if key not in self._processor_cache:
            self._processor_cache[key] = self.builder.build(
                self.processor_type, processor_name, config
            )
        return self._processor_cache[key]

    def _recover(
        self,
        property_name: str,
        attribute: ProcessableAttribute,
        value: Any,
        messages: dict[str, str],
        error: ProcessingError,
    ) -> Any:
        logger.warning("Processing property %r failed: %s", property_name, error)

        self._errors[property_name] = {PROCESSING_ERRORS_KEY: [str(error)]}
        self._messages[property_name] = messages

        recovered = value
        if isinstance(attribute, FallbackValueAttribute):
            fallback = attribute.get_fallback_value()
            if fallback is not None:
                recovered = fallback

        self._processed_values[property_name] = ProcessedValue(
            recovered, MappingProxyType(dict(messages))
        )
        return recovered

    def apply_changes(self, target: object) -> None:
        """
        Write every processed value onto target.

        Accumulated state is kept; use `reset` to discard it.

        Raises:
            PropertyAccessError: If target lacks one of the processed
                properties.
        """
        for property_name, processed in self._processed_values.items():
            PropertyAccessor(target, property_name).set_value(processed.value)

        logger.debug(
            "Applied %d processed value(s) to %s",
            len(self._processed_values),
            type(target).__name__,
        )

    def reset(self) -> None:
        """Discard accumulated values, messages, errors and cached processors."""
        self._processed_values.clear()
        self._errors.clear()
        self._messages.clear()
        self._processor_cache.clear()

    def get_processed_property_values(self) -> Mapping[str, ProcessedValue]:
        return MappingProxyType(self._processed_values)

    def get_processing_result_errors(self) -> Mapping[str, dict[str, Any]]:
        return MappingProxyType(self._errors)

    def get_processing_result_messages(self) -> Mapping[str, dict[str, str]]:
        return MappingProxyType(self._messages)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def to_frame(self) -> pd.DataFrame:
        """Return the collected errors as a property x processor matrix."""
        return ProcessingReport(self._errors).build()

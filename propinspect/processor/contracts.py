"""
This module defines the contracts of the processing side: what a processor
is, what a pipeline is and how they are built.

Processors themselves are supplied by the caller; propinspect never defines
what "trim" or "email" means. The attribute handler only relies on these
interfaces:

- `Processor.process(value)` transforms a single value.
- `ConfigurableProcessor.configure(options)` receives the options declared
  for the processor (including an injected custom message).
- `ValidatableProcessor.is_valid()` / `get_error_key()` report the outcome of
  the last `process` call.
- `Pipeline.process(value)` runs an ordered composition of processors.
- `ProcessorBuilder.build(...)` / `build_pipeline(...)` create them.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class Processor(ABC):
    """A unit transforming or validating a single value."""

    @abstractmethod
    def process(self, value: Any) -> Any:
        """Process value and return the transformed value."""


class ConfigurableProcessor(Processor):
    """A processor accepting options."""

    @abstractmethod
    def configure(self, options: Mapping[str, Any]) -> None:
        """Configure the processor from its declared options."""


class ValidatableProcessor(Processor):
    """A processor that validates the value it processed."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return whether the last processed value was valid."""

    @abstractmethod
    def get_error_key(self) -> str:
        """Return the machine-readable key of the last validation error."""


class Pipeline(ABC):
    """An ordered composition of processors applied to one value."""

    @abstractmethod
    def process(self, value: Any) -> Any:
        """Run value through every processor in order.

        Raises:
            ProcessingError: If any processor fails.
        """


class ProcessorBuilder(ABC):
    """Creates processors and pipelines for a processor type."""

    @abstractmethod
    def build(
        self, processor_type: str, processor_name: str, config: Mapping[str, Any]
    ) -> Processor:
        """Build a single configured processor."""

    @abstractmethod
    def build_pipeline(
        self, processor_type: str, config_map: Mapping[str, Mapping[str, Any]]
    ) -> Pipeline:
        """Build a pipeline from a processor configuration map."""

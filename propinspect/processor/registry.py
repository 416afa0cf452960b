"""
This module provides a default, registry-backed implementation of the
processor builder contract.

`ProcessorRegistry`:
    Holds processor instances grouped by processor type (e.g. "sanitizer",
    "validator") and name. Registered instances are shared: the pipeline
    runs them and the attribute handler validates the very same instance
    afterwards, so a validatable processor reports on the value it just
    processed.

`ProcessorPipeline`:
    Runs its processors in order. Any exception raised by a processor that
    is not already a `ProcessingError` is wrapped into one, so the attribute
    handler only ever has to recover from a single failure type.

`DefaultProcessorBuilder`:
    Resolves processors from a registry, configures the configurable ones
    and assembles pipelines from a processor configuration map.
"""

import logging
from collections.abc import Iterable, Mapping
from threading import RLock
from types import MappingProxyType
from typing import Any

from propinspect._errors import ProcessingError, ProcessorNotFoundError

from .contracts import ConfigurableProcessor, Pipeline, Processor, ProcessorBuilder

logger = logging.getLogger(__name__)


class ProcessorRegistry:
    """Processor instances keyed by processor type and name."""

    def __init__(self):
        self._processors: dict[str, dict[str, Processor]] = {}
        self._lock = RLock()

    def register(
        self, processor_type: str, name: str, processor: Processor
    ) -> "ProcessorRegistry":
        """Register processor under name for processor_type.

        Returns the registry itself so registrations can be chained.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Processor name must be a non-empty string.")
        if not isinstance(processor, Processor):
            raise TypeError(
                f"Processor {name!r} must implement Processor, "
                f"got {type(processor).__name__}."
            )

        with self._lock:
            self._processors.setdefault(processor_type, {})[name] = processor

        return self

    def get(self, processor_type: str, name: str) -> Processor:
        """Return the processor registered under name for processor_type.

        Raises:
            ProcessorNotFoundError: If nothing is registered under name.
        """
        try:
            return self._processors[processor_type][name]
        except KeyError as e:
            raise ProcessorNotFoundError(processor_type, name) from e

    def has(self, processor_type: str, name: str) -> bool:
        return name in self._processors.get(processor_type, {})

    def as_mapping(self, processor_type: str) -> Mapping[str, Processor]:
        """Read-only view of the processors registered for processor_type."""
        return MappingProxyType(self._processors.get(processor_type, {}))


class ProcessorPipeline(Pipeline):
    """Ordered composition of named processors."""

    def __init__(self, processors: Iterable[tuple[str, Processor]] = ()):
        self._processors: list[tuple[str, Processor]] = list(processors)

    def add_processor(self, name: str, processor: Processor) -> "ProcessorPipeline":
        self._processors.append((name, processor))
        return self

    def __len__(self) -> int:
        return len(self._processors)

    def process(self, value: Any) -> Any:
        for name, processor in self._processors:
            try:
                value = processor.process(value)
            except ProcessingError:
                raise
            except Exception as e:
                raise ProcessingError(
                    f"Processor {name!r} failed: {e}", processor_name=name
                ) from e

        return value


class DefaultProcessorBuilder(ProcessorBuilder):
    """Build processors and pipelines from a `ProcessorRegistry`."""

    def __init__(self, registry: ProcessorRegistry):
        self.registry = registry

    def build(
        self, processor_type: str, processor_name: str, config: Mapping[str, Any]
    ) -> Processor:
        processor = self.registry.get(processor_type, processor_name)

        if isinstance(processor, ConfigurableProcessor):
            processor.configure(dict(config))

        return processor

    def build_pipeline(
        self, processor_type: str, config_map: Mapping[str, Mapping[str, Any]]
    ) -> ProcessorPipeline:
        pipeline = ProcessorPipeline()

        for name, config in config_map.items():
            pipeline.add_processor(name, self.build(processor_type, name, config))

        logger.debug(
            "Built %s pipeline with %d processor(s)", processor_type, len(pipeline)
        )
        return pipeline

"""
This module turns the raw processor specification of a processable attribute
into a uniform processor configuration map.

A raw specification mixes three kinds of entries:

- a bare string naming a processor without options: `"trim"`;
- a string key mapped to an options mapping: `"length": {"max": 20}`;
- a positional entry whose value is a single-entry mapping from the
  processor name to its options: `{"length": {"max": 20}}`.

The specification may be given as a mapping (string keys for named entries,
integer keys for positional ones) or as any iterable of positional entries.
Whatever its form, the result maps each processor name to a fresh options
dict, in specification order, which is the order the processors run in.

Building never raises. A positional entry with an empty mapping yields a
processor named "" which is left to the processor builder to reject.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from propinspect._attributes import ProcessableAttribute

logger = logging.getLogger(__name__)


class ProcessorNameNormalizer:
    """Determine the processor name of a configurable specification entry."""

    @staticmethod
    def is_named_processor(key: str | int) -> bool:
        return isinstance(key, str) and key != ""

    def normalize(self, key: str | int, processor: Mapping[str, Any]) -> str:
        """Return key for named entries, else the first key of processor."""
        if self.is_named_processor(key):
            return key
        return self._extract_processor_name(processor)

    @staticmethod
    def _extract_processor_name(processor: Mapping[str, Any]) -> str:
        first_key = next(iter(processor), None)
        return first_key if isinstance(first_key, str) else ""


class ProcessorConfigBuilder:
    """Build a processor configuration map from a processable attribute."""

    def __init__(self, name_normalizer: ProcessorNameNormalizer | None = None):
        self._name_normalizer = name_normalizer or ProcessorNameNormalizer()

    def build(self, attribute: ProcessableAttribute) -> dict[str, dict[str, Any]]:
        """
        Normalize the processors declared by attribute.

        Args:
            attribute (ProcessableAttribute): The attribute providing the
                raw processor specification.

        Returns:
            dict[str, dict[str, Any]]: Processor name to options, in
                specification order.
        """
        processors_config: dict[str, dict[str, Any]] = {}

        for key, processor in self._iter_entries(attribute.get_processors()):
            if isinstance(processor, str):
                processors_config[processor] = {}
            elif isinstance(processor, Mapping):
                name = self._name_normalizer.normalize(key, processor)
                processors_config[name] = self._get_processor_config(
                    key, name, processor
                )
            else:
                logger.debug(
                    "Skipping processor entry %r: expected a string or a mapping, "
                    "got %s",
                    key,
                    type(processor).__name__,
                )

        return processors_config

    @staticmethod
    def _iter_entries(spec: Any) -> Iterator[tuple[str | int, Any]]:
        if spec is None:
            return iter(())
        if isinstance(spec, Mapping):
            return iter(spec.items())
        if isinstance(spec, str):
            return iter([(0, spec)])
        if isinstance(spec, Iterable):
            return enumerate(spec)

        logger.debug("Ignoring processor specification of type %s", type(spec).__name__)
        return iter(())

    def _get_processor_config(
        self, key: str | int, name: str, processor: Mapping[str, Any]
    ) -> dict[str, Any]:
        # Options are copied so injected values never leak into the declaration
        if self._name_normalizer.is_named_processor(key):
            return dict(processor)

        options = processor.get(name, {})
        return dict(options) if isinstance(options, Mapping) else {}

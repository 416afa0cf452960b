"""
This module exposes the processing contracts, the configuration normalizer,
the default validator and the registry-backed processor builder.
"""

from propinspect._errors import ProcessingError, ProcessorNotFoundError
from propinspect.processor.config_builder import (
    ProcessorConfigBuilder,
    ProcessorNameNormalizer,
)
from propinspect.processor.contracts import (
    ConfigurableProcessor,
    Pipeline,
    Processor,
    ProcessorBuilder,
    ValidatableProcessor,
)
from propinspect.processor.registry import (
    DefaultProcessorBuilder,
    ProcessorPipeline,
    ProcessorRegistry,
)
from propinspect.processor.validator import ProcessorValidator

__all__ = [
    "ConfigurableProcessor",
    "DefaultProcessorBuilder",
    "Pipeline",
    "ProcessingError",
    "Processor",
    "ProcessorBuilder",
    "ProcessorConfigBuilder",
    "ProcessorNameNormalizer",
    "ProcessorNotFoundError",
    "ProcessorPipeline",
    "ProcessorRegistry",
    "ProcessorValidator",
    "ValidatableProcessor",
]

"""
This module contains shared fixtures for testing.

Processors are defined here because propinspect ships none: they stand in for
the caller-supplied sanitizers and validators.
"""

from pathlib import Path

import pytest

from propinspect.core import AttributeHandler
from propinspect.options import reset_propinspect_options
from propinspect.processor import (
    ConfigurableProcessor,
    DefaultProcessorBuilder,
    ProcessingError,
    Processor,
    ProcessorRegistry,
    ValidatableProcessor,
)


class TrimProcessor(Processor):
    def process(self, value):
        return value.strip() if isinstance(value, str) else value


class UpperProcessor(Processor):
    def process(self, value):
        return value.upper()


class EmailProcessor(ValidatableProcessor):
    def __init__(self):
        self._valid = True

    def process(self, value):
        self._valid = isinstance(value, str) and "@" in value
        return value

    def is_valid(self):
        return self._valid

    def get_error_key(self):
        return "invalidFormat"


class LengthProcessor(ConfigurableProcessor, ValidatableProcessor):
    def __init__(self):
        self.options = {}
        self._valid = True

    def configure(self, options):
        self.options = dict(options)

    def process(self, value):
        self._valid = len(value) <= self.options.get("max", 255)
        return value

    def is_valid(self):
        return self._valid

    def get_error_key(self):
        return "invalidLength"


class FailingProcessor(Processor):
    def process(self, value):
        raise ProcessingError("Cannot process value")


class ExplodingProcessor(Processor):
    def process(self, value):
        raise ValueError("boom")


@pytest.fixture(autouse=True)
def _reset_options():
    """Restore package options after every test."""
    yield
    reset_propinspect_options()


@pytest.fixture
def registry() -> ProcessorRegistry:
    """A registry holding the test processors under the 'sanitizer' type."""
    return (
        ProcessorRegistry()
        .register("sanitizer", "trim", TrimProcessor())
        .register("sanitizer", "upper", UpperProcessor())
        .register("sanitizer", "email", EmailProcessor())
        .register("sanitizer", "length", LengthProcessor())
        .register("sanitizer", "fail", FailingProcessor())
        .register("sanitizer", "explode", ExplodingProcessor())
    )


@pytest.fixture
def builder(registry) -> DefaultProcessorBuilder:
    return DefaultProcessorBuilder(registry)


@pytest.fixture
def handler(builder) -> AttributeHandler:
    """An attribute handler backed by the test registry."""
    return AttributeHandler("sanitizer", builder)


@pytest.fixture
def rules_path() -> Path:
    """Path to the rule files used by the loader tests."""
    return Path(__file__).parent / "data" / "rules"

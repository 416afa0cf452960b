from unittest.mock import MagicMock

import pytest

from propinspect.options import set_propinspect_option
from propinspect.processor import Processor, ProcessorValidator, ValidatableProcessor


@pytest.fixture
def validator() -> ProcessorValidator:
    return ProcessorValidator()


def _validatable(valid: bool, error_key: str = "errorKey") -> MagicMock:
    processor = MagicMock(spec=ValidatableProcessor)
    processor.is_valid.return_value = valid
    processor.get_error_key.return_value = error_key
    return processor


def test_validate_returns_error_for_invalid_processor(validator):
    result = validator.validate(_validatable(False), "processorName", {})

    assert result == {
        "errorKey": "errorKey",
        "message": "Validation failed for processorName",
    }


def test_validate_returns_none_for_valid_processor(validator):
    assert validator.validate(_validatable(True), "processorName", {}) is None


def test_validate_ignores_non_validatable_processor(validator):
    processor = MagicMock(spec=Processor)

    assert validator.validate(processor, "processorName", {}) is None


def test_validate_prefers_custom_message(validator):
    messages = {"processorName": "Custom message", "other": "Unrelated"}

    result = validator.validate(_validatable(False), "processorName", messages)

    assert result["message"] == "Custom message"


def test_empty_custom_message_falls_back_to_default(validator):
    result = validator.validate(_validatable(False), "email", {"email": ""})

    assert result["message"] == "Validation failed for email"


def test_default_message_template_is_configurable(validator):
    set_propinspect_option("default_error_message", "{name} rejected the value")

    result = validator.validate(_validatable(False, "invalidFormat"), "email", {})

    assert result == {"errorKey": "invalidFormat", "message": "email rejected the value"}

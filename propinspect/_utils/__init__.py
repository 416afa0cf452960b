"""
This module exposes utility functions from sub-modules for use
within the propinspect package.
"""

from propinspect._utils.accessor import PropertyAccessor
from propinspect._utils.config import (
    _get_option,
    reset_propinspect_options,
    set_propinspect_option,
)
from propinspect._utils.helpers import _is_frozen_dataclass, _stable_config_key
from propinspect._utils.parsers import _RuleFileReader

# Define main API for internal _utils module
# only contains methods/objects used within the package
__all__ = [
    "PropertyAccessor",
    "_RuleFileReader",
    "_get_option",
    "_is_frozen_dataclass",
    "_stable_config_key",
    "reset_propinspect_options",
    "set_propinspect_option",
]

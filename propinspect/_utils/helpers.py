"""
This module provides small, general-purpose helper functions that are shared
across the `propinspect` package.

`_stable_config_key` turns a processor configuration into a deterministic
string, so that processor instances can be cached per (name, configuration)
pair instead of per name only. `_is_frozen_dataclass` is used by the property
accessor to tell whether ordinary attribute assignment is allowed on an
object.
"""

import json
from collections.abc import Mapping
from dataclasses import is_dataclass
from typing import Any


def _with_string_keys(value: Any) -> Any:
    """Recursively key every mapping by the repr of its keys."""
    if isinstance(value, Mapping):
        return {repr(k): _with_string_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_with_string_keys(v) for v in value]
    return value


def _stable_config_key(processor_name: str, config: Mapping) -> tuple[str, str]:
    """Build a hashable cache key from a processor name and its configuration."""
    if not isinstance(config, Mapping):
        raise TypeError("Processor configuration must be a mapping.")

    # Keys of mixed types cannot be sorted, so they are compared by repr
    serialized = json.dumps(_with_string_keys(config), sort_keys=True, default=repr)
    return processor_name, serialized


def _is_frozen_dataclass(obj: object) -> bool:
    """Return True if obj is an instance of a frozen dataclass."""
    if not is_dataclass(obj) or isinstance(obj, type):
        return False
    return bool(obj.__dataclass_params__.frozen)


def _iter_slots(cls: type) -> list[str]:
    """Collect the names declared in __slots__ across the class hierarchy."""
    names = []
    for klass in cls.__mro__:
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(slots)
    return names

"""
This module holds the package-wide options of propinspect.

Options tune how the attribute handler and the processor validator word and
route custom messages, without passing settings to every instance:

- `custom_message_key`: option name under which a custom message is injected
  into a processor's configuration (default: "customMessage").
- `default_error_message`: template of the message attached to a validation
  error when no custom message was declared; `{name}` is replaced by the
  processor name (default: "Validation failed for {name}").

Options are changed through `set_propinspect_option` (re-exported by
`propinspect.options`) and read internally with `_get_option`.
"""

import logging
from collections.abc import Iterable
from typing import Any

logger = logging.getLogger(__name__)

_DEFAULTS = {
    "custom_message_key": "customMessage",
    "default_error_message": "Validation failed for {name}",
}

_settings = dict(_DEFAULTS)


def _as_list(items: Any, what: str) -> list:
    if isinstance(items, str):
        return [items]
    if isinstance(items, Iterable):
        return list(items)
    raise TypeError(f"{what} must be a string or an iterable of strings.")


def set_propinspect_option(options: str | Iterable[str], values: Any) -> None:
    """
    Set one or more propinspect options.

    Args:
        options (str | Iterable[str]): Option name(s), e.g. 'custom_message_key'.
        values (Any): New value(s), matched positionally to `options`.

    Raises:
        KeyError: If an option is unknown.
        TypeError: If an option name or value is not a string.
        ValueError: If `options` and `values` differ in length.
    """
    names = _as_list(options, "Option name")
    new_values = _as_list(values, "Option value")
    if len(names) != len(new_values):
        raise ValueError(
            f"Got {len(names)} option name(s) but {len(new_values)} value(s)."
        )

    # Validate everything first so a bad pair leaves the settings untouched
    for name, value in zip(names, new_values):
        if not isinstance(name, str):
            raise TypeError(f"Option name must be a string, got {name!r}.")
        if name not in _DEFAULTS:
            raise KeyError(f"Unknown option {name!r}. Valid options are: {sorted(_DEFAULTS)}")
        if not isinstance(value, str):
            raise TypeError(f"Value of option {name!r} must be a string.")

    for name, value in zip(names, new_values):
        logger.debug("Setting option %r to %r", name, value)
        _settings[name] = value


def reset_propinspect_options() -> None:
    """Restore every option to its default value."""
    _settings.update(_DEFAULTS)


def _get_option(key: str) -> Any:
    return _settings[key]

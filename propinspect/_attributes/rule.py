"""
This module defines `Rule`, the metadata object attached to properties, and
the `rule` and `rule_from_file` factories used to declare it.

A `Rule` is declared on a property with `typing.Annotated`:

    class User:
        name: Annotated[str, rule("trim", length={"max": 20})]
        email: Annotated[str, rule("trim", "email", messages={"email": "Bad email"})]

Positional arguments of `rule` are bare processor names or single-entry
mappings (`{"length": {"max": 20}}`), keyword arguments are named
configurable processors. The call order is kept, which is the order in which
the processors run.

`Rule` is frozen (attributes cannot be rebound). Container attributes are
returned as copies when accessed, so external mutation does not affect the
stored metadata.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from propinspect._utils import _RuleFileReader

from .contracts import (
    CustomizableMessageAttribute,
    FallbackValueAttribute,
    ProcessableAttribute,
)


@dataclass(frozen=True, eq=False)
class Rule(ProcessableAttribute, CustomizableMessageAttribute, FallbackValueAttribute):
    """
    Processing rule attached to a property.

    Implements every capability: it yields processors, supplies custom messages
    per processor name and an optional fallback value for failed processing.
    """

    _processors: dict[str | int, Any]
    _messages: dict[str, str] = None
    _fallback: Any = None

    def __getattribute__(self, name: str):
        # Intercept container access to return defensive copies
        val = super().__getattribute__(name)
        if name in {"_processors", "_messages"} and isinstance(val, dict):
            return dict(val)
        return val

    def get_processors(self) -> dict[str | int, Any]:
        return self._processors

    def get_message(self, processor_name: str) -> str | None:
        return (self._messages or {}).get(processor_name)

    def get_fallback_value(self) -> Any:
        return self._fallback


def _build_processor_spec(
    positional: Iterable[Any], named: Mapping[str, Any]
) -> dict[str | int, Any]:
    """Merge positional and named processors into one ordered specification."""
    spec: dict[str | int, Any] = dict(enumerate(positional))
    for name, options in named.items():
        spec[name] = options
    return spec


def rule(
    *processors: str | Mapping[str, Any],
    messages: Mapping[str, str] | None = None,
    fallback: Any = None,
    **named: Mapping[str, Any],
) -> Rule:
    """
    Declare the processors to run on a property.

    Args:
        *processors: Bare processor names (e.g. "trim") or single-entry
            mappings of a processor name to its options
            (e.g. {"length": {"max": 20}}).
        messages (Mapping[str, str] | None, optional): Custom messages keyed
            by processor name, used instead of the generated default when the
            processor fails validation. Defaults to None.
        fallback (Any, optional): Value used instead of the original value
            when the processing pipeline fails. Defaults to None.
        **named: Named configurable processors, mapping a processor name to
            its options.

    Returns:
        Rule: The immutable rule metadata.

    Raises:
        TypeError: If messages is not a mapping of strings.
    """
    if messages is not None:
        if not isinstance(messages, Mapping):
            raise TypeError("Argument 'messages' must be a mapping.")
        if not all(isinstance(m, str) for m in messages.values()):
            raise TypeError("Custom messages must be strings.")
        messages = dict(messages)

    return Rule(
        _processors=_build_processor_spec(processors, named),
        _messages=messages,
        _fallback=fallback,
    )


def rule_from_file(
    path: str | Path,
    key: str | None = None,
    custom_engine: dict[str, Callable] | None = None,
) -> Rule:
    """
    Load a rule from a JSON, YAML or TOML file.

    The file (or the section selected by `key`) must define `processors`,
    either as a list of positional entries or as a mapping of named
    processors, and may define `messages` and `fallback`.

    Args:
        path (str | Path): The rule file.
        key (str | None, optional): Top-level section holding the rule, for
            files declaring several rules. Defaults to None.
        custom_engine (dict[str, Callable] | None, optional): Extra readers
            keyed by file extension. Defaults to None.

    Returns:
        Rule: The rule described by the file.

    Raises:
        KeyError: If key is not found in the file.
        ValueError: If the file does not define 'processors'.
    """
    data = _RuleFileReader(path, custom_engine=custom_engine).read()

    if key is not None:
        if not isinstance(data, Mapping) or key not in data:
            raise KeyError(f"Rule {key!r} not found in {path}.")
        data = data[key]

    if not isinstance(data, Mapping) or "processors" not in data:
        raise ValueError(f"Rule file {path} must define 'processors'.")

    processors = data["processors"]
    if isinstance(processors, Mapping):
        spec = dict(processors)
    elif isinstance(processors, list):
        spec = _build_processor_spec(processors, {})
    else:
        raise ValueError("'processors' must be a list or a mapping.")

    messages = data.get("messages")
    if messages is not None and not isinstance(messages, Mapping):
        raise ValueError("'messages' must be a mapping.")

    return Rule(
        _processors=spec,
        _messages=dict(messages) if messages is not None else None,
        _fallback=data.get("fallback"),
    )

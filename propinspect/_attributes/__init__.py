"""
This module aggregates the attribute capabilities and the `Rule` metadata,
making them accessible under the 'propinspect._attributes' namespace.
"""

from propinspect._attributes.contracts import (
    CustomizableMessageAttribute,
    FallbackValueAttribute,
    ProcessableAttribute,
)
from propinspect._attributes.rule import Rule, rule, rule_from_file

__all__ = [
    "CustomizableMessageAttribute",
    "FallbackValueAttribute",
    "ProcessableAttribute",
    "Rule",
    "rule",
    "rule_from_file",
]

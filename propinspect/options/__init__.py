"""
This module provides a convenient entry point for setting global
configuration options for the propinspect package.
"""

from propinspect._utils import reset_propinspect_options, set_propinspect_option

__all__ = ["reset_propinspect_options", "set_propinspect_option"]

"""Line-level parsing building blocks.

This package provides the line classifier, the setting name validator, and
the value normalizer shared by load, save, and delete.
"""

from .classifier import classify_line
from .names import NameProblem, check_name, validate_name
from .values import normalize_value, value_bounds

__all__ = [
    "NameProblem",
    "check_name",
    "classify_line",
    "normalize_value",
    "validate_name",
    "value_bounds",
]

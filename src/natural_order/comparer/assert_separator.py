"""Assertions for separator characters"""

from typing import Optional

from ..error import (
    MissingSeparatorError,
    SeparatorConflictError,
    UnsupportedSeparatorError,
)
from .character_classes import is_digit

__all__ = ["assert_separator", "assert_distinct_separators"]


def assert_separator(separator: Optional[str], parameter: str) -> str:
    """Make sure that the separator is a single non-digit character."""
    name = parameter.replace("_", " ").capitalize()
    if separator is None:
        msg = f"Must provide {name.lower()}."
        raise MissingSeparatorError(msg, parameter)
    if not isinstance(separator, str):
        msg = f"Expected {name.lower()} to be a string."
        raise TypeError(msg)
    if not separator:
        msg = f"Expected {name.lower()} to be a non-empty string."
        raise MissingSeparatorError(msg, parameter)
    if len(separator) > 1:
        msg = f"{name} must be a single character, but got {separator!r}."
        raise UnsupportedSeparatorError(msg, parameter)
    if is_digit(separator):
        msg = f"{name} cannot be a digit, but got {separator!r}."
        raise UnsupportedSeparatorError(msg, parameter)
    return separator


def assert_distinct_separators(decimal_separator: str, group_separator: str) -> None:
    """Make sure that decimal and group separator can be told apart."""
    if decimal_separator == group_separator:
        msg = (
            "Decimal and group separator cannot be the same character,"
            f" but both are {decimal_separator!r}."
        )
        raise SeparatorConflictError(msg, "group_separator")

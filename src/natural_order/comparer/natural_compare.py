"""Natural sort order

See: https://en.wikipedia.org/wiki/Natural_sort_order
"""

from decimal import Decimal
from typing import Iterator, Tuple

from .character_classes import is_digit
from .config import ComparerConfig

__all__ = [
    "compare_runs",
    "is_numeric_run",
    "iter_runs",
    "natural_compare",
    "next_run",
    "parse_number",
]


def next_run(text: str, start: int, config: ComparerConfig) -> Tuple[str, int]:
    """Extract the run starting at the given position.

    A run is either numeric, starting with a digit, or non-numeric. It extends as
    far as the following characters are of the same kind as the first one. A
    numeric run additionally absorbs at most one decimal separator and any number
    of group separators, as far as the configuration honors these separators.

    Returns the run and the position of the first character after the run.
    """
    numeric = is_digit(text[start])
    decimal_separator = (
        config.decimal_separator if config.honors_decimal_separator else None
    )
    group_separator = config.group_separator if config.honors_group_separator else None
    seen_decimal_separator = False
    length = len(text)
    end = start + 1
    while end < length:
        char = text[end]
        if is_digit(char) is not numeric:
            if not numeric:
                break
            if char == decimal_separator and not seen_decimal_separator:
                seen_decimal_separator = True
            elif char != group_separator:
                break
        end += 1
    return text[start:end], end


def iter_runs(text: str, config: ComparerConfig) -> Iterator[str]:
    """Iterate over all runs in the given text."""
    position = 0
    length = len(text)
    while position < length:
        run, position = next_run(text, position, config)
        yield run


def is_numeric_run(run: str) -> bool:
    """Check whether the run is numeric."""
    return is_digit(run[0])


def parse_number(run: str, config: ComparerConfig) -> Decimal:
    """Get the numeric value of a numeric run.

    Group separators are dropped wherever they appear in the run, a trailing
    decimal separator is allowed.
    """
    if config.honors_group_separator:
        run = run.replace(config.group_separator, "")  # type: ignore
    if config.honors_decimal_separator and config.decimal_separator != ".":
        run = run.replace(config.decimal_separator, ".")
    return Decimal(run)


def compare_runs(left: str, right: str, config: ComparerConfig) -> int:
    """Compare two runs, numerically if both are numeric, otherwise as text."""
    if is_numeric_run(left) and is_numeric_run(right):
        left_number = parse_number(left, config)
        right_number = parse_number(right, config)
        return (left_number > right_number) - (left_number < right_number)
    return config.collation.compare(left, right)


def natural_compare(left: str, right: str, config: ComparerConfig) -> int:
    """Compare two strings by natural sort order.

    Both strings are split into runs which are compared pairwise. The first pair
    of runs that is not equal decides. If all runs are equal, the shorter string
    comes first, so the result is the difference of the string lengths.
    """
    len_left, len_right = len(left), len(right)
    pos_left = pos_right = 0
    while pos_left < len_left and pos_right < len_right:
        run_left, pos_left = next_run(left, pos_left, config)
        run_right, pos_right = next_run(right, pos_right, config)
        result = compare_runs(run_left, run_right, config)
        if result:
            return result
    return len_left - len_right

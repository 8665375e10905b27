"""Natural Order Comparers

The :mod:`natural_order.comparer` package contains the natural order comparison
algorithm, its configuration and the comparers built upon it.
"""

from .character_classes import is_digit
from .config import (
    ComparerConfig,
    culture_config,
    decimal_separator_config,
    default_config,
    integer_config,
    separators_config,
    validate_config,
)
from .natural_compare import (
    compare_runs,
    is_numeric_run,
    iter_runs,
    natural_compare,
    next_run,
    parse_number,
)
from .null_ordering import compare_with_none
from .string_comparer import StringComparer
from .natural_order_comparer import (
    NaturalOrderComparer,
    current_culture,
    default_integer,
    invariant_culture,
)
from .native_comparer import NativeNaturalOrderComparer, load_str_cmp_logical

__all__ = [
    "ComparerConfig",
    "NativeNaturalOrderComparer",
    "NaturalOrderComparer",
    "StringComparer",
    "compare_runs",
    "compare_with_none",
    "culture_config",
    "current_culture",
    "decimal_separator_config",
    "default_config",
    "default_integer",
    "integer_config",
    "invariant_culture",
    "is_digit",
    "is_numeric_run",
    "iter_runs",
    "load_str_cmp_logical",
    "natural_compare",
    "next_run",
    "parse_number",
    "separators_config",
    "validate_config",
]

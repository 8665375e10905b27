"""Natural Order

Natural order comparison of strings for Python, treating numbers embedded in
strings as numbers, so that "item2" sorts before "item10".

The :mod:`natural_order` package exports the following names from its
sub-packages:

  - :mod:`natural_order.comparer`: the comparers and their configuration
  - :mod:`natural_order.collation`: collations, number formats and cultures
  - :mod:`natural_order.error`: errors raised when creating comparers

Example::

    >>> from natural_order import NaturalOrderComparer
    >>> comparer = NaturalOrderComparer.with_decimal_separator(".")
    >>> comparer.sorted(["v1.10", "v1.9", "v1.09"])
    ['v1.09', 'v1.10', 'v1.9']
"""

# The version of the natural_order package

from .version import version, version_info, VersionInfo

# Collations, number formats and cultures

from .collation import (
    Collation,
    CompareFunction,
    Culture,
    FunctionCollation,
    InvariantCollation,
    LocaleCollation,
    NumberFormat,
    OrdinalCollation,
    as_collation,
    compare_ordinal,
)

# Comparers and their configuration

from .comparer import (
    ComparerConfig,
    NativeNaturalOrderComparer,
    NaturalOrderComparer,
    StringComparer,
    compare_runs,
    compare_with_none,
    culture_config,
    current_culture,
    decimal_separator_config,
    default_config,
    default_integer,
    integer_config,
    invariant_culture,
    iter_runs,
    natural_compare,
    next_run,
    parse_number,
    separators_config,
)

# Errors

from .error import (
    InvalidConfigurationError,
    MissingSeparatorError,
    NativeComparerUnavailableError,
    SeparatorConflictError,
    UnsupportedSeparatorError,
)

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "VersionInfo",
    "__version__",
    "__version_info__",
    # Collation
    "Collation",
    "CompareFunction",
    "Culture",
    "FunctionCollation",
    "InvariantCollation",
    "LocaleCollation",
    "NumberFormat",
    "OrdinalCollation",
    "as_collation",
    "compare_ordinal",
    # Comparer
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
    "iter_runs",
    "natural_compare",
    "next_run",
    "parse_number",
    "separators_config",
    # Error
    "InvalidConfigurationError",
    "MissingSeparatorError",
    "NativeComparerUnavailableError",
    "SeparatorConflictError",
    "UnsupportedSeparatorError",
]

"""Text Collation

The :mod:`natural_order.collation` package provides the culture specific rules
that natural order comparers rely on: collations for comparing text, and number
formats telling which characters separate decimals and digit groups.
"""

from .collation import (
    Collation,
    CompareFunction,
    FunctionCollation,
    InvariantCollation,
    OrdinalCollation,
    as_collation,
    compare_ordinal,
)
from .locale_collation import LocaleCollation
from .number_format import NumberFormat
from .culture import Culture

__all__ = [
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
]

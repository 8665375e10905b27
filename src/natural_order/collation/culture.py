from typing import NamedTuple

from .collation import Collation, InvariantCollation
from .locale_collation import LocaleCollation
from .number_format import NumberFormat

__all__ = ["Culture"]


class Culture(NamedTuple):
    """Culture specific rules for comparing text and reading numbers"""

    collation: Collation
    """collation used for comparing text"""
    number_format: NumberFormat
    """separators used for reading numbers"""

    @classmethod
    def current(cls) -> "Culture":
        """Get the culture given by the current locale."""
        return cls(LocaleCollation(), NumberFormat.from_locale())

    @classmethod
    def invariant(cls) -> "Culture":
        """Get the locale-independent culture."""
        return cls(InvariantCollation(), NumberFormat.invariant())

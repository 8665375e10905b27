from typing import Any, Optional

from ..collation import Culture
from .config import (
    ComparerConfig,
    culture_config,
    decimal_separator_config,
    default_config,
    integer_config,
    separators_config,
    validate_config,
)
from .natural_compare import natural_compare
from .string_comparer import StringComparer

__all__ = [
    "NaturalOrderComparer",
    "current_culture",
    "default_integer",
    "invariant_culture",
]


class NaturalOrderComparer(StringComparer):
    """Comparer for strings following the natural sort order

    Numbers embedded in the strings are compared by their numeric value, so that
    "item2" comes before "item10". Decimal and group separators are honored when
    reading the numbers, depending on the configuration. Text between the numbers
    is compared with the collation of the configuration.

    Without arguments, the comparer uses the current locale. Instead, a culture
    or a complete configuration can be passed. The other ways of configuring the
    comparer are available as class methods.

    Comparers are immutable and can be shared between threads.
    """

    __slots__ = ("_config",)

    _config: ComparerConfig

    def __init__(
        self, culture: Optional[Culture] = None, config: Optional[ComparerConfig] = None
    ) -> None:
        if config is None:
            config = default_config() if culture is None else culture_config(culture)
        elif culture is None:
            config = validate_config(config)
        else:
            msg = "Cannot pass both a culture and a configuration."
            raise TypeError(msg)
        self._config = config

    @property
    def config(self) -> ComparerConfig:
        """The configuration of the comparer"""
        return self._config

    @classmethod
    def with_decimal_separator(cls, decimal_separator: str) -> "NaturalOrderComparer":
        """Create a comparer reading numbers with the given decimal separator.

        Group separators are not honored, text is compared with the invariant
        collation.
        """
        return cls(config=decimal_separator_config(decimal_separator))

    @classmethod
    def with_separators(
        cls, decimal_separator: str, group_separator: str
    ) -> "NaturalOrderComparer":
        """Create a comparer reading numbers with the given separators.

        Text is compared with the invariant collation.
        """
        return cls(config=separators_config(decimal_separator, group_separator))

    @classmethod
    def integer_only(
        cls, culture: Optional[Culture] = None, ignore_decimal_separator: bool = True
    ) -> "NaturalOrderComparer":
        """Create a comparer that ignores group separators.

        By default, all numbers are read as integers, with decimal and group
        separators treated as ordinary text. If ignore_decimal_separator is set
        to False, the decimal separator of the culture is honored instead.
        """
        return cls(config=integer_config(culture, ignore_decimal_separator))

    def compare_strings(self, left: str, right: str) -> int:
        return natural_compare(left, right, self.config)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, NaturalOrderComparer) and other.config == self.config
        )

    def __hash__(self) -> int:
        return hash((NaturalOrderComparer, self.config))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config!r})"


def current_culture() -> NaturalOrderComparer:
    """Get a comparer for the current locale."""
    return NaturalOrderComparer()


def invariant_culture() -> NaturalOrderComparer:
    """Get a comparer for the invariant culture."""
    return NaturalOrderComparer(Culture.invariant())


def default_integer() -> NaturalOrderComparer:
    """Get a comparer reading all numbers as integers."""
    return NaturalOrderComparer.integer_only()

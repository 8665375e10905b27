"""Natural order comparer configuration

A comparer configuration is an immutable value. It should be created with one of
the builder functions in this module, which validate their input and raise an
:class:`~natural_order.error.InvalidConfigurationError` instead of returning a
configuration that cannot be used.
"""

from typing import NamedTuple, Optional

from ..collation import Collation, Culture, InvariantCollation, as_collation
from .assert_separator import assert_distinct_separators, assert_separator

__all__ = [
    "ComparerConfig",
    "culture_config",
    "decimal_separator_config",
    "default_config",
    "integer_config",
    "separators_config",
    "validate_config",
]


class ComparerConfig(NamedTuple):
    """Configuration of a natural order comparer"""

    decimal_separator: str
    """separator between the integral and the fractional part of a number"""
    group_separator: Optional[str]
    """separator between groups of digits, None if there is no such separator"""
    ignore_decimal_separator: bool
    """whether numbers are read as integers, ending at any non-digit"""
    ignore_group_separator: bool
    """whether group separators end a number"""
    collation: Collation
    """collation used for comparing text"""

    @property
    def honors_decimal_separator(self) -> bool:
        """Whether a decimal separator can be part of a number."""
        return not self.ignore_decimal_separator

    @property
    def honors_group_separator(self) -> bool:
        """Whether group separators can be part of a number."""
        return not self.ignore_group_separator and self.group_separator is not None


def validate_config(config: ComparerConfig) -> ComparerConfig:
    """Validate the given configuration and return it unchanged."""
    if not isinstance(config, ComparerConfig):
        msg = f"Expected a comparer configuration, but got {config!r}."
        raise TypeError(msg)
    assert_separator(config.decimal_separator, "decimal_separator")
    if config.group_separator is not None:
        assert_separator(config.group_separator, "group_separator")
        if config.honors_decimal_separator and config.honors_group_separator:
            assert_distinct_separators(
                config.decimal_separator, config.group_separator
            )
    if config.collation is None:
        msg = "Must provide a collation."
        raise TypeError(msg)
    return config


def culture_config(
    culture: Culture,
    ignore_decimal_separator: bool = False,
    ignore_group_separator: bool = False,
) -> ComparerConfig:
    """Get a configuration using the collation and separators of a culture."""
    if culture is None:
        msg = "Must provide culture."
        raise TypeError(msg)
    number_format = culture.number_format
    return validate_config(
        ComparerConfig(
            number_format.decimal_separator,
            number_format.group_separator,
            ignore_decimal_separator,
            ignore_group_separator,
            as_collation(culture.collation),
        )
    )


def default_config() -> ComparerConfig:
    """Get a configuration for the current locale, honoring both separators."""
    return culture_config(Culture.current())


def integer_config(
    culture: Optional[Culture] = None, ignore_decimal_separator: bool = True
) -> ComparerConfig:
    """Get a configuration that ignores group separators.

    By default, all numbers are read as integers. If ignore_decimal_separator is
    False, the decimal separator of the culture is still honored. The collation
    of the given culture is used for comparing text, by default the one of the
    current locale.
    """
    return culture_config(culture or Culture.current(), ignore_decimal_separator, True)


def decimal_separator_config(decimal_separator: str) -> ComparerConfig:
    """Get an invariant configuration with a custom decimal separator.

    Group separators are not honored with this configuration.
    """
    decimal_separator = assert_separator(decimal_separator, "decimal_separator")
    return ComparerConfig(decimal_separator, None, False, True, InvariantCollation())


def separators_config(decimal_separator: str, group_separator: str) -> ComparerConfig:
    """Get an invariant configuration with custom decimal and group separators."""
    decimal_separator = assert_separator(decimal_separator, "decimal_separator")
    group_separator = assert_separator(group_separator, "group_separator")
    assert_distinct_separators(decimal_separator, group_separator)
    return ComparerConfig(
        decimal_separator, group_separator, False, False, InvariantCollation()
    )

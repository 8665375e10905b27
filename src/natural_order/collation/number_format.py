"""Number formatting rules"""

import locale
import logging
from typing import NamedTuple, Optional

__all__ = ["NumberFormat"]

logger = logging.getLogger(__name__)


class NumberFormat(NamedTuple):
    """Characters used when writing numbers

    The group separator can be None if numbers are written without grouping.
    """

    decimal_separator: str
    """separator between the integral and the fractional part"""
    group_separator: Optional[str]
    """separator between groups of digits in the integral part"""

    @classmethod
    def invariant(cls) -> "NumberFormat":
        """Get the locale-independent number format."""
        return cls(".", ",")

    @classmethod
    def from_locale(cls) -> "NumberFormat":
        """Get the number format of the current ``LC_NUMERIC`` locale.

        Separators that cannot be used for natural order comparison are replaced:
        a missing decimal separator by a point, a missing or ambiguous group
        separator by None.
        """
        conventions = locale.localeconv()
        decimal_separator = conventions.get("decimal_point") or "."
        group_separator: Optional[str] = conventions.get("thousands_sep") or None
        if len(decimal_separator) != 1 or decimal_separator.isdecimal():
            logger.debug(
                "Unusable locale decimal separator %r, using '.'", decimal_separator
            )
            decimal_separator = "."
        if group_separator and (
            len(group_separator) != 1
            or group_separator.isdecimal()
            or group_separator == decimal_separator
        ):
            logger.debug(
                "Unusable locale group separator %r, ignoring it", group_separator
            )
            group_separator = None
        logger.debug(
            "Locale number format: decimal separator %r, group separator %r",
            decimal_separator,
            group_separator,
        )
        return cls(decimal_separator, group_separator)

"""Natural Order Errors

The :mod:`natural_order.error` package contains the errors raised when a comparer
cannot be constructed.
"""

from .configuration_error import (
    InvalidConfigurationError,
    MissingSeparatorError,
    SeparatorConflictError,
    UnsupportedSeparatorError,
)

from .native_comparer_error import NativeComparerUnavailableError

__all__ = [
    "InvalidConfigurationError",
    "MissingSeparatorError",
    "NativeComparerUnavailableError",
    "SeparatorConflictError",
    "UnsupportedSeparatorError",
]

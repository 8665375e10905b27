"""Natural order comparison provided by the operating system"""

import ctypes
import logging
import sys
from typing import Any, Optional

from ..collation import CompareFunction
from ..error import NativeComparerUnavailableError
from .string_comparer import StringComparer

__all__ = ["NativeNaturalOrderComparer", "load_str_cmp_logical"]

logger = logging.getLogger(__name__)


def load_str_cmp_logical() -> Optional[CompareFunction]:
    """Load the ``StrCmpLogicalW`` function of the Windows shell API.

    Returns None if the function is not available on this platform.
    """
    if not sys.platform.startswith("win"):
        logger.debug("StrCmpLogicalW is not available on %s", sys.platform)
        return None
    try:
        function = ctypes.windll.shlwapi.StrCmpLogicalW  # type: ignore
    except (AttributeError, OSError) as error:
        logger.debug("Cannot load StrCmpLogicalW: %s", error)
        return None
    function.argtypes = [ctypes.c_wchar_p, ctypes.c_wchar_p]
    function.restype = ctypes.c_int
    return function


class NativeNaturalOrderComparer(StringComparer):
    """Comparer delegating to the logical string comparison of Windows

    The ordering is defined by the platform and can differ from the one of the
    :class:`~natural_order.NaturalOrderComparer`. Like the latter, it sorts None
    before any string.

    A comparison function with the same signature as ``StrCmpLogicalW`` can be
    passed instead of loading the one of the platform.
    """

    __slots__ = ("function",)

    function: CompareFunction

    def __init__(self, function: Optional[CompareFunction] = None) -> None:
        if function is None:
            function = load_str_cmp_logical()
            if function is None:
                msg = "Native natural order comparison is only available on Windows."
                raise NativeComparerUnavailableError(msg)
        elif not callable(function):
            msg = f"Expected a comparison function, but got {function!r}."
            raise TypeError(msg)
        self.function = function

    @staticmethod
    def is_available() -> bool:
        """Check whether the platform provides a logical string comparison."""
        return load_str_cmp_logical() is not None

    @classmethod
    def default(cls) -> "NativeNaturalOrderComparer":
        """Get a comparer using the logical string comparison of the platform."""
        return cls()

    def compare_strings(self, left: str, right: str) -> int:
        result = self.function(left, right)
        return (result > 0) - (result < 0)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, NativeNaturalOrderComparer)
            and other.function == self.function
        )

    def __hash__(self) -> int:
        return hash((NativeNaturalOrderComparer, self.function))

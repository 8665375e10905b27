from abc import ABC, abstractmethod
from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from .null_ordering import compare_with_none

__all__ = ["StringComparer"]


T = TypeVar("T")

KeyFunction = Callable[[T], Optional[str]]


class StringComparer(ABC):
    """Base class for comparers of optional strings

    A comparer can be called like a comparison function taking two strings, and
    can be used for sorting via :meth:`sort_key`, :meth:`sorted` and :meth:`sort`.
    None values are allowed and sort before any string.
    """

    __slots__ = ()

    def compare(self, left: Optional[str], right: Optional[str]) -> int:
        """Compare two optional strings.

        The result is negative if left comes before right, zero if they are
        equivalent and positive if left comes after right.
        """
        for value in (left, right):
            if value is not None and not isinstance(value, str):
                msg = f"Can only compare strings, but got {value!r}."
                raise TypeError(msg)
        if left is None or right is None:
            return compare_with_none(left, right)
        return self.compare_strings(left, right)

    def __call__(self, left: Optional[str], right: Optional[str]) -> int:
        return self.compare(left, right)

    @abstractmethod
    def compare_strings(self, left: str, right: str) -> int:
        """Compare two strings."""

    def sort_key(self, key: Optional[KeyFunction] = None) -> Callable[[Any], Any]:
        """Get a key function for sorting with this comparer.

        If a key function is given, it is applied to the items before comparing.
        """
        compare = self.compare
        if key is None:
            return cmp_to_key(compare)
        return cmp_to_key(lambda left, right: compare(key(left), key(right)))

    def sorted(
        self,
        iterable: Iterable[T],
        key: Optional[KeyFunction] = None,
        reverse: bool = False,
    ) -> List[T]:
        """Return a new list with the items of the iterable in natural order."""
        return sorted(iterable, key=self.sort_key(key), reverse=reverse)

    def sort(
        self, items: List[T], key: Optional[KeyFunction] = None, reverse: bool = False
    ) -> None:
        """Sort the given list in place in natural order."""
        items.sort(key=self.sort_key(key), reverse=reverse)

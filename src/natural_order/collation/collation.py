"""Text collations"""

from typing import Any, Callable, Protocol, Union, runtime_checkable

__all__ = [
    "Collation",
    "CompareFunction",
    "FunctionCollation",
    "InvariantCollation",
    "OrdinalCollation",
    "as_collation",
    "compare_ordinal",
]


CompareFunction = Callable[[str, str], int]


@runtime_checkable
class Collation(Protocol):
    """Lexical ordering of two strings

    Natural order comparers delegate the comparison of non-numeric runs to a
    collation. The result must be negative, zero or positive and the ordering
    should be a total order, otherwise sorting with a natural order comparer
    becomes unpredictable.
    """

    def compare(self, left: str, right: str) -> int:
        ...  # pragma: no cover


def compare_ordinal(left: str, right: str) -> int:
    """Compare two strings by the code points of their characters."""
    return (left > right) - (left < right)


class OrdinalCollation:
    """Code point order, as used by Python for comparing strings."""

    __slots__ = ()

    def compare(self, left: str, right: str) -> int:
        return compare_ordinal(left, right)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, OrdinalCollation)

    def __hash__(self) -> int:
        return hash(OrdinalCollation)

    def __repr__(self) -> str:
        return "OrdinalCollation()"


class InvariantCollation:
    """Locale-independent collation

    Strings are compared without regard to case first, using their case folded
    forms. Strings that only differ in case are ordered with lower case letters
    before upper case letters, so that the order stays total.
    """

    __slots__ = ()

    def compare(self, left: str, right: str) -> int:
        result = compare_ordinal(left.casefold(), right.casefold())
        if result:
            return result
        # swapping the case puts lower case letters before upper case ones
        return compare_ordinal(left.swapcase(), right.swapcase()) or compare_ordinal(
            left, right
        )

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, InvariantCollation)

    def __hash__(self) -> int:
        return hash(InvariantCollation)

    def __repr__(self) -> str:
        return "InvariantCollation()"


class FunctionCollation:
    """Collation delegating to a plain comparison function."""

    __slots__ = ("function",)

    function: CompareFunction

    def __init__(self, function: CompareFunction) -> None:
        if not callable(function):
            msg = f"Expected a comparison function, but got {function!r}."
            raise TypeError(msg)
        self.function = function

    def compare(self, left: str, right: str) -> int:
        return self.function(left, right)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, FunctionCollation) and other.function == self.function
        )

    def __hash__(self) -> int:
        return hash(self.function)

    def __repr__(self) -> str:
        return f"FunctionCollation({self.function!r})"


def as_collation(collation: Union[Collation, CompareFunction]) -> Collation:
    """Get a collation for the given collation or comparison function."""
    if collation is None:
        msg = "Must provide a collation."
        raise TypeError(msg)
    if isinstance(collation, Collation):
        return collation
    return FunctionCollation(collation)

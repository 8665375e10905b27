import locale
from itertools import zip_longest
from typing import Any, List

__all__ = ["LocaleCollation"]


class LocaleCollation:
    """Collation following the current locale

    Uses :func:`locale.strcoll`, i.e. the ``LC_COLLATE`` category of the process
    at the time of the comparison. Python starts with the "C" locale, in which
    this is the same as the code point order, unless the application calls
    ``locale.setlocale()``.

    Since ``strcoll`` cannot handle null characters, strings containing them are
    compared piecewise, with the null character sorting before everything else.
    """

    __slots__ = ()

    def compare(self, left: str, right: str) -> int:
        if "\0" in left or "\0" in right:
            return self.compare_pieces(left.split("\0"), right.split("\0"))
        result = locale.strcoll(left, right)
        return (result > 0) - (result < 0)

    def compare_pieces(self, left: List[str], right: List[str]) -> int:
        for left_piece, right_piece in zip_longest(left, right):
            if left_piece is None:
                return -1
            if right_piece is None:
                return 1
            result = locale.strcoll(left_piece, right_piece)
            if result:
                return (result > 0) - (result < 0)
        return 0

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, LocaleCollation)

    def __hash__(self) -> int:
        return hash(LocaleCollation)

    def __repr__(self) -> str:
        return "LocaleCollation()"

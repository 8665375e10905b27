from typing import Optional

__all__ = ["compare_with_none"]


def compare_with_none(left: Optional[str], right: Optional[str]) -> int:
    """Compare two values of which at least one is None.

    None comes before any string, and two None values are equal.
    """
    if left is None:
        return 0 if right is None else -1
    return 1

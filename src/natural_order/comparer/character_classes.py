__all__ = ["is_digit"]


def is_digit(char: str) -> bool:
    """Check whether char is a decimal digit

    Any character of the Unicode category "Nd" counts, not only ASCII digits,
    since these are all understood by :class:`decimal.Decimal`.
    """
    return char.isdecimal()

__all__ = ["NativeComparerUnavailableError"]


class NativeComparerUnavailableError(OSError):
    """The platform does not provide a logical string comparison routine."""

from typing import Optional

__all__ = [
    "InvalidConfigurationError",
    "MissingSeparatorError",
    "SeparatorConflictError",
    "UnsupportedSeparatorError",
]


class InvalidConfigurationError(ValueError):
    """Invalid comparer configuration

    Raised while building a comparer configuration. No comparer is produced when
    this error is raised.
    """

    message: str
    """A message describing the error"""

    parameter: Optional[str]
    """Name of the offending parameter, if the error can be attributed to one"""

    def __init__(self, message: str, parameter: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.parameter = parameter

    def __repr__(self) -> str:
        args = [repr(self.message)]
        if self.parameter:
            args.append(f"parameter={self.parameter!r}")
        return f"{self.__class__.__name__}({', '.join(args)})"


class MissingSeparatorError(InvalidConfigurationError):
    """A required separator was not given or is empty."""


class UnsupportedSeparatorError(InvalidConfigurationError):
    """A separator is not a single non-digit character."""


class SeparatorConflictError(InvalidConfigurationError):
    """Decimal and group separator are the same character."""

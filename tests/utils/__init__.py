"""Test utilities"""

from .gen_fuzz_strings import gen_fuzz_strings


__all__ = ["gen_fuzz_strings"]

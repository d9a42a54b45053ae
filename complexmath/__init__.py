"""Immutable complex-number value type over IEEE-754 doubles."""

from complexmath.complex import Complex

__all__ = ["Complex"]
__version__ = "0.1.0"

"""
Errors raised by the arithmetic engine.

All of them derive from BigNumError, so a caller may catch any engine failure at once.
"""


class BigNumError(ArithmeticError):
    """Base class for failures of exact arithmetic."""


class DivisionByZero(BigNumError, ZeroDivisionError):
    """Zero denominator, zero divisor, or zero raised to a negative power."""


class NonIntegerExponent(BigNumError, ValueError):
    """Exponent of a power is not an integer."""


class InexactResult(BigNumError, ValueError):
    """Exact result of an operation is not a rational number."""

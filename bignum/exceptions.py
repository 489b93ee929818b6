"""
BigNum Exception Hierarchy

All failures raised by the library derive from BigNumError:

    BigNumError
    ├── DivisionByZeroError     (also a ZeroDivisionError)
    ├── NoInverseError          (also a ValueError)
    ├── NegativeExponentError   (also a ValueError)
    ├── InvalidLiteralError     (also a ValueError)
    └── UnknownOperationError   (also a KeyError)

Each exception carries a human readable message and an optional context
dict with the operands involved, e.g.:

    try:
        BigInteger(7).mod_inverse(BigInteger(14))
    except NoInverseError as e:
        print(e.context['gcd'])   # '7'
"""

from typing import Any, Dict, Optional


class BigNumError(Exception):
    """Base class for every error raised by the bignum package."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} | Context: {context_str}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


class DivisionByZeroError(BigNumError, ZeroDivisionError):
    """Raised by divide and modulo when the divisor is zero."""


class NoInverseError(BigNumError, ValueError):
    """Raised by mod_inverse when gcd(a mod m, m) != 1."""


class NegativeExponentError(BigNumError, ValueError):
    """Raised by pow_mod when the exponent is negative."""


class InvalidLiteralError(BigNumError, ValueError):
    """Raised by strict parsing when the text is not an optional '-' followed by digits."""


class UnknownOperationError(BigNumError, KeyError):
    """Raised by the calculator when an operation name is not in the dispatch table."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return BigNumError.__str__(self)


__all__ = [
    'BigNumError',
    'DivisionByZeroError',
    'NoInverseError',
    'NegativeExponentError',
    'InvalidLiteralError',
    'UnknownOperationError',
]

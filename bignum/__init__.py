# BigNum Calculator
"""
Arbitrary-precision signed integers for public-key cryptosystem building
blocks (modular exponentiation, modular inverse).

Quick start:
    >>> from bignum import BigInteger
    >>> BigInteger(12345).pow_mod(BigInteger(67890), BigInteger(1000000009))

Note: textbook arithmetic only; not constant time, not for production
      cryptography.
"""

from .core_math import (
    BigInteger,
    add_mod,
    mul_mod,
    pow_mod,
    gcd,
    extended_gcd,
    mod_inverse,
)

from .exceptions import (
    BigNumError,
    DivisionByZeroError,
    NoInverseError,
    NegativeExponentError,
    InvalidLiteralError,
    UnknownOperationError,
)

__version__ = "1.0.0"

__all__ = [
    'BigInteger',
    'add_mod',
    'mul_mod',
    'pow_mod',
    'gcd',
    'extended_gcd',
    'mod_inverse',
    'BigNumError',
    'DivisionByZeroError',
    'NoInverseError',
    'NegativeExponentError',
    'InvalidLiteralError',
    'UnknownOperationError',
]

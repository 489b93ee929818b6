# Core Math Module
"""
Arbitrary-precision integer arithmetic including:
- Sign-magnitude representation (bigint.py)
- Add / subtract / multiply / truncating divide / non-negative modulo
- Modular add, multiply and exponentiation (number_theory.py)
- Extended Euclidean Algorithm and modular inverse
- Decimal text parsing and rendering (textio.py)
"""

from .bigint import (
    BigInteger,
    ZERO,
    ONE,
    TWO,
    DIGIT_BASE,
    normalize,
    compare_magnitudes,
    add_magnitudes,
    subtract_magnitudes,
    multiply_magnitudes,
    divmod_magnitudes,
)

from .number_theory import (
    add_mod,
    mul_mod,
    pow_mod,
    gcd,
    extended_gcd,
    mod_inverse,
)

from .textio import parse_decimal, format_decimal

__all__ = [
    # Representation and core arithmetic
    'BigInteger',
    'ZERO',
    'ONE',
    'TWO',
    'DIGIT_BASE',
    'normalize',
    'compare_magnitudes',
    'add_magnitudes',
    'subtract_magnitudes',
    'multiply_magnitudes',
    'divmod_magnitudes',
    # Number theory
    'add_mod',
    'mul_mod',
    'pow_mod',
    'gcd',
    'extended_gcd',
    'mod_inverse',
    # Text I/O
    'parse_decimal',
    'format_decimal',
]

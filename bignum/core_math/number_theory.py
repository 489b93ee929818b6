"""
Number-Theoretic Operations

Modular arithmetic on BigInteger for RSA-style computations:
- Modular addition and multiplication
- Modular exponentiation (square-and-multiply algorithm)
- Greatest common divisor
- Extended Euclidean Algorithm for modular inverse

All operations are built on BigInteger's core arithmetic and return new
values. Modulo by zero raises DivisionByZeroError from the underlying
division; it is never caught here.
"""

from typing import Tuple

from ..exceptions import NegativeExponentError, NoInverseError
from ..logging_config import get_logger
from .bigint import BigInteger, ONE, TWO, ZERO

logger = get_logger(__name__)


def add_mod(a: BigInteger, b: BigInteger, modulus: BigInteger) -> BigInteger:
    """Compute (a + b) mod modulus."""
    return (a + b) % modulus


def mul_mod(a: BigInteger, b: BigInteger, modulus: BigInteger) -> BigInteger:
    """Compute (a * b) mod modulus."""
    return (a * b) % modulus


def pow_mod(base: BigInteger, exponent: BigInteger, modulus: BigInteger) -> BigInteger:
    """
    Modular exponentiation using square-and-multiply algorithm.

    Algorithm (right-to-left binary method):
    1. Start with result = 1 and base reduced mod modulus
    2. While the exponent is non-zero:
       - If it is odd, multiply result by base (mod modulus)
       - Square the base (mod modulus)
       - Halve the exponent (integer division by 2)

    The representation is decimal, so "odd" is read from the parity of
    the least-significant decimal digit.

    Args:
        base: The base number
        exponent: The exponent (must be non-negative)
        modulus: The modulus (must be non-zero)

    Returns:
        (base^exponent) mod modulus, in [0, |modulus|)

    Raises:
        NegativeExponentError: If exponent < 0
        DivisionByZeroError: If modulus == 0
    """
    if exponent.is_negative:
        raise NegativeExponentError(
            "Exponent must be non-negative",
            {'exponent': str(exponent)},
        )

    logger.debug(
        "pow_mod",
        extra={
            'exponent_digits': len(exponent.digits),
            'modulus_digits': len(modulus.digits),
        },
    )

    # Any value mod 1 is 0
    if abs(modulus).is_one():
        return ZERO

    result = ONE
    base = base % modulus

    while not exponent.is_zero():
        if exponent.is_odd():
            result = mul_mod(result, base, modulus)
        base = mul_mod(base, base, modulus)
        exponent = exponent / TWO

    return result


def gcd(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Compute the greatest common divisor using Euclidean algorithm.

    Returns:
        Non-negative GCD of a and b
    """
    a, b = abs(a), abs(b)
    while not b.is_zero():
        a, b = b, a % b
    return a


def extended_gcd(a: BigInteger, b: BigInteger) -> Tuple[BigInteger, BigInteger, BigInteger]:
    """
    Extended Euclidean Algorithm.

    Finds integers x, y such that: a*x + b*y = gcd(a, b)

    Iterative form: the Bezout coefficients of the two most recent
    remainders are carried through the loop, so no recursion depth is
    needed. Each quotient is a truncating division and each new
    remainder is old_r - q*r, which keeps a*s + b*t == r exact for
    either sign of the inputs.

    Args:
        a: First integer
        b: Second integer

    Returns:
        Tuple (gcd, x, y) where a*x + b*y = gcd and gcd >= 0
    """
    old_r, r = a, b
    old_s, s = ONE, ZERO
    old_t, t = ZERO, ONE

    while not r.is_zero():
        quotient = old_r / r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t

    if old_r.is_negative:
        return -old_r, -old_s, -old_t

    return old_r, old_s, old_t


def mod_inverse(a: BigInteger, modulus: BigInteger) -> BigInteger:
    """
    Compute modular multiplicative inverse using Extended Euclidean Algorithm.

    Finds x such that (a * x) mod modulus = 1

    Args:
        a: The number to find inverse of
        modulus: The modulus

    Returns:
        Modular inverse of a, in [0, |modulus|)

    Raises:
        NoInverseError: If inverse doesn't exist (gcd(a, modulus) != 1)
        DivisionByZeroError: If modulus == 0
    """
    reduced = a % modulus
    g, x, _ = extended_gcd(reduced, modulus)

    if not g.is_one():
        logger.debug(
            "mod_inverse: no inverse",
            extra={'value': a, 'modulus': modulus, 'gcd': g},
        )
        raise NoInverseError(
            f"Modular inverse doesn't exist (gcd({a}, {modulus}) = {g})",
            {'value': str(a), 'modulus': str(modulus), 'gcd': str(g)},
        )

    # BigInteger modulo is already non-negative
    return x % modulus

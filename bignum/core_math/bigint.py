"""
Arbitrary-Precision Signed Integers

Implements BigInteger, a sign-magnitude integer built for the modular
arithmetic used by public-key cryptosystems (RSA-style modular
exponentiation and modular inverse).

Representation:
- magnitude: list of decimal digits 0-9, least-significant digit first
- sign: boolean is_negative flag

Canonical form (held by every BigInteger):
1. the digit list is never empty
2. no most-significant zero digit unless the value is exactly 0
3. zero is never negative

The arithmetic is layered as pure functions over magnitudes
(normalize, compare_magnitudes, add_magnitudes, subtract_magnitudes,
multiply_magnitudes, divmod_magnitudes) with a thin sign-dispatch layer
in BigInteger on top. Operators never mutate their operands.

Note: This implementation is NOT constant time and must not be used to
      protect real secrets.
"""

from typing import List, Optional, Sequence, Tuple, Union

from ..exceptions import DivisionByZeroError
from .textio import format_decimal, parse_decimal


# ============================================================================
# Constants
# ============================================================================

DIGIT_BASE = 10

IntLike = Union['BigInteger', int]


# ============================================================================
# Magnitude Primitives
# ============================================================================

def normalize(digits: List[int]) -> List[int]:
    """
    Strip most-significant zero digits in place.

    Leaves a single 0 for a zero magnitude and turns an empty list into [0].

    Returns:
        The same list, for chaining
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """True if the normalized magnitude is 0."""
    return len(digits) == 1 and digits[0] == 0


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Compare two normalized magnitudes.

    A longer digit list is larger (there are no leading zeros); equal
    lengths are compared digit by digit from the most-significant end.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """Add two magnitudes digit by digit with carry propagation."""
    result = []
    carry = 0

    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result.append(total % DIGIT_BASE)
        carry = total // DIGIT_BASE

    if carry:
        result.append(carry)

    return normalize(result)


def subtract_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Subtract magnitude b from magnitude a with borrow propagation.

    Precondition: a >= b (compare_magnitudes(a, b) >= 0).
    """
    result = []
    borrow = 0

    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]

        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0

        result.append(diff)

    if borrow:
        raise ValueError("subtract_magnitudes requires minuend >= subtrahend")

    return normalize(result)


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Schoolbook multiplication.

    Every partial product a[i]*b[j] is accumulated into position i+j of a
    buffer of len(a)+len(b) slots; carries are propagated once at the end.
    """
    buffer = [0] * (len(a) + len(b))

    for i, da in enumerate(a):
        if da == 0:
            continue
        for j, db in enumerate(b):
            buffer[i + j] += da * db

    carry = 0
    for k in range(len(buffer)):
        total = buffer[k] + carry
        buffer[k] = total % DIGIT_BASE
        carry = total // DIGIT_BASE

    return normalize(buffer)


def divmod_magnitudes(dividend: Sequence[int], divisor: Sequence[int]) -> Tuple[List[int], List[int]]:
    """
    Long division of magnitudes, most-significant digit first.

    For each dividend digit the running remainder is shifted up one
    decimal place, the digit is brought down, and the divisor is
    subtracted as long as it fits. The number of subtractions (always
    0-9) is the next quotient digit.

    Returns:
        Tuple (quotient, remainder), both normalized

    Raises:
        DivisionByZeroError: If divisor is zero
    """
    if is_zero_magnitude(divisor):
        raise DivisionByZeroError("Division by zero")

    if compare_magnitudes(dividend, divisor) < 0:
        return [0], list(dividend)

    quotient_msd_first = []
    remainder = [0]

    for digit in reversed(dividend):
        remainder.insert(0, digit)
        normalize(remainder)

        count = 0
        while compare_magnitudes(remainder, divisor) >= 0:
            remainder = subtract_magnitudes(remainder, divisor)
            count += 1

        quotient_msd_first.append(count)

    quotient_msd_first.reverse()
    return normalize(quotient_msd_first), remainder


def _signed_add(
    neg_a: bool, mag_a: Sequence[int], neg_b: bool, mag_b: Sequence[int]
) -> Tuple[bool, List[int]]:
    """
    Add two signed values given as (sign, magnitude).

    Same signs add magnitudes. Different signs subtract the smaller
    magnitude from the larger one and take the sign of the larger
    operand. Subtraction is this function with the second sign flipped,
    so neither case recurses.
    """
    if neg_a == neg_b:
        return neg_a, add_magnitudes(mag_a, mag_b)

    if compare_magnitudes(mag_a, mag_b) >= 0:
        return neg_a, subtract_magnitudes(mag_a, mag_b)
    return neg_b, subtract_magnitudes(mag_b, mag_a)


# ============================================================================
# BigInteger
# ============================================================================

class BigInteger:
    """
    Immutable arbitrary-precision signed integer.

    Example:
        >>> a = BigInteger("12345678901234567890")
        >>> b = BigInteger("98765432109876543210")
        >>> str(a + b)
        '111111111011111111100'
        >>> str(BigInteger(17).mod_inverse(BigInteger(43)))
        '38'
    """

    __slots__ = ('_digits', '_negative')

    def __init__(self, value: Union['BigInteger', int, str] = 0):
        """
        Create a BigInteger.

        Args:
            value: Another BigInteger (copied), a Python int, or a decimal
                   literal (parsed leniently, see textio.parse_decimal)

        Raises:
            TypeError: For any other type
        """
        if isinstance(value, BigInteger):
            negative, digits = value._negative, list(value._digits)
        elif isinstance(value, str):
            negative, digits = parse_decimal(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            negative, digits = _int_to_parts(value)
        else:
            raise TypeError(f"Cannot build BigInteger from {type(value).__name__}")

        normalize(digits)
        self._digits = digits
        self._negative = negative and not is_zero_magnitude(digits)

    @classmethod
    def _from_parts(cls, negative: bool, digits: List[int]) -> 'BigInteger':
        """Wrap a freshly built digit list (ownership moves to the result)."""
        result = cls.__new__(cls)
        normalize(digits)
        result._digits = digits
        result._negative = negative and not is_zero_magnitude(digits)
        return result

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> 'BigInteger':
        """
        Parse a decimal literal.

        Args:
            text: Optional '-' followed by decimal digits
            strict: Raise InvalidLiteralError instead of dropping
                    non-digit characters

        Returns:
            Parsed BigInteger
        """
        negative, digits = parse_decimal(text, strict=strict)
        return cls._from_parts(negative, digits)

    @classmethod
    def from_int(cls, value: int) -> 'BigInteger':
        """Convert a Python int (any size)."""
        negative, digits = _int_to_parts(value)
        return cls._from_parts(negative, digits)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def is_negative(self) -> bool:
        """True for values below zero."""
        return self._negative

    @property
    def digits(self) -> Tuple[int, ...]:
        """Magnitude digits, least-significant first."""
        return tuple(self._digits)

    def is_zero(self) -> bool:
        return is_zero_magnitude(self._digits)

    def is_one(self) -> bool:
        return not self._negative and len(self._digits) == 1 and self._digits[0] == 1

    def is_odd(self) -> bool:
        """Parity from the least-significant decimal digit."""
        return self._digits[0] % 2 == 1

    def bit_length(self) -> int:
        """
        Number of bits of the magnitude, found by repeated halving.

        Zero reports a bit length of 1.
        """
        if self.is_zero():
            return 1

        magnitude = list(self._digits)
        bits = 0
        while not is_zero_magnitude(magnitude):
            magnitude, _ = divmod_magnitudes(magnitude, [2])
            bits += 1
        return bits

    def compare(self, other: 'BigInteger') -> int:
        """
        Three-way signed comparison.

        Negative values sort below non-negative ones; between two negative
        values the larger magnitude is the smaller value.

        Returns:
            -1, 0 or 1
        """
        if self._negative != other._negative:
            return -1 if self._negative else 1

        result = compare_magnitudes(self._digits, other._digits)
        return -result if self._negative else result

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def negate(self) -> 'BigInteger':
        return BigInteger._from_parts(not self._negative, list(self._digits))

    def absolute(self) -> 'BigInteger':
        return BigInteger._from_parts(False, list(self._digits))

    def add(self, other: 'BigInteger') -> 'BigInteger':
        negative, digits = _signed_add(self._negative, self._digits, other._negative, other._digits)
        return BigInteger._from_parts(negative, digits)

    def subtract(self, other: 'BigInteger') -> 'BigInteger':
        negative, digits = _signed_add(self._negative, self._digits, not other._negative, other._digits)
        return BigInteger._from_parts(negative, digits)

    def multiply(self, other: 'BigInteger') -> 'BigInteger':
        digits = multiply_magnitudes(self._digits, other._digits)
        return BigInteger._from_parts(self._negative != other._negative, digits)

    def divide(self, other: 'BigInteger') -> 'BigInteger':
        """
        Truncating division (the quotient is rounded toward zero).

        Raises:
            DivisionByZeroError: If other is zero
        """
        if other.is_zero():
            raise DivisionByZeroError("Division by zero", {'dividend': str(self)})

        quotient, _ = divmod_magnitudes(self._digits, other._digits)
        return BigInteger._from_parts(self._negative != other._negative, quotient)

    def modulo(self, other: 'BigInteger') -> 'BigInteger':
        """
        Remainder in the range [0, |other|).

        This is a - (a / b) * b, shifted up by |b| when that is negative.
        With truncating division the uncorrected value carries the sign of
        the dividend and the magnitude of the long-division remainder.

        Raises:
            DivisionByZeroError: If other is zero
        """
        if other.is_zero():
            raise DivisionByZeroError("Modulo by zero", {'dividend': str(self)})

        _, remainder = divmod_magnitudes(self._digits, other._digits)
        if self._negative and not is_zero_magnitude(remainder):
            remainder = subtract_magnitudes(other._digits, remainder)
        return BigInteger._from_parts(False, remainder)

    # ------------------------------------------------------------------
    # Modular arithmetic (see number_theory)
    # ------------------------------------------------------------------

    def add_mod(self, other: 'BigInteger', modulus: 'BigInteger') -> 'BigInteger':
        """(self + other) mod modulus."""
        from .number_theory import add_mod
        return add_mod(self, other, modulus)

    def mul_mod(self, other: 'BigInteger', modulus: 'BigInteger') -> 'BigInteger':
        """(self * other) mod modulus."""
        from .number_theory import mul_mod
        return mul_mod(self, other, modulus)

    def pow_mod(self, exponent: 'BigInteger', modulus: 'BigInteger') -> 'BigInteger':
        """(self ^ exponent) mod modulus by square-and-multiply."""
        from .number_theory import pow_mod
        return pow_mod(self, exponent, modulus)

    def mod_inverse(self, modulus: 'BigInteger') -> 'BigInteger':
        """x such that (self * x) mod modulus == 1."""
        from .number_theory import mod_inverse
        return mod_inverse(self, modulus)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __neg__(self) -> 'BigInteger':
        return self.negate()

    def __pos__(self) -> 'BigInteger':
        return self

    def __abs__(self) -> 'BigInteger':
        return self.absolute()

    def __add__(self, other: IntLike) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: IntLike) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other: IntLike) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: IntLike) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other: IntLike) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: IntLike) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other: IntLike) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: IntLike) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __mod__(self, other: IntLike) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.modulo(other)

    def __rmod__(self, other: IntLike) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.modulo(self)

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._negative == other._negative and self._digits == other._digits

    def __lt__(self, other: IntLike) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: IntLike) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: IntLike) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: IntLike) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # Must agree with int hashing since BigInteger(5) == 5
        return hash(int(self))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        value = 0
        for digit in reversed(self._digits):
            value = value * DIGIT_BASE + digit
        return -value if self._negative else value

    def __str__(self) -> str:
        return format_decimal(self._negative, self._digits)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"


# ============================================================================
# Helpers
# ============================================================================

def _int_to_parts(value: int) -> Tuple[bool, List[int]]:
    """Split a Python int into (is_negative, digits least-significant first)."""
    negative = value < 0
    value = -value if negative else value

    if value == 0:
        return False, [0]

    digits = []
    while value > 0:
        value, digit = divmod(value, DIGIT_BASE)
        digits.append(digit)
    return negative, digits


def _coerce(value: object) -> Optional[BigInteger]:
    """Accept BigInteger or int operands; None means unsupported."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger.from_int(value)
    return None


ZERO = BigInteger(0)
ONE = BigInteger(1)
TWO = BigInteger(2)

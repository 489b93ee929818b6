"""
BigNum Demonstration

Prints sample computations showing the library on very large integers:
1. Basic operations
2. Modular operations
3. Modular inverse
4. Large number representation (512-bit)
5. Modular exponentiation
"""

from typing import Callable

from ..core_math.bigint import BigInteger
from ..exceptions import BigNumError


# ============================================================================
# Constants
# ============================================================================

OPERAND_A = "12345678901234567890"
OPERAND_B = "98765432109876543210"
MODULUS = "1000000007"
INVERSE_VALUE = "123"
INVERSE_MODULUS = "1009"  # prime modulus
LARGE_512_BIT = (
    "13407807929942597099574024998205846127479365820592393377723561443721764030073"
    "546976801874298166903427690031858186486050853753882811946569946433649006084095"
)
POW_BASE = "12345"
POW_EXPONENT = "67890"
POW_MODULUS = "1000000009"


def print_header(title: str, output_fn: Callable[[str], None] = print) -> None:
    """Print a formatted section header"""
    output_fn("\n" + "=" * 70)
    output_fn(f"  {title}")
    output_fn("=" * 70)


def demonstrate(output_fn: Callable[[str], None] = print) -> None:
    """
    Run the demonstration.

    Args:
        output_fn: Writes one line (default: print)
    """
    print_header("BigNum Library Demonstration", output_fn)
    output_fn("Supporting very large integers for cryptographic operations")

    output_fn("\n1. Basic Operations:")
    a = BigInteger(OPERAND_A)
    b = BigInteger(OPERAND_B)
    output_fn(f"a = {a}")
    output_fn(f"b = {b}")
    output_fn(f"a + b = {a + b}")
    output_fn(f"b - a = {b - a}")
    output_fn(f"a * b = {a * b}")

    output_fn("\n2. Modular Operations:")
    m = BigInteger(MODULUS)
    output_fn(f"m = {m} (modulus)")
    output_fn(f"a mod m = {a % m}")
    output_fn(f"b mod m = {b % m}")
    output_fn(f"(a + b) mod m = {a.add_mod(b, m)}")
    output_fn(f"(a * b) mod m = {a.mul_mod(b, m)}")

    output_fn("\n3. Modular Inverse:")
    small_a = BigInteger(INVERSE_VALUE)
    small_m = BigInteger(INVERSE_MODULUS)
    try:
        inv = small_a.mod_inverse(small_m)
        output_fn(f"Inverse of {small_a} mod {small_m} = {inv}")
        output_fn(
            f"Verification: ({small_a} * {inv}) mod {small_m} = {small_a.mul_mod(inv, small_m)}"
        )
    except BigNumError as e:
        output_fn(f"Error: {e.message}")

    output_fn("\n4. Large Number Representation:")
    large_num = BigInteger(LARGE_512_BIT)
    output_fn(f"512-bit number: {large_num}")
    output_fn(f"Bit length: {large_num.bit_length()} bits")

    output_fn("\n5. Modular Exponentiation:")
    base = BigInteger(POW_BASE)
    exponent = BigInteger(POW_EXPONENT)
    modulus = BigInteger(POW_MODULUS)
    output_fn(f"{base}^{exponent} mod {modulus} = {base.pow_mod(exponent, modulus)}")

    output_fn("\n=== All demonstrations completed ===")

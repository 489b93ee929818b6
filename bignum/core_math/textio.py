"""
Decimal Text I/O

Parsing and rendering of decimal integer literals for BigInteger.

Digits are stored least-significant first, so parsing consumes the text
right-to-left and rendering walks the digits in reverse.

Two parsing policies:
- lenient (default): an optional leading '-' sets the sign, every ASCII
  digit after it is kept and every other character is dropped. Text with
  no digits parses as zero.
- strict: surrounding whitespace is stripped and the rest must match
  -?[0-9]+ exactly, otherwise InvalidLiteralError is raised.
"""

import re
from typing import List, Sequence, Tuple

from ..exceptions import InvalidLiteralError


# ============================================================================
# Constants
# ============================================================================

STRICT_LITERAL_PATTERN = re.compile(r'-?[0-9]+')
DIGIT_CHARS = '0123456789'


def parse_decimal(text: str, strict: bool = False) -> Tuple[bool, List[int]]:
    """
    Parse a decimal literal into (is_negative, digits).

    The returned digits are least-significant first and NOT normalized;
    callers normalize and clear the sign of a zero result.

    Args:
        text: Decimal literal
        strict: Reject anything that is not -?[0-9]+

    Returns:
        Tuple (is_negative, digits). digits is never empty.

    Raises:
        InvalidLiteralError: In strict mode, if text is malformed
    """
    if strict:
        text = text.strip()
        if not STRICT_LITERAL_PATTERN.fullmatch(text):
            raise InvalidLiteralError(
                f"Invalid integer literal: {text!r}",
                {'expected': '-?[0-9]+'},
            )

    if not text:
        return False, [0]

    start = 0
    is_negative = False
    if text[0] == '-':
        is_negative = True
        start = 1

    digits = [ord(ch) - 48 for ch in reversed(text[start:]) if ch in DIGIT_CHARS]

    if not digits:
        return False, [0]

    return is_negative, digits


def format_decimal(is_negative: bool, digits: Sequence[int]) -> str:
    """
    Render normalized digits as canonical decimal text.

    A '-' prefix is emitted only for a negative, non-zero value.
    """
    body = ''.join(DIGIT_CHARS[d] for d in reversed(digits))
    if is_negative and body != '0':
        return '-' + body
    return body

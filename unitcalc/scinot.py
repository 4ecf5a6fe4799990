"""
Scientific notation helpers for exact decimal display.

Decomposes a Decimal into the digits of its scientific form without any
detour through binary floating point.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def sci_notation(number: Decimal) -> tuple[str, str, int]:
    """
    Decompose a decimal into scientific notation parts.

    The number is normalized first (trailing zeros stripped), then split as
    ``number == int_digits.dec_digits × 10^exponent`` where int_digits holds
    exactly one digit.

    Args:
        number: A finite Decimal.

    Returns:
        tuple (int_digits, dec_digits, exponent):
            int_digits: the leading digit, prefixed with "-" for negative numbers.
            dec_digits: the remaining significant digits, no trailing zeros, may be "".
            exponent: power of ten of the leading digit.

    Raises:
        TypeError: If number is not a Decimal.
        ValueError: If number is NaN or infinite.

    Examples:
        sci_notation(Decimal("123.45")) == ("1", "2345", 2)
        sci_notation(Decimal("0.0050")) == ("5", "", -3)
        sci_notation(Decimal("-1200")) == ("-1", "2", 3)
        sci_notation(Decimal("0")) == ("0", "", 0)
    """
    if not isinstance(number, Decimal):
        raise TypeError(f"Decimal expected, got {fmt_type(number)}")
    if not number.is_finite():
        raise ValueError(f"finite Decimal expected, got {fmt_value(number)}")

    if number.is_zero():
        return "0", "", 0

    # Strip trailing zeros by hand, Decimal.normalize() would round to context precision
    sign, digits, exp = number.as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exp += 1

    int_digits = ("-" if sign else "") + str(digits[0])
    dec_digits = "".join(str(d) for d in digits[1:])
    return int_digits, dec_digits, exp + len(digits) - 1


def max_precision(digits: str, max_len: int) -> str:
    """
    Limit a digit string to at most max_len characters by truncation.

    Truncation never carries into the leading digit, so the exponent chosen by
    sci_notation() stays valid for the shortened mantissa.

    Raises:
        TypeError: If digits is not str or max_len is not int.
        ValueError: If max_len is negative.

    Examples:
        max_precision("234567", 3) == "234"
        max_precision("25", 3) == "25"
    """
    if not isinstance(digits, str):
        raise TypeError(f"digits must be str, got {fmt_type(digits)}")
    if isinstance(max_len, bool) or not isinstance(max_len, int):
        raise TypeError(f"max_len must be int, got {fmt_type(max_len)}")
    if max_len < 0:
        raise ValueError(f"max_len must be >= 0, got {max_len}")

    return digits[:max_len]

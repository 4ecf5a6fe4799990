"""
Numeric display formatting for calculator results.

Renders exact decimals in fixed-point form for everyday magnitudes and falls
back to an explicit power-of-ten multiplier for extreme ones.
"""

# ## Scope
#
# `fmt_number` is designed for **one-way formatting** (Decimal → human-readable string).
# It is NOT designed for parsing strings back to values: digits beyond the display
# precision are dropped.

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .scinot import max_precision, sci_notation
from .tools import fmt_type, fmt_value, to_sup


# @formatter:off

class DisplayConf:
    """
    Default configuration constants for number formatting.

    Attributes:
        FIXED_DIGITS: Maximum fractional digits in fixed-point form.
            Also bounds significant digits shown after the leading digit.
        SCI_DIGITS: Maximum mantissa digits after the point in multiplier form.
        FIXED_MIN_EXP: Smallest decimal exponent rendered fixed-point (0.001).
        FIXED_MAX_EXP: Exponents from this one up use multiplier form (10000).
    """
    FIXED_DIGITS = 4
    SCI_DIGITS = 3
    FIXED_MIN_EXP = -3
    FIXED_MAX_EXP = 4

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberFormat:
    """
    Formatting controls for fmt_number().

    Attributes:
        fixed_digits: Fractional digit budget for fixed-point output.
        sci_digits: Mantissa digits after the point in multiplier output.
        min_fixed_exp: Lowest exponent (inclusive) kept in fixed-point.
        max_fixed_exp: Highest exponent (exclusive) kept in fixed-point.
        mult: Multiplier style, one of:
            - "caret": "1.5x10^6" (ASCII-safe)
            - "unicode": "1.5×10⁶"

    Raises:
        TypeError: If a numeric field is not an int.
        ValueError: If mult is unsupported or the exponent window is inconsistent.
    """
    fixed_digits: int = DisplayConf.FIXED_DIGITS
    sci_digits: int = DisplayConf.SCI_DIGITS
    min_fixed_exp: int = DisplayConf.FIXED_MIN_EXP
    max_fixed_exp: int = DisplayConf.FIXED_MAX_EXP
    mult: Literal["caret", "unicode"] = "caret"

    def __post_init__(self):
        """Validate fields"""

        for name in ("fixed_digits", "sci_digits", "min_fixed_exp", "max_fixed_exp"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be int, got {fmt_type(value)}")

        if self.mult not in ("caret", "unicode"):
            raise ValueError(f"mult format expected one of 'caret', 'unicode' "
                             f"but found {fmt_value(self.mult)}")

        if self.fixed_digits < 0 or self.sci_digits < 0:
            raise ValueError(f"fixed_digits and sci_digits must be >= 0, "
                             f"got {self.fixed_digits} and {self.sci_digits}")

        if not self.min_fixed_exp <= 0 <= self.max_fixed_exp:
            raise ValueError(f"fixed-point window must contain exponent 0, "
                             f"got [{self.min_fixed_exp}, {self.max_fixed_exp})")

        # Precision in the whole-number range would go negative otherwise
        if self.fixed_digits < self.max_fixed_exp - 1:
            raise ValueError(f"fixed_digits must be >= max_fixed_exp - 1, "
                             f"got {self.fixed_digits} < {self.max_fixed_exp - 1}")

        # Small fractions would otherwise round to all zeros
        if self.fixed_digits < -self.min_fixed_exp:
            raise ValueError(f"fixed_digits must be >= -min_fixed_exp, "
                             f"got {self.fixed_digits} < {-self.min_fixed_exp}")

    @classmethod
    def ascii(cls) -> Self:
        """Default format with ASCII multiplier, e.g. 1.5x10^6"""
        return cls(mult="caret")

    @classmethod
    def unicode(cls) -> Self:
        """Default format with unicode multiplier, e.g. 1.5×10⁶"""
        return cls(mult="unicode")

    def mult_exp(self, power: int) -> str:
        """
        Power-of-ten multiplier suffix, empty for power 0.

        Examples:
            >>> NumberFormat().mult_exp(6)
            'x10^6'
            >>> NumberFormat.unicode().mult_exp(-5)
            '×10⁻⁵'
        """
        if power == 0:
            return ""
        if self.mult == "unicode":
            return f"×10{to_sup(power)}"
        return f"x10^{power}"


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_number(number: Decimal, fmt: NumberFormat | None = None) -> str:
    """
    Format an exact decimal for display.

    The number is decomposed into scientific notation parts (int, dec, exp) and
    rendered by the first matching rule:

    1. 0 <= exp < 4: fixed-point with min(len(dec), 4) - exp fractional digits,
       or none when the number is whole (len(dec) < exp).
    2. -3 <= exp < 0: fixed-point with min(len(dec) + |exp|, 4) fractional digits.
    3. No fractional digits: ``{int}x10^{exp}``.
    4. Otherwise: ``{int}.{dec[:3]}x10^{exp}``.

    Fixed-point output rounds half to even via the Decimal context, never through float.

    Args:
        number: A finite Decimal.
        fmt: Formatting controls, NumberFormat() defaults if None.

    Returns:
        str: The formatted number.

    Raises:
        TypeError: If number is not a Decimal or fmt is not a NumberFormat.
        ValueError: If number is NaN or infinite.

    Examples:
        fmt_number(Decimal("123.456")) == "123.46"
        fmt_number(Decimal("0.012")) == "0.012"
        fmt_number(Decimal("1000000")) == "1x10^6"
        fmt_number(Decimal("12345.678")) == "1.234x10^4"
        fmt_number(Decimal("0.00001234")) == "1.234x10^-5"
    """
    fmt = NumberFormat() if fmt is None else fmt
    if not isinstance(fmt, NumberFormat):
        raise TypeError(f"NumberFormat expected, got {fmt_type(fmt)}")

    int_digits, dec_digits, exp = sci_notation(number)

    # Decimal keeps the sign of zero, e.g. 0 * -3 == Decimal("-0")
    if number.is_zero():
        number = abs(number)

    if 0 <= exp < fmt.max_fixed_exp:
        if len(dec_digits) < exp:
            precision = 0
        else:
            precision = min(len(dec_digits), fmt.fixed_digits) - exp
        return f"{number:.{precision}f}"

    elif fmt.min_fixed_exp <= exp < 0:
        precision = min(len(dec_digits) + abs(exp), fmt.fixed_digits)
        return f"{number:.{precision}f}"

    mult = fmt.mult_exp(exp)
    # With sci_digits=0 the mantissa digits are dropped and the whole-number form is used
    dec_digits = max_precision(dec_digits, fmt.sci_digits)
    if not dec_digits:
        return f"{int_digits}{mult}"
    return f"{int_digits}.{dec_digits}{mult}"

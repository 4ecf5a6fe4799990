#
# unitcalc Tools & Utilities
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# @formatter:off
_SUPERSCRIPTS = str.maketrans({
    "0": "⁰", "1": "¹", "2": "²", "3": "³", "4": "⁴",
    "5": "⁵", "6": "⁶", "7": "⁷", "8": "⁸", "9": "⁹",
    "-": "⁻", "+": "⁺",
})
# @formatter:on

_MAX_REPR = 120


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """Format type information for exception messages.

    Accepts both type objects and instances.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(int)
        '<type: int>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)

    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)

    return f"<type: {_fmt_truncate(type_name)}>"


def fmt_value(x: Any) -> str:
    """
    Format a single value as a type–value pair for exception messages.

    Robust against broken __repr__ and very long representations.
    Inner ">" is escaped so it can't close the wrapper brackets.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value(Decimal("NaN"))
        "<Decimal: Decimal('NaN')>"
    """
    t = type(x).__name__

    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    # Escape before truncation so the ellipsis isn't escaped
    base_repr = base_repr.replace(">", "\\>")
    return f"<{t}: {_fmt_truncate(base_repr)}>"


def to_sup(n: int | str) -> str:
    """
    Convert an integer to unicode superscript digits.

    Examples:
        >>> to_sup(6)
        '⁶'
        >>> to_sup(-12)
        '⁻¹²'
    """
    if isinstance(n, bool) or not isinstance(n, (int, str)):
        raise TypeError(f"int | str expected, got {fmt_type(n)}")
    return str(n).translate(_SUPERSCRIPTS)


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(s: str, max_len: int = _MAX_REPR, ellipsis: str = "...") -> str:
    """
    Truncate s to at most max_len visible characters before appending the ellipsis.

    Quoted reprs keep their quotes and get the ellipsis outside the closing quote.
    """
    if len(s) <= max_len:
        return s

    if len(s) >= 2 and s[0] in ("'", '"') and s[-1] == s[0]:
        inner = s[1:1 + max(1, max_len - 4)]
        return f"{s[0]}{inner}{s[0]}{ellipsis}"

    return s[:max_len] + ellipsis

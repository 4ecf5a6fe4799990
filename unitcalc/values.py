"""
Runtime values of the calculator: a value kind paired with a physical unit.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Self, TypeAlias

# Local ----------------------------------------------------------------------------------------------------------------
from .display import NumberFormat, fmt_number
from .tools import fmt_type, fmt_value
from .units import DIMENSIONLESS, Name, Unit


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FunctionRef:
    """Reference to a named function."""
    name: Name

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"function name must be str, got {fmt_type(self.name)}")

    def __str__(self):
        return fmt_kind(self)


@dataclass(frozen=True)
class Number:
    """
    Exact decimal number.

    Accepts Decimal, int or a numeric str and always stores a Decimal. Floats are
    rejected: pass str(x) to state the intended decimal digits explicitly.

    Raises:
        TypeError: If value is not Decimal | int | str, or is a bool or float.
        ValueError: If value is not a valid finite decimal.
    """
    value: Decimal

    def __post_init__(self):
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (Decimal, int, str)):
            raise TypeError(f"Decimal | int | str expected, got {fmt_type(value)}")

        if not isinstance(value, Decimal):
            try:
                value = Decimal(value)
            except InvalidOperation as exc:
                raise ValueError(f"invalid decimal literal {fmt_value(self.value)}") from exc

        if not value.is_finite():
            raise ValueError(f"finite number expected, got {fmt_value(self.value)}")

        object.__setattr__(self, "value", value)

    def __str__(self):
        return fmt_kind(self)


@dataclass(frozen=True)
class Bool:
    """Boolean truth value."""
    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError(f"bool expected, got {fmt_type(self.value)}")

    def __str__(self):
        return fmt_kind(self)


ValueKind: TypeAlias = FunctionRef | Number | Bool

_VALUE_KINDS = (FunctionRef, Number, Bool)


@dataclass(frozen=True)
class Value:
    """
    Fully evaluated runtime result: a value kind tagged with a unit.

    Immutable, equality and hashing are componentwise. The unit algebra lives in
    Unit; the evaluator combines units there and wraps results here.

    Examples:
        >>> v = Value.number("9.81", unit=Unit({"m": 1, "s": -2}))
        >>> str(v)
        '9.81 m s^-2'
        >>> str(Value.boolean(True))
        'true'
    """
    kind: ValueKind
    unit: Unit = DIMENSIONLESS

    def __post_init__(self):
        if not isinstance(self.kind, _VALUE_KINDS):
            raise TypeError(f"FunctionRef | Number | Bool expected, got {fmt_type(self.kind)}")
        if not isinstance(self.unit, Unit):
            raise TypeError(f"Unit expected, got {fmt_type(self.unit)}")

    @classmethod
    def number(cls, value: Decimal | int | str, unit: Unit = DIMENSIONLESS) -> Self:
        return cls(Number(value), unit)

    @classmethod
    def boolean(cls, value: bool) -> Self:
        return cls(Bool(value))

    @classmethod
    def function(cls, name: Name) -> Self:
        return cls(FunctionRef(name))

    def format(self, fmt: NumberFormat | None = None) -> str:
        """Value followed by its unit, the unit omitted when dimensionless."""
        kind_str = fmt_kind(self.kind, fmt)
        if self.unit.is_dimensionless():
            return kind_str
        return f"{kind_str} {self.unit}"

    def __str__(self):
        return self.format()


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_kind(kind: ValueKind, fmt: NumberFormat | None = None) -> str:
    """
    Format a value kind for display.

    Bool renders as "true" or "false", FunctionRef as "<function name>",
    Number through fmt_number().

    Raises:
        TypeError: If kind is not a FunctionRef, Number or Bool.
    """
    if isinstance(kind, FunctionRef):
        return f"<function {kind.name}>"
    elif isinstance(kind, Number):
        return fmt_number(kind.value, fmt)
    elif isinstance(kind, Bool):
        return "true" if kind.value else "false"
    else:
        raise TypeError(f"FunctionRef | Number | Bool expected, got {fmt_type(kind)}")

#
# unitcalc Units of Measurement Algebra
#

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Self, TypeAlias

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import SortedMap
from .tools import fmt_type, fmt_value

Name: TypeAlias = str


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, init=False)
class Unit:
    """
    Physical unit as a product of named base dimensions raised to integer exponents.

    Exponents are kept in canonical form: a dimension with exponent 0 is never
    stored, so equality means dimensional identity and str() never shows ``name^0``.
    Dimensions iterate in ascending name order.

    All operations return new instances, a Unit is never mutated.

    Examples:
        >>> m, s = Unit.new_named("m"), Unit.new_named("s")
        >>> str(m * m / s ** 2)
        'm^2 s^-2'
        >>> (m / m) == Unit.new()
        True
        >>> m.singleton()
        'm'
    """

    parts: SortedMap[Name, int] = field(default_factory=SortedMap)

    def __init__(self, parts: Mapping[Name, int] | Iterable[tuple[Name, int]] | None = None):
        totals: dict[Name, int] = {}
        iterable = parts.items() if isinstance(parts, Mapping) else (parts or ())
        for name, exp in iterable:
            if not isinstance(name, str):
                raise TypeError(f"dimension name must be str, got {fmt_type(name)}")
            if isinstance(exp, bool) or not isinstance(exp, int):
                raise TypeError(f"exponent of {name!r} must be int, got {fmt_type(exp)}")
            totals[name] = totals.get(name, 0) + exp
        object.__setattr__(self, "parts", SortedMap((k, v) for k, v in totals.items() if v != 0))

    @classmethod
    def new(cls) -> Self:
        """The dimensionless unit."""
        return cls()

    @classmethod
    def new_named(cls, name: Name) -> Self:
        """Unit of a single base dimension at power 1."""
        return cls({name: 1})

    def singleton(self) -> Name | None:
        """
        The sole dimension name if this unit is exactly one dimension at power 1.

        Returns None otherwise, including for the dimensionless unit.

        Examples:
            >>> Unit.new_named("m").singleton()
            'm'
            >>> Unit({"m": 2}).singleton() is None
            True
        """
        if len(self.parts) != 1:
            return None
        name, exp = self.parts.first()
        return name if exp == 1 else None

    def multiply(self, other: "Unit") -> "Unit":
        """Sum exponents per dimension, dropping dimensions that cancel out."""
        _check_unit(other)
        return Unit(_combine(self.parts, other.parts, sign=1))

    def divide(self, other: "Unit") -> "Unit":
        """Subtract exponents of other per dimension, dropping dimensions that cancel out."""
        _check_unit(other)
        return Unit(_combine(self.parts, other.parts, sign=-1))

    def pow(self, n: int) -> "Unit":
        """
        Raise to integer power n.

        Exponents are scaled by |n| and then negated for negative n.
        pow(0) is the dimensionless unit for every input.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"power must be int, got {fmt_type(n)}")

        scale = abs(n)
        scaled = ((name, exp * scale) for name, exp in self.parts.items())
        return Unit((name, -exp if n < 0 else exp) for name, exp in scaled if exp != 0)

    def exponent(self, name: Name) -> int:
        """Exponent of dimension name, 0 when absent."""
        return self.parts.get(name, 0)

    def is_dimensionless(self) -> bool:
        return not self.parts

    # ----- Operators -----

    def __mul__(self, other: "Unit") -> "Unit":
        if not isinstance(other, Unit):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: "Unit") -> "Unit":
        if not isinstance(other, Unit):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, n: int) -> "Unit":
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return self.pow(n)

    def __iter__(self) -> Iterator[tuple[Name, int]]:
        return iter(self.parts.items())

    def __len__(self) -> int:
        return len(self.parts)

    def __bool__(self) -> bool:
        return bool(self.parts)

    def __str__(self) -> str:
        return " ".join(name if exp == 1 else f"{name}^{exp}" for name, exp in self.parts.items())

    def __repr__(self) -> str:
        return f"Unit({dict(self.parts.items())!r})"


DIMENSIONLESS = Unit()


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_unit(other) -> None:
    if not isinstance(other, Unit):
        raise TypeError(f"Unit expected, got {fmt_value(other)}")


def _combine(left: Mapping[Name, int], right: Mapping[Name, int], sign: int) -> dict[Name, int]:
    parts = dict(left.items())
    for name, exp in right.items():
        total = parts.get(name, 0) + sign * exp
        if total == 0:
            parts.pop(name, None)
        else:
            parts[name] = total
    return parts

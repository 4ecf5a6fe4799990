"""
unitcalc Collections
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Mapping, Iterable, Iterator, KeysView, ValuesView, ItemsView
from typing import Any, Generic, TypeVar

# Classes --------------------------------------------------------------------------------------------------------------

K = TypeVar("K")
V = TypeVar("V")


class SortedMap(Mapping[K, V], Generic[K, V]):
    """
    An immutable mapping that iterates its keys in ascending order.

    - Implements the stdlib Mapping protocol: __getitem__, __iter__, __len__,
      keys(), values(), items(), get(). Membership applies to KEYS, like dict.
    - Keys must be hashable and mutually comparable with <. Repeated keys keep
      the last value, like dict.
    - Hashable, so it can back frozen dataclasses and serve as a dict key itself.
    - Equality against any Mapping compares contents; against another SortedMap
      the order is the same by construction.

    Examples:
        >>> sm = SortedMap({"s": -2, "m": 1})
        >>> list(sm)
        ['m', 's']
        >>> sm["s"]
        -2
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, initial: Mapping[K, V] | Iterable[tuple[K, V]] | None = None) -> None:
        iterable = initial.items() if isinstance(initial, Mapping) else (initial or ())
        data: dict[K, V] = dict(iterable)
        try:
            keys = sorted(data)
        except TypeError as exc:
            raise TypeError("SortedMap keys must be mutually comparable") from exc
        self._data: dict[K, V] = {k: data[k] for k in keys}
        self._hash: int | None = None

    # ----- Mapping required methods -----

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    # ----- Mapping helpers (typed views) -----

    def keys(self) -> KeysView[K]:
        return self._data.keys()

    def values(self) -> ValuesView[V]:
        return self._data.values()

    def items(self) -> ItemsView[K, V]:
        return self._data.items()

    def get(self, key: K, default: V | None = None) -> V | None:
        return self._data.get(key, default)

    # ----- Ordered access -----

    def first(self) -> tuple[K, V]:
        """Smallest key and its value. Raises KeyError if empty."""
        for item in self._data.items():
            return item
        raise KeyError("first(): SortedMap is empty")

    # ----- Equality, hashing and representation -----

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SortedMap):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(tuple(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"SortedMap({self._data!r})"

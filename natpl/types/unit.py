"""Unit algebra for natpl.

A Unit is an exponent vector over named base units: ``meter^1 second^-2`` is
stored as ``{meter: 1, second: -2}``. Zero exponents are never stored, so two
Units compare equal exactly when their non-zero exponents agree and the
dimensionless unit is the empty mapping.

Units are immutable; every operation returns a new Unit.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Iterable, Mapping

from natpl.types.name import Name


class Unit:
    """Immutable mapping from base-unit Name to a non-zero integer exponent."""

    __slots__ = ("_items",)

    def __init__(self, exponents: Mapping[Name, int] | Iterable[tuple[Name, int]] = ()):
        pairs = exponents.items() if isinstance(exponents, Mapping) else exponents
        merged: dict[Name, int] = {}
        for name, exp in pairs:
            merged[name] = merged.get(name, 0) + int(exp)
        # sorted tuple so equal units hash equally regardless of build order
        self._items: tuple[tuple[Name, int], ...] = tuple(
            sorted((n, e) for n, e in merged.items() if e != 0)
        )

    # --- Constructors ---
    @classmethod
    def new(cls) -> Unit:
        """The dimensionless unit."""
        return cls()

    @classmethod
    def new_named(cls, name: Name) -> Unit:
        """A base unit: exponent 1 for ``name``."""
        return cls(((name, 1),))

    # --- Read-only view ---
    @property
    def exponents(self) -> Mapping[Name, int]:
        return MappingProxyType(dict(self._items))

    @property
    def is_dimensionless(self) -> bool:
        return not self._items

    def exponent(self, name: Name) -> int:
        return dict(self._items).get(name, 0)

    # --- Algebra ---
    def multiply(self, other: Unit) -> Unit:
        return Unit(self._items + other._items)

    def divide(self, other: Unit) -> Unit:
        return Unit(self._items + tuple((n, -e) for n, e in other._items))

    def pow(self, n: int) -> Unit:
        return Unit(tuple((name, e * n) for name, e in self._items))

    __mul__ = multiply
    __truediv__ = divide
    __pow__ = pow

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unit) and self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "1"
        with StringIO() as buffer:
            first = True
            for name, exp in self._items:
                if not first:
                    buffer.write(" ")
                buffer.write(str(name))
                if exp != 1:
                    buffer.write(f"^{exp}")
                first = False
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Unit({str(self)!r})"

"""Runtime values: a Number or a FunctionRef, each paired with a Unit."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from natpl import Magnitude
from natpl.types.name import Name
from natpl.types.unit import Unit


@dataclass(frozen=True)
class Number:
    value: Magnitude

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FunctionRef:
    name: Name

    def __str__(self) -> str:
        return f"<function {self.name}>"


ValueKind = Union[Number, FunctionRef]


@dataclass(frozen=True)
class Value:
    """An evaluated magnitude (or function reference) and its dimension.

    Frozen, so handing a stored binding to a caller never exposes it to mutation.
    """

    kind: ValueKind
    unit: Unit = field(default_factory=Unit)

    @classmethod
    def number(cls, value: Decimal | int, unit: Unit | None = None) -> Value:
        return cls(Number(Decimal(value)), unit if unit is not None else Unit())

    @classmethod
    def function_ref(cls, name: Name) -> Value:
        return cls(FunctionRef(name), Unit())

    @property
    def is_number(self) -> bool:
        return isinstance(self.kind, Number)

    def __str__(self) -> str:
        if self.unit.is_dimensionless:
            return str(self.kind)
        return f"{self.kind} {self.unit}"

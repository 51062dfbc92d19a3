"""Session state for natpl.

EvaluationState holds three separate write-once namespaces: declared units,
bound variables and declared functions. Each is guarded by its own
insert-if-absent check; a name may live in more than one namespace, and
`lookup` resolves it with a fixed precedence (variable, then unit, then
function).
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional, Sequence

from natpl.errors import UnitRedeclared, VariableRedefined, FunctionRedefined
from natpl.syntax import Expression
from natpl.types.name import Name
from natpl.types.unit import Unit
from natpl.types.value import Value

logger = logging.getLogger(__name__)


class EvaluationState:
    """Append-only bindings for one evaluation session."""

    __slots__ = ("units", "variables", "functions")

    def __init__(self):
        self.units: set[Name] = set()
        self.variables: dict[Name, Value] = {}
        self.functions: dict[Name, tuple[tuple[Name, ...], Expression]] = {}

    def declare_unit(self, name: Name) -> None:
        """Add `name` to the declared units.

        Raises UnitRedeclared if it is already a unit.
        """
        if name in self.units:
            raise UnitRedeclared(name)
        self.units.add(name)
        logger.debug("declared unit %s", name)

    def declare_variable(self, name: Name, value: Value) -> Value:
        """Bind `name` to `value` and return the stored value.

        Only the variable namespace is checked, so a variable may share its
        name with a unit or a function. Raises VariableRedefined if `name` is
        already bound.
        """
        if name in self.variables:
            raise VariableRedefined(name)
        self.variables[name] = value
        logger.debug("declared variable %s = %s", name, value)
        return value

    def declare_function(self, name: Name, params: Sequence[Name], body: Expression) -> None:
        """Store the parameter list and the unevaluated body of `name`.

        Raises FunctionRedefined if the function already exists.
        """
        if name in self.functions:
            raise FunctionRedefined(name)
        self.functions[name] = (tuple(params), body)
        logger.debug("declared function %s(%s)", name, ", ".join(map(str, params)))

    def is_defined(self, name: Name) -> bool:
        return name in self.units or name in self.variables or name in self.functions

    def lookup(self, name: Name) -> Optional[Value]:
        """Resolve `name` to a Value.

        Order of resolution:
        1) Bound variable
        2) Declared unit, as 1 with the unit's own dimension
        3) Declared function, as a dimensionless function reference
        Returns None if the name is unknown.
        """
        value = self.variables.get(name)
        if value is not None:
            return value
        if name in self.units:
            return Value.number(1, Unit.new_named(name))
        if name in self.functions:
            return Value.function_ref(name)
        return None

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<EvaluationState units={")
            buffer.write(", ".join(sorted(str(u) for u in self.units)))
            buffer.write("} variables={")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.variables.items()))
            buffer.write("} functions={")
            buffer.write(", ".join(str(f) for f in self.functions))
            buffer.write("}>")
            return buffer.getvalue()

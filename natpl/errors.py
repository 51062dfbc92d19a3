from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from natpl.syntax import FC, InfixOp, PrefixOp, SiPrefix
    from natpl.types.name import Name
    from natpl.types.unit import Unit
    from natpl.types.value import Value, ValueKind


class NatplError(Exception):
    """ Base class for all natpl errors"""
    pass


# -----------------------------------------------------
# Statement level
# -----------------------------------------------------

class ItemError(NatplError):
    """ Raised when a statement cannot be applied to the evaluation state"""
    pass

class UnitRedeclared(ItemError):
    """ Raised when a unit name is declared a second time"""
    def __init__(self, name: Name):
        super().__init__(f"Unit redeclared: {name}")
        self.name = name

class VariableRedefined(ItemError):
    """ Raised when a variable name is bound a second time"""
    def __init__(self, name: Name):
        super().__init__(f"Variable redefined: {name}")
        self.name = name

class FunctionRedefined(ItemError):
    """ Raised when a function name is declared a second time"""
    def __init__(self, name: Name):
        super().__init__(f"Function redefined: {name}")
        self.name = name

class ItemEvalError(ItemError):
    """ Raised when the right-hand side of a declaration fails to evaluate"""
    def __init__(self, cause: EvalError):
        super().__init__(f"Eval error: {cause}")
        self.cause = cause

    @property
    def fc(self) -> FC | None:
        return self.cause.fc


# -----------------------------------------------------
# Expression level
# -----------------------------------------------------

class EvalError(NatplError):
    """ Base class for expression evaluation errors; `fc` locates the failing node"""
    def __init__(self, fc: FC | None, message: str):
        super().__init__(message)
        self.fc = fc

class UndefinedName(EvalError):
    """ Raised when a name is neither a variable, a unit nor a function"""
    def __init__(self, fc: FC | None, name: Name):
        super().__init__(fc, f"Undefined name: {name}")
        self.name = name

class InvalidPrefixOperator(EvalError):
    """ Raised when a prefix operator is applied to a non-numeric value"""
    def __init__(self, fc: FC | None, op: PrefixOp, value: Value):
        super().__init__(fc, f"Invalid prefix operator {op.value} on value {value}")
        self.op = op
        self.value = value

class InvalidInfixOperator(EvalError):
    """ Raised when an infix operator is applied to operand kinds it does not support"""
    def __init__(self, fc: FC | None, op: InfixOp, lhs: Value, rhs: Value):
        super().__init__(fc, f"Invalid infix operator {op.value} on {lhs} and {rhs}")
        self.op = op
        self.lhs = lhs
        self.rhs = rhs

class InvalidSiPrefix(EvalError):
    """ Raised when an SI prefix is applied to a non-numeric value"""
    def __init__(self, fc: FC | None, prefix: SiPrefix, value: Value):
        super().__init__(fc, f"Invalid SI-prefix {prefix.name.lower()} on value {value}")
        self.prefix = prefix
        self.value = value

class DivisionByZero(EvalError):
    """ Raised when a division, remainder or negative power has a zero divisor"""
    def __init__(self, fc: FC | None, op: InfixOp):
        super().__init__(fc, f"Division by zero in operation {op.value}")
        self.op = op

class ArithmeticOutOfRange(EvalError):
    """ Raised when a result cannot be represented in the configured decimal context"""
    def __init__(self, fc: FC | None, operation: str):
        super().__init__(fc, f"Result of operation {operation} is out of range")
        self.operation = operation


# -----------------------------------------------------
# Unit algebra
# -----------------------------------------------------

class UnitError(EvalError):
    """ Base class for dimensional errors"""
    pass

class IncompatibleUnits(UnitError):
    """ Raised when operands carry units the operator cannot combine"""
    def __init__(self, fc: FC | None, op: InfixOp, lhs: Unit, rhs: Unit):
        super().__init__(fc, f"Incompatible units ({lhs}) and ({rhs}) for operation {op.value}")
        self.op = op
        self.lhs = lhs
        self.rhs = rhs

class InvalidPowerValue(UnitError):
    """ Raised when an exponent is not an integer-valued number"""
    def __init__(self, fc: FC | None, unit: Unit, exponent: ValueKind):
        super().__init__(fc, f"Invalid power on unit ({unit}): {exponent}")
        self.unit = unit
        self.exponent = exponent


# -----------------------------------------------------
# Not yet supported
# -----------------------------------------------------

class Feature(Enum):
    FUNCTION_CALL = "function call"
    EQUALITY = "equality comparison"
    INEQUALITY = "inequality comparison"
    GREATER_THAN = "greater-than comparison"

class Unsupported(NatplError):
    """ Raised for language features that parse but have no semantics yet"""
    def __init__(self, fc: FC | None, feature: Feature):
        super().__init__(f"Not yet supported: {feature.value}")
        self.fc = fc
        self.feature = feature

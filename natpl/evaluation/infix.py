"""Infix operators: the unit rule of each operator and its numeric effect.

`infix_unit` validates dimensions and computes the result unit; it always
runs before the operand kinds are checked, so a dimensional mistake is
reported as such even when the operands could not be combined anyway.
"""

from __future__ import annotations

from decimal import Decimal

from natpl.errors import (
    DivisionByZero,
    IncompatibleUnits,
    InvalidInfixOperator,
    InvalidPowerValue,
)
from natpl.syntax import FC, InfixOp
from natpl.types.unit import Unit
from natpl.types.value import Number, Value


def integer_exponent(n: Decimal) -> int | None:
    """Return `n` as an int when it has no fractional part, else None."""
    if not n.is_finite() or n != n.to_integral_value():
        return None
    return int(n)


def infix_unit(fc: FC, op: InfixOp, lhs: Value, rhs: Value) -> Unit:
    match op:
        case InfixOp.ADD | InfixOp.SUB | InfixOp.MOD:
            if lhs.unit != rhs.unit:
                raise IncompatibleUnits(fc, op, lhs.unit, rhs.unit)
            return lhs.unit
        case InfixOp.MUL:
            return lhs.unit.multiply(rhs.unit)
        case InfixOp.DIV:
            return lhs.unit.divide(rhs.unit)
        case InfixOp.POW:
            if not rhs.unit.is_dimensionless:
                raise IncompatibleUnits(fc, op, lhs.unit, rhs.unit)
            match rhs.kind:
                case Number(value=n) if integer_exponent(n) is not None:
                    return lhs.unit.pow(integer_exponent(n))
            raise InvalidPowerValue(fc, lhs.unit, rhs.kind)
    raise ValueError(f"Operator {op.value} has no unit rule")


def power(fc: FC, base: Decimal, exponent: int) -> Decimal:
    """Exact power by repeated squaring, inverted for negative exponents.

    Takes O(log |exponent|) multiplications, so bases of magnitude 0 or 1,
    which never overflow, still finish quickly for huge exponents.
    """
    result = Decimal(1)
    square = base
    n = abs(exponent)
    while n:
        if n & 1:
            result = result * square
        n >>= 1
        if n:
            square = square * square
    if exponent < 0:
        if result == 0:
            raise DivisionByZero(fc, InfixOp.POW)
        result = Decimal(1) / result
    return result


def apply_infix(fc: FC, op: InfixOp, lhs: Value, rhs: Value) -> Value:
    """Combine two evaluated operands. Only (Number, Number) pairs are valid."""
    unit = infix_unit(fc, op, lhs, rhs)

    match lhs.kind, rhs.kind:
        case Number(value=a), Number(value=b):
            pass
        case _:
            raise InvalidInfixOperator(fc, op, lhs, rhs)

    match op:
        case InfixOp.ADD:
            result = a + b
        case InfixOp.SUB:
            result = a - b
        case InfixOp.MUL:
            result = a * b
        case InfixOp.DIV | InfixOp.MOD:
            if b == 0:
                raise DivisionByZero(fc, op)
            result = a / b if op is InfixOp.DIV else a % b
        case InfixOp.POW:
            result = power(fc, a, integer_exponent(b))
        case _:
            raise InvalidInfixOperator(fc, op, lhs, rhs)
    return Value(Number(result), unit)

"""Expression evaluator for natpl.

Reduces an expression tree to a Value against an EvaluationState, which it
only ever reads. Magnitudes are Decimals computed under a single decimal
context per top-level call, so results are exact wherever the precision
allows and never pass through binary floats.
"""

from __future__ import annotations

import decimal
from decimal import Decimal

from natpl.config import decimal_context
from natpl.errors import (
    ArithmeticOutOfRange,
    Feature,
    InvalidPrefixOperator,
    UndefinedName,
    Unsupported,
)
from natpl.evaluation.infix import apply_infix
from natpl.evaluation.prefix import apply_prefix
from natpl.syntax import (
    Call,
    DecimalLit,
    Expression,
    InfixOp,
    InfixOperation,
    IntegerLit,
    MaybeUnitPrefix,
    Parenthesised,
    PrefixOp,
    PrefixOperation,
    UnitOf,
    Variable,
)
from natpl.types.state import EvaluationState
from natpl.types.unit import Unit
from natpl.types.value import Number, Value

# Comparisons parse but have no semantics yet
_COMPARISONS = {
    InfixOp.EQ: Feature.EQUALITY,
    InfixOp.NEQ: Feature.INEQUALITY,
    InfixOp.GT: Feature.GREATER_THAN,
}

# Trapped by the evaluation context when a result exceeds its precision or exponent range
_OUT_OF_RANGE = (decimal.Overflow, decimal.InvalidOperation)


def evaluate(
    expr: Expression, state: EvaluationState, context: decimal.Context | None = None
) -> Value:
    """Evaluate `expr` under `context` (by default the configured decimal context)."""
    with decimal.localcontext(context or decimal_context()):
        return evaluate0(expr, state)


def evaluate0(expr: Expression, state: EvaluationState) -> Value:
    """Single recursive step; assumes the decimal context is already in place."""
    match expr:
        case IntegerLit(val=val) | DecimalLit(val=val):
            return Value(Number(Decimal(val)), Unit())

        case MaybeUnitPrefix(fc=fc, name=name, full_name=full_name, prefix=prefix):
            # An exact declared name always beats the prefixed reading
            value = state.lookup(full_name)
            if value is not None:
                return value
            value = state.lookup(name)
            if value is None:
                raise UndefinedName(fc, full_name)
            try:
                return apply_prefix(fc, prefix, value)
            except _OUT_OF_RANGE as err:
                raise ArithmeticOutOfRange(fc, prefix.name.lower()) from err

        case Variable(ident=ident):
            value = state.lookup(ident.name)
            if value is None:
                raise UndefinedName(ident.fc, ident.name)
            return value

        case Call(fc=fc):
            raise Unsupported(fc, Feature.FUNCTION_CALL)

        case PrefixOperation(fc=fc, op=op, expr=inner):
            value = evaluate0(inner, state)
            match value.kind:
                case Number(value=x):
                    if op is PrefixOp.NEG:
                        return Value(Number(-x), value.unit)
                    return value
            raise InvalidPrefixOperator(fc, op, value)

        case InfixOperation(fc=fc, op=op, lhs=lhs, rhs=rhs):
            # No short-circuit: both sides are evaluated before anything is checked
            left = evaluate0(lhs, state)
            right = evaluate0(rhs, state)
            if op in _COMPARISONS:
                raise Unsupported(fc, _COMPARISONS[op])
            try:
                return apply_infix(fc, op, left, right)
            except _OUT_OF_RANGE as err:
                raise ArithmeticOutOfRange(fc, op.value) from err

        case UnitOf(expr=inner):
            value = evaluate0(inner, state)
            return Value(Number(Decimal(1)), value.unit)

        case Parenthesised(expr=inner):
            return evaluate0(inner, state)

    raise TypeError(f"Cannot evaluate {expr!r} as an expression")

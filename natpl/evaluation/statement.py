"""Applies classified statements to the evaluation state."""

from __future__ import annotations

import decimal
from dataclasses import dataclass
from typing import Union

from natpl.errors import EvalError, ItemEvalError
from natpl.evaluation.evaluator import evaluate
from natpl.syntax import (
    Expression,
    FunctionDeclaration,
    Item,
    PrintedExpression,
    SilentExpression,
    UnitDeclaration,
    VariableDeclaration,
)
from natpl.types.state import EvaluationState
from natpl.types.value import Value


class EmptyResult:
    """Nothing to report (declarations of units and functions, blank lines)."""
    def __repr__(self):
        return "EMPTY"


EMPTY = EmptyResult()


@dataclass(frozen=True)
class ValueResult:
    """A value that was computed but is not meant for display."""
    value: Value


@dataclass(frozen=True)
class PrintValue:
    """A value to display; `expr` is the expression as written, for formatting."""
    expr: Expression
    value: Value


EvalResult = Union[EmptyResult, ValueResult, PrintValue]


def _evaluate(expr: Expression, state: EvaluationState, context: decimal.Context | None) -> Value:
    try:
        return evaluate(expr, state, context)
    except EvalError as err:
        raise ItemEvalError(err) from err


def eval_item(
    item: Item, state: EvaluationState, context: decimal.Context | None = None
) -> EvalResult:
    """
    Apply `item` to `state`.
    Expression errors surface as ItemEvalError with the original error as `cause`;
    Unsupported passes through unwrapped.
    A statement that raises leaves `state` untouched: declarations write only
    after their right-hand side has evaluated.
    """
    match item:
        case UnitDeclaration(name=ident):
            state.declare_unit(ident.name)
            return EMPTY

        case VariableDeclaration(name=ident, rhs=rhs):
            value = _evaluate(rhs, state, context)
            return ValueResult(state.declare_variable(ident.name, value))

        case FunctionDeclaration(name=ident, arg_names=arg_names, rhs=rhs):
            # the body is kept unevaluated until call time
            state.declare_function(ident.name, [a.name for a in arg_names], rhs)
            return EMPTY

        case PrintedExpression(expr=expr):
            return PrintValue(expr, _evaluate(expr, state, context))

        case SilentExpression(expr=expr):
            return ValueResult(_evaluate(expr, state, context))

    raise TypeError(f"Cannot evaluate {item!r} as a statement")

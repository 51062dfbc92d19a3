import pytest

from natpl import errors
from natpl.evaluation.classifier import classify
from natpl.syntax import (
    Call,
    EmptyLine,
    FunctionDeclaration,
    InfixOp,
    InfixOperation,
    PrintedExpression,
    VariableDeclaration,
)
from natpl.types.name import Name
from natpl.types.state import EvaluationState
from natpl.types.value import Value
from tests.builders import assign, num, printed, silent, unit_decl, var


def test_empty_line_has_no_statement(state):
    assert classify(EmptyLine(), state) is None


@pytest.mark.parametrize(
    "line",
    [
        unit_decl("gram"),
        printed(num(1)),
        silent(num(1)),
    ]
)
def test_unambiguous_lines_pass_through(state, line):
    assert classify(line, state) is line


def test_new_name_becomes_variable_declaration(state):
    item = classify(assign("x", num(5)), state)
    assert item == VariableDeclaration(item.fc, item.name, num(5))
    assert item.name.name == Name("x")


def test_new_name_with_parameters_becomes_function_declaration(state):
    item = classify(assign("f", var("a"), args=["a"]), state)
    assert isinstance(item, FunctionDeclaration)
    assert [a.name for a in item.arg_names] == [Name("a")]
    assert item.rhs == var("a")


@pytest.mark.parametrize("namespace", ["unit", "variable", "function"])
def test_known_name_becomes_equality(namespace):
    s = EvaluationState()
    x = Name("x")
    if namespace == "unit":
        s.declare_unit(x)
    elif namespace == "variable":
        s.declare_variable(x, Value.number(5))
    else:
        s.declare_function(x, [], num(5))

    item = classify(assign("x", num(5)), s)
    assert isinstance(item, PrintedExpression)
    assert item.expr == InfixOperation(item.fc, InfixOp.EQ, var("x"), num(5))


def test_known_function_with_parameters_compares_a_call():
    s = EvaluationState()
    s.declare_function(Name("f"), [Name("a")], var("a"))
    item = classify(assign("f", num(1), args=["a"]), s)
    lhs = item.expr.lhs
    assert isinstance(lhs, Call)
    assert lhs.base == var("f")
    assert lhs.args == (var("a"),)


def test_classification_follows_state_between_lines(runtime):
    line = assign("x", num(5))

    assert isinstance(runtime.line_item_to_item(line), VariableDeclaration)
    runtime.eval_line_item(line)

    item = runtime.line_item_to_item(line)
    assert isinstance(item, PrintedExpression)
    assert item.expr.op is InfixOp.EQ

    with pytest.raises(errors.Unsupported) as exc:
        runtime.eval_line_item(line)
    assert exc.value.feature is errors.Feature.EQUALITY
    assert runtime.lookup("x") == Value.number(5)

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from natpl import errors
from natpl.syntax import FC, InfixOp, PrefixOp
from natpl.types.name import Name
from natpl.types.unit import Unit
from natpl.types.value import FunctionRef, Number, Value

METER = Unit.new_named(Name("meter"))


def test_values_are_immutable():
    value = Value.number(3, METER)
    with pytest.raises(FrozenInstanceError):
        value.unit = Unit()
    with pytest.raises(FrozenInstanceError):
        value.kind.value = Decimal(4)


def test_constructors():
    assert Value.number(2) == Value(Number(Decimal(2)), Unit())
    assert Value.function_ref(Name("f")) == Value(FunctionRef(Name("f")), Unit())
    assert Value.number(1).is_number
    assert not Value.function_ref(Name("f")).is_number


@pytest.mark.parametrize(
    "value,expected",
    [
        (Value.number(5), "5"),
        (Value.number(Decimal("2.50"), METER), "2.50 meter"),
        (Value.number(-1, METER.pow(-2)), "-1 meter^-2"),
        (Value.function_ref(Name("f")), "<function f>"),
    ]
)
def test_value_rendering(value, expected):
    assert str(value) == expected


def test_names_compare_by_text():
    assert Name("x") == Name("x")
    assert hash(Name("x")) == hash(Name("x"))
    assert Name("x") != "x"
    assert Name("x") != Name("X")


@pytest.mark.parametrize(
    "error,message",
    [
        (errors.UnitRedeclared(Name("m")), "Unit redeclared: m"),
        (errors.VariableRedefined(Name("x")), "Variable redefined: x"),
        (errors.FunctionRedefined(Name("f")), "Function redefined: f"),
        (errors.UndefinedName(FC(), Name("y")), "Undefined name: y"),
        (errors.InvalidPrefixOperator(FC(), PrefixOp.NEG, Value.function_ref(Name("f"))),
         "Invalid prefix operator - on value <function f>"),
        (errors.InvalidPowerValue(FC(), METER, Number(Decimal("0.5"))),
         "Invalid power on unit (meter): 0.5"),
        (errors.DivisionByZero(FC(), InfixOp.DIV), "Division by zero in operation /"),
        (errors.ArithmeticOutOfRange(FC(), "*"), "Result of operation * is out of range"),
        (errors.Unsupported(FC(), errors.Feature.FUNCTION_CALL), "Not yet supported: function call"),
    ]
)
def test_error_messages(error, message):
    assert str(error) == message
    assert isinstance(error, errors.NatplError)

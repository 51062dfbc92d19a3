import pytest
from hypothesis import given, strategies as st

from natpl.types.name import Name
from natpl.types.unit import Unit

METER = Unit.new_named(Name("meter"))
SECOND = Unit.new_named(Name("second"))

units = st.dictionaries(
    st.sampled_from(["meter", "second", "kilogram", "ampere", "kelvin"]),
    st.integers(min_value=-6, max_value=6),
).map(lambda d: Unit({Name(k): v for k, v in d.items()}))


@given(units, units)
def test_divide_undoes_multiply(a, b):
    assert a.multiply(b).divide(b) == a


@given(units, units)
def test_multiply_commutes(a, b):
    assert a * b == b * a
    assert hash(a * b) == hash(b * a)


@given(units)
def test_zero_power_is_dimensionless(a):
    assert a.pow(0) == Unit.new()
    assert a.pow(0).is_dimensionless


@given(units)
def test_self_division_is_dimensionless(a):
    assert a / a == Unit()


@given(units, st.integers(-4, 4), st.integers(-4, 4))
def test_powers_add(a, n, m):
    assert a.pow(n) * a.pow(m) == a.pow(n + m)


@given(units)
def test_negative_power_inverts(a):
    assert a.pow(-1) == Unit().divide(a)


def test_zero_exponents_are_dropped():
    assert Unit({Name("meter"): 0}) == Unit()
    assert hash(Unit({Name("meter"): 0})) == hash(Unit())
    assert dict(METER.divide(METER).exponents) == {}


def test_named_unit_has_single_exponent():
    assert dict(METER.exponents) == {Name("meter"): 1}
    assert METER.exponent(Name("meter")) == 1
    assert METER.exponent(Name("second")) == 0


def test_operations_do_not_mutate_operands():
    speed = METER / SECOND
    speed * SECOND
    speed.pow(3)
    assert speed == Unit({Name("meter"): 1, Name("second"): -1})


def test_exponents_view_is_read_only():
    with pytest.raises(TypeError):
        METER.exponents[Name("meter")] = 2


def test_units_differ_by_name_and_exponent():
    assert METER != SECOND
    assert METER != METER.pow(2)
    assert METER != "meter"


@pytest.mark.parametrize(
    "unit,expected",
    [
        (Unit(), "1"),
        (METER, "meter"),
        (METER / SECOND, "meter second^-1"),
        (METER.pow(2) / SECOND.pow(2), "meter^2 second^-2"),
        (SECOND * METER, "meter second"),
    ]
)
def test_unit_rendering(unit, expected):
    assert str(unit) == expected

import pytest

from physvalues.core.dimensions import DIMENSIONLESS, LENGTH, TIME, Dimension
from physvalues.core.exceptions import DimensionMismatchError
from physvalues.core.quantity import Quantity
from physvalues.units import celsius, centimeter, fahrenheit, hour, kelvin, kilometer, meter, minute, second


# -------------------------------
# Equality
# -------------------------------

def test_equality_across_scales_of_same_dimension():
    assert 100 * centimeter == 1 * meter
    assert 1 * hour == 60 * minute
    assert 0 * celsius == 273.15 * kelvin
    assert 212 * fahrenheit == 100 * celsius


def test_inequality_different_magnitude_same_unit():
    assert 2 * meter != 3 * meter
    assert not (2 * meter == 3 * meter)


def test_equal_magnitudes_different_dimensions_are_not_equal():
    assert 1 * meter != 1 * second
    assert not (1 * meter == 1 * second)


def test_equality_with_incompatible_type_returns_notimplemented():
    q = 1 * meter
    assert Quantity.__eq__(q, "not-a-quantity") is NotImplemented
    assert Quantity.__ne__(q, 1.0) is NotImplemented
    assert (q == "not-a-quantity") is False
    assert (q != "not-a-quantity") is True


def test_equality_when_units_simplify_to_same_dimension():
    ms = meter / second
    alt = (meter * second) / (second ** 2)
    assert ms == alt
    assert 12 * ms == 12 * alt


# -------------------------------
# Ordering
# -------------------------------

def test_ordering_normalizes_before_comparing():
    assert 1 * kilometer > 999 * meter
    assert 999 * meter < 1 * kilometer
    assert 1 * kilometer >= 1000 * meter
    assert 1000 * meter <= 1 * kilometer
    assert 90 * minute > 1 * hour
    assert 0 * celsius > 0 * kelvin


def test_ordering_is_fuzzy_at_equality():
    a = 100 * centimeter
    b = 1 * meter
    assert not a < b
    assert not a > b
    assert a <= b
    assert a >= b


@pytest.mark.parametrize("op", ["__lt__", "__le__", "__gt__", "__ge__"])
def test_ordering_across_dimensions_raises(op):
    with pytest.raises(DimensionMismatchError):
        getattr(1 * meter, op)(1 * second)


def test_sorting_mixed_scales():
    values = [1 * kilometer, 20 * meter, 5000 * centimeter]
    assert sorted(values) == [20 * meter, 5000 * centimeter, 1 * kilometer]


def test_compare_to_zero_only_for_dimensionless():
    r = Quantity(2.0, DIMENSIONLESS)
    assert r > 0
    assert Quantity(-1.0) < 0
    with pytest.raises(TypeError):
        _ = (1 * meter) > 0


def test_compare_to_other_types_raises():
    with pytest.raises(TypeError):
        _ = (1 * meter) < "1 m"
    with pytest.raises(TypeError):
        _ = Quantity(1.0) < 2


def test_dimension_equality_is_exponent_only():
    assert Dimension(length=1, scale=3.0) == LENGTH
    assert Dimension(length=1, scale=3.0) != TIME

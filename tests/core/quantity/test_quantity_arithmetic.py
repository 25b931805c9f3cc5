import math

import pytest

from physvalues.core import quantity as qmod
from physvalues.core.dimensions import DIMENSIONLESS, LENGTH, TIME
from physvalues.core.exceptions import DimensionMismatchError, ExponentError, OffsetUnitError
from physvalues.core.quantity import Quantity
from physvalues.units import (
    celsius,
    centimeter,
    hour,
    kelvin,
    kilogram,
    kilometer,
    meter,
    minute,
    second,
)


# -------------------------------
# Addition & subtraction
# -------------------------------

def test_add_and_sub_same_dim_keep_left_unit():
    q1 = 1 * meter
    q2 = 50 * centimeter  # 0.5 m

    s = q1 + q2
    d = q1 - q2

    assert s.dimension is meter and d.dimension is meter
    assert math.isclose(s.magnitude, 1.5)
    assert math.isclose(d.magnitude, 0.5)


def test_add_result_in_left_scale():
    s = (1 * kilometer) + (500 * meter)
    assert s.dimension is kilometer
    assert math.isclose(s.magnitude, 1.5)


@pytest.mark.parametrize("a,b", [
    (1 * meter, 1 * second),
    (1 * kilogram, 1 * meter),
    (1 * (meter / second), 1 * second),
])
def test_add_dim_mismatch_raises(a, b):
    with pytest.raises(DimensionMismatchError):
        _ = a + b
    with pytest.raises(DimensionMismatchError):
        _ = a - b


def test_mismatch_error_is_type_error_and_names_units():
    with pytest.raises(TypeError) as excinfo:
        _ = (2 * second) + (3 * (meter / second))
    err = excinfo.value
    assert isinstance(err, DimensionMismatchError)
    assert err.operation == "add"
    assert err.left == TIME
    assert "'s'" in str(err) and "'m/s'" in str(err)


def test_additive_identity():
    for q in (3 * meter, 2.5 * kilometer, 7 * (kilogram * meter / second ** 2)):
        assert q + 0 * q.dimension == q
        assert q - 0 * q.dimension == q


def test_offset_units_add_in_reference_space():
    # 10 °C + 5 K: normalized 283.15 + 5 -> 288.15 K -> 15 °C
    t = (10 * celsius) + (5 * kelvin)
    assert t.dimension is celsius
    assert t.magnitude == pytest.approx(15.0)


def test_add_with_plain_number_is_unsupported():
    with pytest.raises(TypeError):
        _ = (1 * meter) + 1
    with pytest.raises(TypeError):
        _ = 1 - (1 * meter)


# -------------------------------
# Scalars
# -------------------------------

def test_scalar_multiplication_and_division():
    q = 2 * meter

    q2 = q * 3
    q3 = 3 * q
    q4 = q / 2

    for r in (q2, q3, q4):
        assert r.dimension is meter
    assert math.isclose(q2.magnitude, 6.0)
    assert math.isclose(q3.magnitude, 6.0)
    assert math.isclose(q4.magnitude, 1.0)


def test_scalar_ops_do_not_normalize():
    # °C scaled directly, no trip through kelvin
    t = 2 * (10 * celsius)
    assert t.dimension is celsius
    assert t.magnitude == 20.0
    assert (t / 4).magnitude == 5.0


def test_scalar_divided_by_quantity():
    q = 2 / (4 * second)
    assert q.dimension == TIME ** -1
    assert math.isclose(q.normalized, 0.5)

    per_hour = 1 / (2 * hour)
    assert per_hour.dimension.scale == pytest.approx(1 / 3600.0)
    assert math.isclose(per_hour.magnitude, 0.5)


# -------------------------------
# Multiplication & division
# -------------------------------

def test_quantity_times_quantity():
    q = (2 * meter) * (3 * second)
    assert q.dimension == LENGTH * TIME
    assert math.isclose(q.magnitude, 6.0)
    assert q.dimension.render() == "m.s"


def test_quantity_div_quantity():
    q = (10 * meter) / (2 * second)
    assert q.dimension == LENGTH / TIME
    assert math.isclose(q.magnitude, 5.0)
    assert q.dimension.render() == "m/s"


def test_product_is_expressed_in_derived_scale():
    area = (2 * kilometer) * (3 * kilometer)
    assert area.dimension.scale == 1e6
    assert math.isclose(area.magnitude, 6.0)
    assert math.isclose(area.normalized, 6e6)


def test_mixed_scales_normalize_before_combining():
    q = (1 * kilometer) * (50 * centimeter)  # 1000 m * 0.5 m = 500 m^2
    assert math.isclose(q.normalized, 500.0)


def test_quotient_of_same_dimension_is_dimensionless():
    r = (1 * kilometer) / (500 * meter)
    assert r.dimension == DIMENSIONLESS
    assert math.isclose(float(r), 2.0)


def test_quantity_times_and_over_dimension():
    q = (2 * meter) * second
    assert q.dimension == LENGTH * TIME
    assert math.isclose(q.magnitude, 2.0)

    v = (120 * kilometer) / hour
    assert v.dimension == LENGTH / TIME
    assert math.isclose(v.normalized, 120_000 / 3600)

    w = meter * (3 * second)
    assert w.dimension == LENGTH * TIME
    assert math.isclose(w.normalized, 3.0)

    f = second / (4 * second)
    assert f.dimension == DIMENSIONLESS
    assert math.isclose(float(f), 0.25)


def test_offset_units_cannot_be_multiplied():
    with pytest.raises(OffsetUnitError):
        _ = (10 * celsius) * (2 * meter)
    with pytest.raises(OffsetUnitError):
        _ = (2 * meter) / (10 * celsius)
    with pytest.raises(OffsetUnitError):
        _ = (10 * celsius) ** 2


def test_operations_do_not_mutate_operands():
    q = 5 * meter
    _ = q * (2 * second)
    _ = q + (1 * meter)
    assert q.magnitude == 5.0
    assert q.dimension is meter


# -------------------------------
# Power & square root
# -------------------------------

def test_power_of_quantity():
    q2 = (2 * meter) ** 2
    assert q2.dimension == LENGTH ** 2
    assert math.isclose(q2.magnitude, 4.0)


def test_power_keeps_local_scale():
    q = (3 * kilometer) ** 2
    assert q.dimension.scale == 1e6
    assert math.isclose(q.magnitude, 9.0)
    assert math.isclose(q.normalized, 9e6)


def test_power_zero_one_negative():
    q = 2 * meter
    assert (q ** 0).dimension == DIMENSIONLESS
    assert (q ** 0).magnitude == 1.0
    assert (q ** 1) == q
    qn = q ** -2
    assert qn.dimension == LENGTH ** -2
    assert math.isclose(qn.magnitude, 0.25)


def test_power_rejects_non_integer():
    with pytest.raises(TypeError):
        _ = (2 * meter) ** 0.5


def test_square_root():
    area = (9 * kilometer) ** 2  # 81 km^2
    side = area.sqrt()
    assert side.dimension == LENGTH
    assert math.isclose(side.magnitude, 9.0)
    assert math.isclose(side.normalized, 9000.0)


def test_square_root_of_odd_exponent_fails_fast():
    with pytest.raises(ExponentError):
        (4 * meter).sqrt()
    with pytest.raises(ExponentError):
        ((4 * meter) / second ** 2).sqrt()


def test_unary_operators():
    q = 3 * minute
    assert (-q).magnitude == -3.0
    assert (+q) is q
    assert abs(-q) == q
    assert (-q).dimension is minute


# -------------------------------
# Stepping
# -------------------------------

def test_distance_to_and_advanced_by():
    start = 1 * kilometer
    end = 1500 * meter
    gap = start.distance_to(end)
    assert gap.dimension is kilometer
    assert math.isclose(gap.magnitude, 0.5)
    assert start.advanced_by(gap) == end
    with pytest.raises(DimensionMismatchError):
        start.distance_to(1 * second)


# -------------------------------
# Functional forms
# -------------------------------

def test_functional_forms_match_operators():
    a = 6 * meter
    b = 2 * meter
    t = 3 * second
    assert qmod.add(a, b) == a + b
    assert qmod.subtract(a, b) == a - b
    assert qmod.multiply(a, t) == a * t
    assert qmod.divide(a, t) == a / t
    assert qmod.scalar_multiply(4, a) == 4 * a
    assert qmod.scalar_divide(4, a) == a / 4
    assert qmod.power(a, 3) == a ** 3
    assert qmod.square_root(a * b) == Quantity(math.sqrt(12.0), LENGTH)

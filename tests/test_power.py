import pytest

from homedevices.power import Power


def test_constructor_keeps_any_value():
    assert Power(10.0).value == 10.0
    assert Power().value == 0.0


def test_setter_accepts_values_in_range():
    power = Power()
    power.value = 1000.0
    assert power.value == 1000.0
    power.value = Power.MIN_POWER
    assert power.value == Power.MIN_POWER
    power.value = Power.MAX_POWER
    assert power.value == Power.MAX_POWER


@pytest.mark.parametrize("rejected", [100.0, 499.9, 2000.1, 5000.0])
def test_setter_ignores_values_out_of_range(rejected):
    power = Power(1000.0)
    power.value = rejected
    assert power.value == 1000.0


def test_ratio_bounds():
    assert Power.ratio(Power.MIN_POWER) == 0.0
    assert Power.ratio(Power.MAX_POWER) == 1.0
    assert Power.ratio(100.0) == 0.0


def test_ratio_is_monotonic_inside_range():
    values = [Power.MIN_POWER + Power.GRADUATION * i for i in range(0, 600, 50)]
    ratios = [Power.ratio(v) for v in values]
    assert ratios == sorted(ratios)
    assert all(0.0 <= r <= 1.0 for r in ratios)


def test_str_drops_trailing_zero():
    assert str(Power(1500.0)) == "1500"
    assert str(Power(21.5)) == "21.5"


def test_str_round_trips_through_float():
    for value in (2.5, 1234.75, 500.0):
        assert float(str(Power(value))) == value


def test_equality():
    assert Power(21.5) == Power(21.5)
    assert not Power(21.5) == Power(22.5)
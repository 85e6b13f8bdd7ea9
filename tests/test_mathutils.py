import pytest

from ws2812tool.mathutils import almost_equal


@pytest.mark.parametrize("value", [1.0, -2.5, 1234.5678, 1e20])
def test_identical_values_are_equal(value):
    assert almost_equal(value, value) is True


def test_values_near_zero_are_equal():
    assert almost_equal(1e-11, -1e-11) is True
    assert almost_equal(0.0, 5e-11) is True


def test_clearly_different_values_are_not_equal():
    assert almost_equal(0.0, 1.0) is False
    assert almost_equal(1.0, 1.001) is False
    assert almost_equal(-1.0, 1.0) is False


def test_only_one_value_near_zero():
    assert almost_equal(1e-11, 1e-3) is False


@pytest.mark.parametrize("a,b", [(1.0, 2.0), (3.0, 3.0), (-4.0, 4.0), (1e-12, 0.0)])
def test_symmetric(a, b):
    assert almost_equal(a, b) == almost_equal(b, a)
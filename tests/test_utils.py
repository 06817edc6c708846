import math

import pytest

from rizipf.utils import (
    TAYLOR_THRESHOLD,
    expm1_ratio,
    h,
    h_integral,
    h_integral_inverse,
    log1p_ratio,
)


def test_taylor_threshold() -> None:
    assert TAYLOR_THRESHOLD == 1e-8


def test_ratios_at_zero() -> None:
    assert log1p_ratio(0.0) == 1.0
    assert expm1_ratio(0.0) == 1.0
    assert log1p_ratio(-0.0) == 1.0
    assert expm1_ratio(-0.0) == 1.0


@pytest.mark.parametrize("x", [1e-8, -1e-8, 1.5e-8, -1.5e-8, 5e-9, 1e-12])
def test_ratios_continuous_at_threshold(x) -> None:
    # the Taylor branch and the closed form agree around the switch point
    assert log1p_ratio(x) == pytest.approx(1 - x / 2, rel=1e-15)
    assert expm1_ratio(x) == pytest.approx(1 + x / 2, rel=1e-15)


@pytest.mark.parametrize("x", [0.5, -0.5, 2.0, 1e-3, -0.999])
def test_ratios_closed_form(x) -> None:
    assert log1p_ratio(x) == pytest.approx(math.log(1 + x) / x)
    assert expm1_ratio(x) == pytest.approx((math.exp(x) - 1) / x)


def test_log1p_ratio_limit() -> None:
    assert log1p_ratio(-1.0) == math.inf


def test_h() -> None:
    assert h(2.0, 1.0) == pytest.approx(0.5)
    assert h(3.0, 2.0) == pytest.approx(1 / 9)
    assert h(1.0, 7.5) == 1.0


@pytest.mark.parametrize("exponent", [0.5, 2.0, 3.0])
@pytest.mark.parametrize("x", [1.0, 1.5, 2.5, 100.5])
def test_h_integral_closed_form(exponent, x) -> None:
    expected = (x ** (1 - exponent) - 1) / (1 - exponent)
    assert h_integral(x, exponent) == pytest.approx(expected)


@pytest.mark.parametrize("x", [0.5, 1.5, 2.5, 1000.5])
def test_h_integral_exponent_one(x) -> None:
    assert h_integral(x, 1.0) == pytest.approx(math.log(x))


def test_h_integral_derivative() -> None:
    # h is the derivative of H
    for exponent in [0.3, 1.0, 1.07, 4.0]:
        for x in [1.5, 7.0, 30.0]:
            eps = 1e-6
            slope = (h_integral(x + eps, exponent) - h_integral(x - eps, exponent)) / (2 * eps)
            assert slope == pytest.approx(h(x, exponent), rel=1e-5)


@pytest.mark.parametrize("exponent", [0.1, 0.9, 1.0, 1.0 + 1e-9, 1.07, 2.0, 5.0])
@pytest.mark.parametrize("x", [0.6, 1.0, 1.5, 2.5, 42.0])
def test_h_integral_inverse(exponent, x) -> None:
    assert h_integral_inverse(h_integral(x, exponent), exponent) == pytest.approx(x, rel=1e-9)


@pytest.mark.parametrize("exponent", [0.1, 0.9, 1.0, 1.07])
def test_h_integral_inverse_large(exponent) -> None:
    x = 1000000.5
    assert h_integral_inverse(h_integral(x, exponent), exponent) == pytest.approx(x, rel=1e-9)


def test_h_integral_inverse_clamps_domain() -> None:
    # exponent 2: t = -1.5 is outside [-1, inf) and gets clamped to -1
    assert h_integral_inverse(1.5, 2.0) == math.inf

import math

import pytest

from brumby.derived_price import DerivedPrice


def test_default():
    price = DerivedPrice()
    assert price.probability == 0.0
    assert math.isinf(price.price)


def test_fair_price():
    assert DerivedPrice(probability=0.25, price=3.0).fair_price() == 4.0


def test_decimal_is_price():
    assert DerivedPrice(probability=0.4, price=2.3).decimal() == 2.3


def test_fair_price_has_unit_overround():
    price = DerivedPrice(probability=0.3, price=0.0)
    price.price = price.fair_price()
    assert price.overround() == pytest.approx(1.0)


def test_price_reconstructs_from_overround():
    price = DerivedPrice(probability=0.35, price=2.5)
    assert price.fair_price() / price.overround() == pytest.approx(price.price)


def test_zero_probability_fair_price_raises():
    with pytest.raises(ZeroDivisionError):
        DerivedPrice().fair_price()
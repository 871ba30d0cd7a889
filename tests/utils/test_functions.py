import math

import pytest
from pytest import approx

from latlong.utils.functions import normalize_bearing, round_half_up, to_precision


def test_round_half_up():
    assert round_half_up(0.5, 0) == 1.
    assert round_half_up(2.5, 0) == 3.
    assert round_half_up(1.25, 1) == 1.3
    assert round_half_up(1.24, 1) == 1.2


def test_to_precision():
    assert to_precision(373.505325, 4) == 373.5
    assert to_precision(0.00123456, 3) == 0.00123
    assert to_precision(-1234.5, 2) == -1200.
    assert to_precision(1000., 2) == 1000.
    assert to_precision(0, 3) == 0.

    # No exponent notation for large values
    assert str(to_precision(123456789., 3)) == '123000000.0'

    with pytest.raises(ValueError):
        to_precision(1., 0)


def test_normalize_bearing():
    assert normalize_bearing(0.) == 0.
    assert normalize_bearing(math.pi / 2) == math.pi / 2
    assert normalize_bearing(-math.pi / 2) == approx(3 * math.pi / 2)
    assert normalize_bearing(5 * math.pi) == approx(math.pi)

    # Would otherwise land on a full turn
    assert normalize_bearing(-1e-17) == 0.
    assert 0 <= normalize_bearing(-1e-12) < 2 * math.pi

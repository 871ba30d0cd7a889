import math

import pytest
from pytest import approx

from latlong import Coordinate, DecimalDegrees, DmsText, InvalidAngleFormat
from latlong.dms import parse_dms_coordinate
from tests.functions import assert_coordinates_equal


def test_coordinate_init():
    c = Coordinate(53.123, -1.987)
    assert c.lat == approx(math.radians(53.123))
    assert c.lon == approx(math.radians(-1.987))
    assert c.lat == approx(0.927171, abs=1e-6)
    assert c.lon == approx(-0.034680, abs=1e-6)

    # Numeric strings are decimal degrees
    assert Coordinate('53.123', '-1.987') == c

    c = Coordinate('512839N', '0002741W')
    assert c.lat == parse_dms_coordinate('512839N')
    assert c.lon == parse_dms_coordinate('0002741W')

    # Each value is classified separately
    mixed = Coordinate(51.4775, '0002741W')
    assert mixed.lat == approx(c.lat)
    assert mixed.lon == c.lon


def test_coordinate_init_tagged():
    c = Coordinate(DmsText('512839N'), DecimalDegrees(-1.987))
    assert c.lat == parse_dms_coordinate('512839N')
    assert c.lon == approx(math.radians(-1.987))

    # A tagged DMS value must carry a compass direction
    with pytest.raises(InvalidAngleFormat):
        Coordinate(DmsText('53.123'), 0)


def test_coordinate_init_invalid():
    with pytest.raises(InvalidAngleFormat):
        Coordinate('512839X', '0002741W')

    with pytest.raises(InvalidAngleFormat):
        Coordinate('north', 0)

    with pytest.raises(ValueError):
        Coordinate(91., 0.)

    with pytest.raises(ValueError):
        Coordinate(-90.5, 0.)

    with pytest.raises(ValueError):
        Coordinate(float('nan'), 0.)

    with pytest.raises(ValueError):
        Coordinate(0., 'inf')


def test_coordinate_bounds():
    assert Coordinate(90., 180.).lat == approx(math.pi / 2)
    assert Coordinate(-90., -180.).lon == approx(-math.pi)

    # Longitudes are wrapped across the antimeridian
    assert Coordinate(0., 190.).longitude == approx(-170.)
    assert Coordinate(0., -190.).longitude == approx(170.)
    assert Coordinate(0., 361.).longitude == approx(1.)


def test_coordinate_from_radians():
    c = Coordinate.from_radians(0.5, -0.25)
    assert c.lat == 0.5
    assert c.lon == -0.25

    assert Coordinate.from_radians(0., 3 * math.pi / 2).lon == approx(-math.pi / 2)

    with pytest.raises(ValueError):
        Coordinate.from_radians(2., 0.)


def test_coordinate_degrees():
    c = Coordinate(53.123, -1.987)
    assert c.latitude == approx(53.123)
    assert c.longitude == approx(-1.987)


def test_coordinate_hash():
    coords = [
        Coordinate(0., 0.),
        Coordinate(0., 0.),
        Coordinate(1., 1.)
    ]
    assert len(set(coords)) == 2
    assert Coordinate(0., 0.) in set(coords)
    assert Coordinate(1., 1.) in set(coords)


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0.)
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != (0., 0.)


def test_coordinate_repr():
    assert repr(Coordinate(0., 0.)) == '<Coordinate(0.0, 0.0)>'


def test_coordinate_text():
    c = Coordinate('512839N', '0002741W')
    assert c.latitude_text() == '051°28′39″N'
    assert c.longitude_text() == '000°27′41″W'
    assert c.to_text() == '051°28′39″N, 000°27′41″W'
    assert str(c) == c.to_text()

    c = Coordinate(-33.5, 151.25)
    assert c.to_text() == '033°30′00″S, 151°15′00″E'

    # Zero is north and east
    assert Coordinate(0., 0.).to_text() == '000°00′00″N, 000°00′00″E'


def test_coordinate_text_round_trip():
    for lat, lon in ((51.4775, -0.461389), (-33.8688, 151.2093), (0.0001, -179.9), (-89.9, 0.)):
        c = Coordinate(lat, lon)
        parsed = Coordinate(c.latitude_text(), c.longitude_text())
        assert_coordinates_equal(c, parsed, abs_tol=math.radians(1 / 3600))


def test_coordinate_static_formatters():
    assert Coordinate.radians_to_deg_min_sec(-0.1) == '-005°43′46″'
    assert Coordinate.radians_to_bearing_text(-math.pi / 2) == '270°00′00″'


def test_coordinate_to_dms():
    assert Coordinate(51.509865, -0.118092).to_dms() == (
        (51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W')
    )


def test_coordinate_from_dms():
    assert Coordinate.from_dms((0, 0, 0.0, 'N'), (0, 0, 0.0, 'E')) == Coordinate(0., 0.)
    assert_coordinates_equal(
        Coordinate.from_dms((51, 28, 39, 'N'), (0, 27, 41, 'W')),
        Coordinate('512839N', '0002741W'),
    )
    assert_coordinates_equal(
        Coordinate.from_dms((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W')),
        Coordinate(51.509865, -0.118092),
    )


def test_coordinate_to_float():
    assert Coordinate(1., 2.).to_float() == (approx(1.), approx(2.))
    assert Coordinate(1., 2.).to_float(reverse=True) == (approx(2.), approx(1.))

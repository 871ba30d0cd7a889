"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

import math
from typing import Tuple

from latlong._types import (
    ANGLE_INPUT, DecimalDegrees, Degrees, DmsText, HEADING_INPUT, Radians
)
from latlong.dms import (
    format_latitude, format_longitude, parse_dms_coordinate,
    rad_to_bearing, rad_to_deg_min_sec
)
from latlong.utils.functions import round_half_up


def _is_numeric(value) -> bool:
    if isinstance(value, (int, float)):
        return True

    if isinstance(value, str):
        try:
            float(value)
        except ValueError:
            return False
        return True

    return False


def _to_radians(value: ANGLE_INPUT) -> float:
    """Resolves a single latitude or longitude input to radians"""
    if isinstance(value, DecimalDegrees):
        return math.radians(float(value.value))

    if isinstance(value, DmsText):
        return parse_dms_coordinate(value.text)

    if _is_numeric(value):
        return math.radians(float(value))

    return parse_dms_coordinate(value)


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair).

    Latitude and longitude are held in radians (lat, lon). Either may be
    given as decimal degrees (numeric or numeric text) or as DMS text
    ending with a compass direction:

        Coordinate(53.123, -1.987)
        Coordinate('512839N', '0002741W')
        Coordinate(DecimalDegrees(53.123), DmsText('0002741W'))

    Longitudes beyond the antimeridian are wrapped back into [-180, 180].
    """

    def __init__(self, latitude: ANGLE_INPUT, longitude: ANGLE_INPUT):
        self._set_radians(_to_radians(latitude), _to_radians(longitude))

    def _set_radians(self, lat: float, lon: float) -> None:
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ValueError(f'Coordinate values must be finite, not ({lat}, {lon})')

        if abs(lat) > math.pi / 2:
            raise ValueError(f'Latitude {math.degrees(lat)} is beyond the poles.')

        if abs(lon) > math.pi:
            # Crosses the antimeridian
            lon = (lon + math.pi) % (2 * math.pi) - math.pi

        self.lat = lat
        self.lon = lon

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return self.lat == other.lat and self.lon == other.lon

    def __hash__(self):
        return hash((self.lat, self.lon))

    def __repr__(self):
        return f'<Coordinate({self.latitude}, {self.longitude})>'

    def __str__(self):
        return self.to_text()

    @property
    def latitude(self) -> Degrees:
        """The latitude, in decimal degrees"""
        return Degrees(math.degrees(self.lat))

    @property
    def longitude(self) -> Degrees:
        """The longitude, in decimal degrees"""
        return Degrees(math.degrees(self.lon))

    @classmethod
    def from_radians(cls, lat: float, lon: float):
        """Creates a Coordinate from a latitude and longitude already in radians"""
        coord = cls.__new__(cls)
        coord._set_radians(lat, lon)
        return coord

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a Coordinate from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            Coordinate
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3].upper() in ('S', 'W') else 1
            return DecimalDegrees(mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600)))

        return cls(convert(lat), convert(lon))

    @staticmethod
    def radians_to_deg_min_sec(rad: float) -> str:
        """Formats radians as signed degrees, minutes, seconds, e.g. '-005°43′46″'"""
        return rad_to_deg_min_sec(rad)

    @staticmethod
    def radians_to_bearing_text(rad: float) -> str:
        """Formats radians as a compass bearing in [000°00′00″, 360°)"""
        return rad_to_bearing(rad)

    def along_vector_distance(self, origin: 'Coordinate', direction: Radians) -> float:
        """
        Distance (km) of this point along the vector defined by an origin and a
        direction. Uses planar rather than spherical geometry, so only valid
        for small distances.
        """
        from latlong.geodesic import along_vector_distance
        return along_vector_distance(self, origin, direction)

    def destination_point(self, heading: HEADING_INPUT, distance_km: float) -> 'Coordinate':
        """The point reached by travelling distance_km from here on an initial heading (degrees)"""
        from latlong.geodesic import destination_point
        return destination_point(self, heading, distance_km)

    def final_heading(self, heading: HEADING_INPUT, distance_km: float) -> Radians:
        """The heading (radians) on arrival after travelling distance_km on an initial heading"""
        from latlong.geodesic import final_heading
        return final_heading(self, heading, distance_km)

    def latitude_text(self) -> str:
        """The latitude in degrees, minutes, seconds; e.g. 051°28′39″N"""
        return format_latitude(self.lat)

    def longitude_text(self) -> str:
        """The longitude in degrees, minutes, seconds; e.g. 000°27′41″W"""
        return format_longitude(self.lon)

    def to_text(self) -> str:
        """The coordinate in degrees, minutes, seconds; e.g. 051°28′39″N, 000°27′41″W"""
        return f'{self.latitude_text()}, {self.longitude_text()}'

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the latitude and longitude to tuples of degrees, minutes,
        seconds, hemisphere

        Returns:
            converted values as ((degrees, minutes, seconds, hemisphere), (...))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.lat >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.lon >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of decimal degrees (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        out = (self.latitude, self.longitude)
        if reverse:
            return out[::-1]

        return out


"""
Great-circle calculations for Coordinates on a spherical earth.

All angles are radians and all distances are kilometres. The earth is taken
to be a sphere of mean radius 6371 km; no ellipsoidal corrections are made.
"""

__all__ = [
    'along_vector_distance', 'bearing', 'cosine_law_distance', 'destination_point',
    'final_heading', 'haversine_distance', 'leg_distances', 'midpoint',
    'normalize_bearing', 'path_length',
]

import math
from typing import Sequence

import numpy as np

from latlong._const import EARTH_RADIUS_KM, PLANAR_DISTANCE_LIMIT_KM
from latlong._types import HEADING_INPUT, Radians
from latlong.coordinates import Coordinate
from latlong.dms import parse_heading
from latlong.utils.functions import normalize_bearing
from latlong.utils.logging import warn_once


def haversine_distance(
    coord1: Coordinate,
    coord2: Coordinate,
    radius: float = EARTH_RADIUS_KM
) -> float:
    """
    Calculate the Haversine distance in km between two points.

    From R. W. Sinnott, "Virtues of the Haversine", Sky and Telescope,
    vol 68, no 2, 1984.

    Args:
        coord1:
            A coordinate

        coord2:
            A second coordinate

        radius: (float) (Default 6371)
            The radius of the sphere, in km

    Returns:
        (float) the distance in km
    """
    d_lat, d_lon = coord2.lat - coord1.lat, coord2.lon - coord1.lon

    var1 = (math.sin(d_lat / 2) ** 2) + math.cos(coord1.lat) * math.cos(coord2.lat) * (
        math.sin(d_lon / 2) ** 2
    )
    var1 = min(1., var1)
    return radius * 2 * math.atan2(math.sqrt(var1), math.sqrt(1 - var1))


def cosine_law_distance(
    coord1: Coordinate,
    coord2: Coordinate,
    radius: float = EARTH_RADIUS_KM
) -> float:
    """
    Calculate the distance in km between two points using the spherical law
    of cosines. Less well-conditioned than the haversine for very short
    distances; provided for comparison.

    Args:
        coord1:
            A coordinate

        coord2:
            A second coordinate

        radius: (float) (Default 6371)
            The radius of the sphere, in km

    Returns:
        (float) the distance in km
    """
    cos_angle = (
        math.sin(coord1.lat) * math.sin(coord2.lat) +
        math.cos(coord1.lat) * math.cos(coord2.lat) * math.cos(coord2.lon - coord1.lon)
    )
    # Rounding can push coincident or antipodal points just outside acos' domain
    return math.acos(max(-1., min(1., cos_angle))) * radius


def bearing(coord1: Coordinate, coord2: Coordinate) -> Radians:
    """
    Calculate the initial bearing (radians clockwise from North) from
    coord1 to coord2.

    The result lies in (-pi, pi]; use normalize_bearing() for a compass
    bearing in [0, 2pi).

    Args:
        coord1:
            The start point Coordinate

        coord2:
            The finish point Coordinate

    Returns:
        (Radians) the initial bearing
    """
    d_lon = coord2.lon - coord1.lon
    y_val = math.sin(d_lon) * math.cos(coord2.lat)
    x_val = math.cos(coord1.lat) * math.sin(coord2.lat) - math.sin(coord1.lat) * math.cos(
        coord2.lat
    ) * math.cos(d_lon)
    return Radians(math.atan2(y_val, x_val))


def midpoint(coord1: Coordinate, coord2: Coordinate) -> Coordinate:
    """
    Calculate the midpoint of the great circle arc between two points.

    Args:
        coord1:
            A coordinate

        coord2:
            A second coordinate

    Returns:
        Coordinate
    """
    d_lon = coord2.lon - coord1.lon

    b_x = math.cos(coord2.lat) * math.cos(d_lon)
    b_y = math.cos(coord2.lat) * math.sin(d_lon)

    lat = math.atan2(
        math.sin(coord1.lat) + math.sin(coord2.lat),
        math.sqrt((math.cos(coord1.lat) + b_x) ** 2 + b_y ** 2)
    )
    lon = coord1.lon + math.atan2(b_y, math.cos(coord1.lat) + b_x)

    return Coordinate(math.degrees(lat), math.degrees(lon))


def destination_point(
    start: Coordinate,
    heading: HEADING_INPUT,
    distance_km: float,
    radius: float = EARTH_RADIUS_KM
) -> Coordinate:
    """
    Given a start location, an initial heading, and a distance of travel,
    returns the finish location.

    Args:
        start: (Coordinate)
            The starting location

        heading: (float or str)
            The initial heading, in degrees clockwise from North. Accepts
            decimal degrees or degrees, minutes, seconds text (e.g. '045 30 00')

        distance_km: (float)
            The amount of movement, in km

        radius: (float) (Default 6371)
            The radius of the sphere, in km

    Returns:
        (Coordinate)
    """
    angle = parse_heading(heading)
    _rad = float(distance_km) / radius

    final_lat = math.asin(
        math.sin(start.lat) * math.cos(_rad)
        + math.cos(start.lat) * math.sin(_rad) * math.cos(angle)
    )
    final_lon = start.lon + math.atan2(
        math.sin(angle) * math.sin(_rad) * math.cos(start.lat),
        math.cos(_rad) - math.sin(start.lat) * math.sin(final_lat),
    )

    return Coordinate.from_radians(final_lat, final_lon)


def final_heading(
    start: Coordinate,
    heading: HEADING_INPUT,
    distance_km: float,
    radius: float = EARTH_RADIUS_KM
) -> Radians:
    """
    Given a start location, an initial heading, and a distance of travel,
    returns the heading on arrival at the finish location.

    Args:
        start: (Coordinate)
            The starting location

        heading: (float or str)
            The initial heading, in degrees clockwise from North

        distance_km: (float)
            The amount of movement, in km

        radius: (float) (Default 6371)
            The radius of the sphere, in km

    Returns:
        (Radians) the final heading, in [0, 2pi)
    """
    finish = destination_point(start, heading, distance_km, radius)

    # Reverse bearing from the finish back to the start, turned around
    return Radians(normalize_bearing(bearing(finish, start) + math.pi))


def along_vector_distance(
    point: Coordinate,
    origin: Coordinate,
    direction: Radians
) -> float:
    """
    Calculate the distance of a point along the vector defined by an origin
    point and a direction.

    Uses planar, not spherical, geometry so is only valid for small
    distances. A warning is logged the first time the point lies more than
    100 km from the origin.

    Args:
        point:
            The point to project

        origin:
            The origin of the vector

        direction:
            The direction of the vector, in radians clockwise from North

    Returns:
        (float) the projected distance in km
    """
    dist = haversine_distance(point, origin)
    if dist > PLANAR_DISTANCE_LIMIT_KM:
        warn_once(
            f'along_vector_distance uses a planar approximation and is inaccurate '
            f'beyond {PLANAR_DISTANCE_LIMIT_KM:g} km. (this warning will not repeat)'
        )

    return dist * math.cos(bearing(point, origin) - direction)


def leg_distances(points: Sequence[Coordinate], radius: float = EARTH_RADIUS_KM) -> np.ndarray:
    """
    Provides an array of the haversine distances (in km) between consecutive
    points. The length of the returned array will always be len(points) - 1

    Args:
        points:
            An ordered sequence of Coordinates

        radius: (float) (Default 6371)
            The radius of the sphere, in km

    Returns:
        np.ndarray
    """
    if len(points) < 2:
        raise ValueError('Cannot compute distances between fewer than two points.')

    lat = np.array([point.lat for point in points])
    lon = np.array([point.lon for point in points])

    d_lat, d_lon = np.diff(lat), np.diff(lon)
    var1 = np.sin(d_lat / 2) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(d_lon / 2) ** 2
    var1 = np.clip(var1, 0., 1.)
    return radius * 2 * np.arctan2(np.sqrt(var1), np.sqrt(1 - var1))


def path_length(points: Sequence[Coordinate], radius: float = EARTH_RADIUS_KM) -> float:
    """The total haversine distance (in km) along an ordered sequence of points"""
    return float(np.sum(leg_distances(points, radius)))

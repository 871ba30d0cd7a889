from latlong._version import __version__  # noqa: F401
from latlong.utils.logging import LOGGER
from latlong._types import DecimalDegrees, Degrees, DmsText, Radians
from latlong.coordinates import Coordinate
from latlong.dms import (
    InvalidAngleFormat, parse_dms_coordinate, parse_heading,
    rad_to_bearing, rad_to_deg_min_sec
)
from latlong.geodesic import (
    along_vector_distance, bearing, cosine_law_distance, destination_point,
    final_heading, haversine_distance, leg_distances, midpoint, normalize_bearing,
    path_length
)

__all__ = [
    'Coordinate',
    'DecimalDegrees',
    'Degrees',
    'DmsText',
    'InvalidAngleFormat',
    'Radians',
    'along_vector_distance',
    'bearing',
    'cosine_law_distance',
    'destination_point',
    'final_heading',
    'haversine_distance',
    'leg_distances',
    'midpoint',
    'normalize_bearing',
    'parse_dms_coordinate',
    'parse_heading',
    'path_length',
    'rad_to_bearing',
    'rad_to_deg_min_sec',
    'LOGGER',
]

"""
Parsing and formatting of degree/minute/second (DMS) angles.

Parsing is flexible on formats, allowing a variety of separators
(e.g. 3° 37' 09"W, 51:28:39N) or fixed-width text without separators
(e.g. 0033709W). Parsed angles are returned in radians.
"""

__all__ = [
    'InvalidAngleFormat', 'dms_parts', 'format_dms', 'format_latitude',
    'format_longitude', 'parse_dms_coordinate', 'parse_heading',
    'rad_to_bearing', 'rad_to_deg_min_sec',
]

import math
import re
from typing import List, Tuple

from latlong._const import (
    COMPASS_DIRECTIONS, DEGREE_SIGN, DOUBLE_PRIME, PRIME, RE_DMS_SEPARATORS
)
from latlong._types import HEADING_INPUT, Radians
from latlong.utils.functions import normalize_bearing, round_half_up
from latlong.utils.logging import warn_once

# Degrees padded to 3 digits, then 2 digits of minutes, then seconds (optionally fractional)
_RE_FIXED_WIDTH = re.compile(r'^(\d{3})(\d{0,2})(\d+(?:\.\d*)?)?$')


class InvalidAngleFormat(ValueError):
    """Raised when text cannot be interpreted as an angle"""

    def __init__(self, text, reason: str):
        self.text = text
        super().__init__(f'Invalid angle {text!r}: {reason}')


def _split_dms(text: str) -> List[str]:
    """Splits text on DMS separators, dropping empty fragments"""
    return [part for part in RE_DMS_SEPARATORS.split(text) if part]


def _to_floats(text, parts: List[str]) -> List[float]:
    try:
        values = [float(part) for part in parts]
    except ValueError as exc:
        raise InvalidAngleFormat(text, 'non-numeric degrees, minutes or seconds') from exc

    if not all(math.isfinite(value) for value in values):
        raise InvalidAngleFormat(text, 'angle values must be finite')

    return values


def _check_fields(text, minutes: float, seconds: float) -> None:
    """Minutes and seconds over 59 are tolerated, but never silently"""
    if minutes >= 60 or seconds >= 60:
        warn_once(
            'Angle %r has minutes or seconds of 60 or more; the values have been summed as given.',
            text
        )


def parse_dms_coordinate(text: str) -> Radians:
    """
    Converts a latitude or longitude written in degrees, minutes and seconds
    into radians.

    The compass direction (N, S, E or W) is always required as the final
    character. Degrees, minutes and seconds may either be separated (by
    whitespace, colons, commas, degree signs, primes or quotes) or written
    in fixed width without separators (DDDMMSS, with latitudes permitted
    to use only 2 degree digits). South and west are negative.

    Args:
        text:
            The angle, e.g. '51°28\'39"N' or '512839N'

    Returns:
        (Radians) the signed angle

    Raises:
        InvalidAngleFormat: if the compass direction is missing or the
            degrees, minutes and seconds can't be read
    """
    if not isinstance(text, str):
        raise InvalidAngleFormat(text, 'DMS angles must be text')

    value = text.strip().upper()
    if not value or value[-1] not in COMPASS_DIRECTIONS:
        raise InvalidAngleFormat(text, 'missing compass direction (N, S, E or W)')

    direction, body = value[-1], value[:-1].strip()
    if not body:
        raise InvalidAngleFormat(text, 'no degrees given')

    parts = _split_dms(body)
    if len(parts) == 3:
        degrees, minutes, seconds = _to_floats(text, parts)
    else:
        if direction in ('N', 'S'):
            # Normalise latitudes to 3-digit degrees
            body = '0' + body

        match = _RE_FIXED_WIDTH.match(body)
        if not match:
            raise InvalidAngleFormat(
                text, 'expected fixed-width DDDMMSS or separated degrees, minutes and seconds'
            )
        degrees, minutes, seconds = (float(x) if x else 0. for x in match.groups())

    _check_fields(text, minutes, seconds)
    decimal = degrees + minutes / 60 + seconds / 3600
    if direction in ('S', 'W'):
        decimal = -decimal

    return Radians(math.radians(decimal))


def parse_heading(value: HEADING_INPUT) -> Radians:
    """
    Converts a heading in degrees into radians. Numbers and numeric text are
    taken as decimal degrees; text with three separated parts is taken as
    degrees, minutes and seconds (e.g. '045 30 00' or '45°30\'0"').

    Args:
        value:
            The heading, in degrees

    Returns:
        (Radians) the heading

    Raises:
        InvalidAngleFormat: if the heading is non-numeric or not finite
    """
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise InvalidAngleFormat(value, 'angle values must be finite')
        return Radians(math.radians(value))

    if not isinstance(value, str):
        raise InvalidAngleFormat(value, 'headings must be numeric or text')

    parts = _split_dms(value.strip())
    if len(parts) == 3:
        degrees, minutes, seconds = _to_floats(value, parts)
        _check_fields(value, minutes, seconds)
        magnitude = abs(degrees) + minutes / 60 + seconds / 3600
        decimal = -magnitude if parts[0].startswith('-') else magnitude
    elif len(parts) == 1:
        decimal = _to_floats(value, parts)[0]
    else:
        raise InvalidAngleFormat(
            value, 'expected decimal degrees or separated degrees, minutes and seconds'
        )

    return Radians(math.radians(decimal))


def dms_parts(rad: float) -> Tuple[int, int, int]:
    """
    Splits the magnitude of an angle into whole degrees, whole minutes and
    rounded seconds.

    Args:
        rad:
            The angle, in radians. The sign is ignored.

    Returns:
        Tuple of (degrees, minutes, seconds)
    """
    decimal = abs(math.degrees(rad))
    degrees = math.floor(decimal)
    minutes = math.floor((decimal - degrees) * 60)
    seconds = int(round_half_up((decimal - degrees - minutes / 60) * 3600, 0))

    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1

    return int(degrees), int(minutes), seconds


def _render(degrees: int, minutes: int, seconds: int) -> str:
    return f'{degrees:03d}{DEGREE_SIGN}{minutes:02d}{PRIME}{seconds:02d}{DOUBLE_PRIME}'


def format_dms(rad: float) -> str:
    """Formats an angle as zero-padded DDD°MM′SS″, without sign or compass direction"""
    return _render(*dms_parts(rad))


def rad_to_deg_min_sec(rad: float) -> str:
    """Formats an angle as signed degrees, minutes, seconds; e.g. -0.1 -> '-005°43′46″'"""
    return ('-' if rad < 0 else '') + format_dms(rad)


def rad_to_bearing(rad: float) -> str:
    """Formats an angle as a compass bearing, 000°00′00″ up to (not including) 360°"""
    degrees, minutes, seconds = dms_parts(normalize_bearing(rad))
    if degrees >= 360:
        # Seconds rounded up to a full turn
        degrees -= 360

    return _render(degrees, minutes, seconds)


def format_latitude(rad: float) -> str:
    """Formats a latitude, e.g. 051°28′39″N"""
    return format_dms(rad) + ('S' if rad < 0 else 'N')


def format_longitude(rad: float) -> str:
    """Formats a longitude, e.g. 000°27′41″W"""
    return format_dms(rad) + ('E' if rad >= 0 else 'W')

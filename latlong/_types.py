from typing import NamedTuple, NewType, Union


Radians = NewType('Radians', float)
Degrees = NewType('Degrees', float)


class DecimalDegrees(NamedTuple):
    """An angle given in decimal degrees, e.g. DecimalDegrees(-1.987)"""
    value: float


class DmsText(NamedTuple):
    """An angle given as DMS text with a compass letter, e.g. DmsText('0002741W')"""
    text: str


ANGLE_INPUT = Union[float, int, str, DecimalDegrees, DmsText]
HEADING_INPUT = Union[float, int, str]

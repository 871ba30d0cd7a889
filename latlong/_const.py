"""
Constants declarations for latlong
"""
import re

# Mean Earth Radius (spherical model)
EARTH_RADIUS_KM = 6371.0

# Beyond this separation the flat-earth projection in along_vector_distance
# drifts noticeably from the great-circle result
PLANAR_DISTANCE_LIMIT_KM = 100.0

DEGREE_SIGN = '°'
PRIME = '′'
DOUBLE_PRIME = '″'

# Separators accepted between degree, minute and second fields
RE_DMS_SEPARATORS = re.compile(r'[\s:,°º\'"′″]+')

COMPASS_DIRECTIONS = ('N', 'S', 'E', 'W')

"""
Classification of points against the region in which the national obfuscation applies.

The region is a coarse rectangle around mainland China rather than a true territorial
boundary, so points near the border (e.g. parts of neighboring countries) may be
misclassified. This matches the behavior of the commonly distributed reference algorithm.
"""

__all__ = [
    'is_inside_obfuscation_region', 'is_outside_obfuscation_region',
    'outside_obfuscation_region_mask',
]

import numpy as np

from chinacoords._const import (
    REGION_MAX_LATITUDE, REGION_MAX_LONGITUDE, REGION_MIN_LATITUDE, REGION_MIN_LONGITUDE
)


def is_outside_obfuscation_region(longitude: float, latitude: float) -> bool:
    """
    Test whether a point lies outside the obfuscation region.

    Comparisons are strict: a point lying exactly on any edge of the region is inside.

    Args:
        longitude:
            The longitude, in decimal degrees

        latitude:
            The latitude, in decimal degrees

    Returns:
        bool
    """
    return bool(
        longitude < REGION_MIN_LONGITUDE or
        longitude > REGION_MAX_LONGITUDE or
        latitude < REGION_MIN_LATITUDE or
        latitude > REGION_MAX_LATITUDE
    )


def is_inside_obfuscation_region(longitude: float, latitude: float) -> bool:
    """Test whether a point lies inside the obfuscation region"""
    return not is_outside_obfuscation_region(longitude, latitude)


def outside_obfuscation_region_mask(longitudes, latitudes) -> np.ndarray:
    """
    Element-wise version of is_outside_obfuscation_region.

    Args:
        longitudes:
            An array-like of longitudes

        latitudes:
            An array-like of latitudes, broadcastable against longitudes

    Returns:
        A boolean ndarray, True where the point is outside the region
    """
    longitudes = np.asarray(longitudes, dtype=float)
    latitudes = np.asarray(latitudes, dtype=float)
    return (
        (longitudes < REGION_MIN_LONGITUDE) |
        (longitudes > REGION_MAX_LONGITUDE) |
        (latitudes < REGION_MIN_LATITUDE) |
        (latitudes > REGION_MAX_LATITUDE)
    )

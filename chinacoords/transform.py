"""
Conversions between the Global (WGS-84), National-Obscured (GCJ-02) and Provider-Obscured
(BD-09) coordinate standards.

    Global  <-->  National  <-->  Provider

The Global/National step only applies inside the obfuscation region (see
chinacoords.region); outside of it the two standards coincide. The National to Global
direction is a first-order approximation, not an exact inverse: a round trip through
global_to_national and national_to_global leaves a small but deterministic residual
(on the order of 1e-5 degrees, i.e. a few meters).

The National/Provider step is a polar re-encoding with constant offsets and applies
everywhere.

The scalar functions coerce their arguments to Python floats, so narrower numpy scalars
(float32, float16) are still computed in double precision. Trigonometry goes through numpy
ufuncs rather than the math module, so that non-finite input yields NaN instead of raising;
results may differ from a math-module port of the same formulas in the last few ulps
(around 1e-14 degrees).
"""

__all__ = [
    'global_to_national', 'global_to_provider', 'national_to_global',
    'national_to_provider', 'provider_to_global', 'provider_to_national',
]

from typing import Tuple

import numpy as np

from chinacoords._const import (
    KRASOVSKY_A, KRASOVSKY_EE, PROVIDER_ANGLE_PERTURBATION, PROVIDER_LATITUDE_OFFSET,
    PROVIDER_LONGITUDE_OFFSET, PROVIDER_RADIUS_PERTURBATION, PROVIDER_X_PI,
    REFERENCE_LATITUDE, REFERENCE_LONGITUDE,
)
from chinacoords.coordinates import Coordinate
from chinacoords.distortion import latitude_offset, longitude_offset
from chinacoords.region import is_outside_obfuscation_region


def _national_shift(longitude, latitude) -> Tuple:
    """
    Applies the national distortion to a point, ignoring the region. Accepts scalars or
    arrays.

    Returns:
        (shifted longitude, shifted latitude)
    """
    with np.errstate(invalid='ignore', divide='ignore', over='ignore'):
        d_lon = longitude - REFERENCE_LONGITUDE
        d_lat = latitude - REFERENCE_LATITUDE
        raw_lat = latitude_offset(d_lon, d_lat)
        raw_lon = longitude_offset(d_lon, d_lat)

        rad_lat = latitude / 180.0 * np.pi
        magic = np.sin(rad_lat)
        magic = 1 - KRASOVSKY_EE * magic * magic
        sqrt_magic = np.sqrt(magic)

        shift_lat = (raw_lat * 180.0) / (
            (KRASOVSKY_A * (1 - KRASOVSKY_EE)) / (magic * sqrt_magic) * np.pi
        )
        shift_lon = (raw_lon * 180.0) / (KRASOVSKY_A / sqrt_magic * np.cos(rad_lat) * np.pi)

    return longitude + shift_lon, latitude + shift_lat


def _encode_provider(longitude, latitude) -> Tuple:
    """National to Provider polar re-encoding. Accepts scalars or arrays."""
    with np.errstate(invalid='ignore', over='ignore'):
        z = (
            np.sqrt(longitude * longitude + latitude * latitude)
            + PROVIDER_RADIUS_PERTURBATION * np.sin(latitude * PROVIDER_X_PI)
        )
        theta = (
            np.arctan2(latitude, longitude)
            + PROVIDER_ANGLE_PERTURBATION * np.cos(longitude * PROVIDER_X_PI)
        )
        return (
            z * np.cos(theta) + PROVIDER_LONGITUDE_OFFSET,
            z * np.sin(theta) + PROVIDER_LATITUDE_OFFSET,
        )


def _decode_provider(longitude, latitude) -> Tuple:
    """Provider to National polar decoding. Accepts scalars or arrays."""
    with np.errstate(invalid='ignore', over='ignore'):
        x = longitude - PROVIDER_LONGITUDE_OFFSET
        y = latitude - PROVIDER_LATITUDE_OFFSET
        z = np.sqrt(x * x + y * y) - PROVIDER_RADIUS_PERTURBATION * np.sin(y * PROVIDER_X_PI)
        theta = np.arctan2(y, x) - PROVIDER_ANGLE_PERTURBATION * np.cos(x * PROVIDER_X_PI)
        return z * np.cos(theta), z * np.sin(theta)


def global_to_national(longitude: float, latitude: float) -> Coordinate:
    """
    Convert a Global (WGS-84) coordinate to the National (GCJ-02) standard.

    Points outside the obfuscation region are returned unchanged.

    Args:
        longitude:
            The Global longitude, in decimal degrees

        latitude:
            The Global latitude, in decimal degrees

    Returns:
        Coordinate
    """
    longitude, latitude = float(longitude), float(latitude)
    if is_outside_obfuscation_region(longitude, latitude):
        return Coordinate(longitude, latitude)

    return Coordinate(*_national_shift(longitude, latitude))


def national_to_global(longitude: float, latitude: float) -> Coordinate:
    """
    Approximately convert a National (GCJ-02) coordinate back to the Global (WGS-84)
    standard.

    The forward distortion is evaluated at the National point itself and the point is
    reflected through the result. This is not an exact inverse and is intentionally left
    that way, since consumers of this standard expect its particular error profile.

    Args:
        longitude:
            The National longitude, in decimal degrees

        latitude:
            The National latitude, in decimal degrees

    Returns:
        Coordinate
    """
    longitude, latitude = float(longitude), float(latitude)
    if is_outside_obfuscation_region(longitude, latitude):
        return Coordinate(longitude, latitude)

    shifted_lon, shifted_lat = _national_shift(longitude, latitude)
    return Coordinate(longitude * 2 - shifted_lon, latitude * 2 - shifted_lat)


def national_to_provider(longitude: float, latitude: float) -> Coordinate:
    """Convert a National (GCJ-02) coordinate to the Provider (BD-09) standard"""
    longitude, latitude = float(longitude), float(latitude)
    return Coordinate(*_encode_provider(longitude, latitude))


def provider_to_national(longitude: float, latitude: float) -> Coordinate:
    """Convert a Provider (BD-09) coordinate to the National (GCJ-02) standard"""
    longitude, latitude = float(longitude), float(latitude)
    return Coordinate(*_decode_provider(longitude, latitude))


def global_to_provider(longitude: float, latitude: float) -> Coordinate:
    """Convert a Global (WGS-84) coordinate to the Provider (BD-09) standard"""
    return national_to_provider(*global_to_national(longitude, latitude))


def provider_to_global(longitude: float, latitude: float) -> Coordinate:
    """Approximately convert a Provider (BD-09) coordinate to the Global (WGS-84) standard"""
    return national_to_global(*provider_to_national(longitude, latitude))

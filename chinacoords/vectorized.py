"""
Array versions of the conversions in chinacoords.transform.

Each function accepts array-likes (or scalars) of longitudes and latitudes, broadcasts them
against each other, and returns a (longitudes, latitudes) tuple of float ndarrays. The same
formulas are applied in the same order as the scalar functions, so results agree with them
element-wise.
"""

__all__ = [
    'global_to_national_array', 'global_to_provider_array', 'national_to_global_array',
    'national_to_provider_array', 'provider_to_global_array', 'provider_to_national_array',
]

from typing import Tuple

import numpy as np

from chinacoords.region import outside_obfuscation_region_mask
from chinacoords.transform import _decode_provider, _encode_provider, _national_shift

ArrayPair = Tuple[np.ndarray, np.ndarray]


def _as_arrays(longitudes, latitudes) -> ArrayPair:
    lons, lats = np.broadcast_arrays(
        np.asarray(longitudes, dtype=float),
        np.asarray(latitudes, dtype=float),
    )
    return lons, lats


def global_to_national_array(longitudes, latitudes) -> ArrayPair:
    """
    Convert arrays of Global (WGS-84) coordinates to the National (GCJ-02) standard.

    Points outside the obfuscation region are returned unchanged.

    Args:
        longitudes:
            An array-like of Global longitudes

        latitudes:
            An array-like of Global latitudes, broadcastable against longitudes

    Returns:
        (longitudes, latitudes) as float ndarrays
    """
    lons, lats = _as_arrays(longitudes, latitudes)
    outside = outside_obfuscation_region_mask(lons, lats)
    shifted_lons, shifted_lats = _national_shift(lons, lats)
    return np.where(outside, lons, shifted_lons), np.where(outside, lats, shifted_lats)


def national_to_global_array(longitudes, latitudes) -> ArrayPair:
    """
    Approximately convert arrays of National (GCJ-02) coordinates to the Global (WGS-84)
    standard. Carries the same residual error as transform.national_to_global.
    """
    lons, lats = _as_arrays(longitudes, latitudes)
    outside = outside_obfuscation_region_mask(lons, lats)
    shifted_lons, shifted_lats = _national_shift(lons, lats)
    with np.errstate(invalid='ignore', over='ignore'):
        return (
            np.where(outside, lons, lons * 2 - shifted_lons),
            np.where(outside, lats, lats * 2 - shifted_lats),
        )


def national_to_provider_array(longitudes, latitudes) -> ArrayPair:
    """Convert arrays of National (GCJ-02) coordinates to the Provider (BD-09) standard"""
    return _encode_provider(*_as_arrays(longitudes, latitudes))


def provider_to_national_array(longitudes, latitudes) -> ArrayPair:
    """Convert arrays of Provider (BD-09) coordinates to the National (GCJ-02) standard"""
    return _decode_provider(*_as_arrays(longitudes, latitudes))


def global_to_provider_array(longitudes, latitudes) -> ArrayPair:
    return national_to_provider_array(*global_to_national_array(longitudes, latitudes))


def provider_to_global_array(longitudes, latitudes) -> ArrayPair:
    return national_to_global_array(*provider_to_national_array(longitudes, latitudes))

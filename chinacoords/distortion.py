"""
The polynomial/harmonic distortion model behind the national obfuscation.

Both functions take the offset of a point from the reference point (105E, 35N) and return
a raw perturbation, which the caller then scales onto the ellipsoid. They are written with
numpy ufuncs so that they accept either scalars or arrays, and so that non-finite input
yields NaN rather than raising the way the math module does.
"""

__all__ = ['latitude_offset', 'longitude_offset']

import numpy as np


def latitude_offset(d_lon, d_lat):
    """
    Raw latitude perturbation for a point offset (d_lon, d_lat) degrees from the reference
    point.

    Args:
        d_lon:
            Longitude minus the reference longitude, scalar or array

        d_lat:
            Latitude minus the reference latitude, scalar or array

    Returns:
        The unscaled latitude perturbation, with the same shape as the inputs
    """
    ret = (
        -100.0 + 2.0 * d_lon + 3.0 * d_lat + 0.2 * d_lat * d_lat
        + 0.1 * d_lon * d_lat + 0.2 * np.sqrt(np.abs(d_lon))
    )
    ret += (20.0 * np.sin(6.0 * d_lon * np.pi) + 20.0 * np.sin(2.0 * d_lon * np.pi)) * 2.0 / 3.0
    ret += (20.0 * np.sin(d_lat * np.pi) + 40.0 * np.sin(d_lat / 3.0 * np.pi)) * 2.0 / 3.0
    ret += (160.0 * np.sin(d_lat / 12.0 * np.pi) + 320 * np.sin(d_lat * np.pi / 30.0)) * 2.0 / 3.0
    return ret


def longitude_offset(d_lon, d_lat):
    """
    Raw longitude perturbation for a point offset (d_lon, d_lat) degrees from the reference
    point. See latitude_offset.
    """
    ret = (
        300.0 + d_lon + 2.0 * d_lat + 0.1 * d_lon * d_lon
        + 0.1 * d_lon * d_lat + 0.1 * np.sqrt(np.abs(d_lon))
    )
    ret += (20.0 * np.sin(6.0 * d_lon * np.pi) + 20.0 * np.sin(2.0 * d_lon * np.pi)) * 2.0 / 3.0
    # The harmonic terms below depend on d_lon only
    ret += (20.0 * np.sin(d_lon * np.pi) + 40.0 * np.sin(d_lon / 3.0 * np.pi)) * 2.0 / 3.0
    ret += (150.0 * np.sin(d_lon / 12.0 * np.pi) + 300.0 * np.sin(d_lon / 30.0 * np.pi)) * 2.0 / 3.0
    return ret

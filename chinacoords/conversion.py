"""
Conversion between coordinate systems by name.

    convert(Coordinate(116.404, 39.915), 'wgs84', 'bd09')
    convert_array(lons, lats, CoordinateSystem.PROVIDER, CoordinateSystem.NATIONAL)

Coordinate systems may be given as CoordinateSystem members or by name. Names are
case-insensitive and the common datum aliases are accepted (wgs84, gcj02, bd09).
"""

__all__ = ['CoordinateSystem', 'convert', 'convert_array']

from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Union

import numpy as np
from pydantic import validate_call

from chinacoords import transform, vectorized
from chinacoords.coordinates import Coordinate
from chinacoords.utils.functions import round_half_up
from chinacoords.utils.logging import LOGGER, warn_once


class CoordinateSystem(str, Enum):
    """The coordinate standards supported by chinacoords"""

    GLOBAL = 'global'  # WGS-84
    NATIONAL = 'national'  # GCJ-02
    PROVIDER = 'provider'  # BD-09

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None

        value = value.strip().lower()
        for member in cls:
            if member.value == value:
                return member

        return _ALIASES.get(value)


_ALIASES = {
    'wgs84': CoordinateSystem.GLOBAL,
    'wgs-84': CoordinateSystem.GLOBAL,
    'gcj02': CoordinateSystem.NATIONAL,
    'gcj-02': CoordinateSystem.NATIONAL,
    'bd09': CoordinateSystem.PROVIDER,
    'bd-09': CoordinateSystem.PROVIDER,
}

_G, _N, _P = CoordinateSystem.GLOBAL, CoordinateSystem.NATIONAL, CoordinateSystem.PROVIDER

_SCALAR_ROUTES: Dict[Tuple[CoordinateSystem, CoordinateSystem], Callable] = {
    (_G, _N): transform.global_to_national,
    (_N, _G): transform.national_to_global,
    (_N, _P): transform.national_to_provider,
    (_P, _N): transform.provider_to_national,
    (_G, _P): transform.global_to_provider,
    (_P, _G): transform.provider_to_global,
}

_ARRAY_ROUTES: Dict[Tuple[CoordinateSystem, CoordinateSystem], Callable] = {
    (_G, _N): vectorized.global_to_national_array,
    (_N, _G): vectorized.national_to_global_array,
    (_N, _P): vectorized.national_to_provider_array,
    (_P, _N): vectorized.provider_to_national_array,
    (_G, _P): vectorized.global_to_provider_array,
    (_P, _G): vectorized.provider_to_global_array,
}


def _log_route(source: CoordinateSystem, target: CoordinateSystem) -> None:
    LOGGER.debug('Converting coordinates from %s to %s', source.value, target.value)
    if target is CoordinateSystem.GLOBAL and source is not CoordinateSystem.GLOBAL:
        warn_once(
            'Conversion from the national to the global coordinate system is approximate inside '
            'the obfuscation region; a residual error of a few meters is expected there. Outside '
            'the region the two systems coincide. (this warning will not repeat)'
        )


@validate_call(config=dict(arbitrary_types_allowed=True))
def convert(
    coord: Union[Coordinate, Tuple[float, float]],
    source: CoordinateSystem,
    target: CoordinateSystem,
    precision: Optional[int] = None,
) -> Coordinate:
    """
    Convert a coordinate from one coordinate system to another.

    Args:
        coord:
            A Coordinate, or a (longitude, latitude) pair

        source:
            The CoordinateSystem (or its name) the coordinate is expressed in

        target:
            The CoordinateSystem (or its name) to convert to

        precision: (int) (Default None)
            If provided, round the result half-up to this many decimal places

    Raises:
        ValueError: if either coordinate system is not recognized

    Returns:
        Coordinate
    """
    longitude, latitude = coord
    if source is target:
        result = Coordinate(longitude, latitude)
    else:
        _log_route(source, target)
        result = _SCALAR_ROUTES[(source, target)](longitude, latitude)

    if precision is None:
        return result

    return Coordinate(
        round_half_up(result.longitude, precision),
        round_half_up(result.latitude, precision),
    )


@validate_call(config=dict(arbitrary_types_allowed=True))
def convert_array(
    longitudes: Any,
    latitudes: Any,
    source: CoordinateSystem,
    target: CoordinateSystem,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert arrays of coordinates from one coordinate system to another.

    Args:
        longitudes:
            An array-like of longitudes

        latitudes:
            An array-like of latitudes, broadcastable against longitudes

        source:
            The CoordinateSystem (or its name) the coordinates are expressed in

        target:
            The CoordinateSystem (or its name) to convert to

    Raises:
        ValueError: if either coordinate system is not recognized, or if the longitudes
            and latitudes cannot be broadcast together

    Returns:
        (longitudes, latitudes) as float ndarrays
    """
    if source is target:
        lons, lats = np.broadcast_arrays(
            np.asarray(longitudes, dtype=float),
            np.asarray(latitudes, dtype=float),
        )
        return lons.copy(), lats.copy()

    _log_route(source, target)
    return _ARRAY_ROUTES[(source, target)](longitudes, latitudes)

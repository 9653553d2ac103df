"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

from typing import Iterator, Optional, Tuple, Union

from chinacoords.region import is_inside_obfuscation_region
from chinacoords.utils.functions import round_half_up


class Coordinate:
    """
    Immutable representation of a coordinate (i.e., a lon/lat pair), in decimal degrees.

    Values are stored exactly as given; no wrapping or clamping is applied, and non-finite
    values are permitted. A Coordinate unpacks like a (longitude, latitude) tuple.
    """

    __slots__ = ('_longitude', '_latitude')

    def __init__(self, longitude: Union[float, int, str], latitude: Union[float, int, str]):
        object.__setattr__(self, '_longitude', float(longitude))
        object.__setattr__(self, '_latitude', float(latitude))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return self.longitude == other.longitude and self.latitude == other.latitude

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __reduce__(self):
        return self.__class__, (self.longitude, self.latitude)

    def __iter__(self) -> Iterator[float]:
        yield self.longitude
        yield self.latitude

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude})>'

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def is_inside_obfuscation_region(self) -> bool:
        """Whether the national obfuscation applies at this coordinate"""
        return is_inside_obfuscation_region(self.longitude, self.latitude)

    @classmethod
    def from_dms(cls, lon: Tuple[int, int, float, str], lat: Tuple[int, int, float, str]):
        """
        Creates a Coordinate from a Degree Minutes Seconds (lon, lat) pair.

        The quadrant value should consist of either 'E'/'W' (longitude) or 'N'/'S' (latitude)

        Args:
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            Coordinate
        """
        def to_decimal(dms: Tuple[int, int, float, str]) -> float:
            sign = -1 if dms[3].upper() in ('S', 'W') else 1
            return sign * (dms[0] + dms[1] / 60 + dms[2] / 3600)

        return cls(to_decimal(lon), to_decimal(lat))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the coordinate to a pair of (degrees, minutes, seconds, hemisphere) tuples,
        longitude first. Seconds are rounded to 5 decimal places.
        """
        def split(dd: float) -> Tuple[int, int, float]:
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*split(self.longitude), 'E' if self.longitude >= 0 else 'W'),
            (*split(self.latitude), 'N' if self.latitude >= 0 else 'S'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude

    def to_str(self, reverse: bool = False) -> Tuple[str, str]:
        """
        Converts the coordinate to a tuple of strings (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)
        """
        lon, lat = str(self.longitude), str(self.latitude)
        return (lat, lon) if reverse else (lon, lat)

    def convert(self, source, target, precision: Optional[int] = None) -> 'Coordinate':
        """
        Convert this coordinate from one coordinate system to another.

        Args:
            source:
                The CoordinateSystem (or its name) this coordinate is expressed in

            target:
                The CoordinateSystem (or its name) to convert to

            precision: (int) (Default None)
                If provided, round the result half-up to this many decimal places

        Returns:
            Coordinate
        """
        from chinacoords.conversion import convert  # pylint: disable=import-outside-toplevel
        return convert(self, source, target, precision=precision)

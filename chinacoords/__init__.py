from chinacoords._version import __version__  # noqa: F401
from chinacoords.utils.logging import LOGGER
from chinacoords.coordinates import Coordinate
from chinacoords.region import is_inside_obfuscation_region, is_outside_obfuscation_region
from chinacoords.transform import (
    global_to_national, global_to_provider, national_to_global,
    national_to_provider, provider_to_global, provider_to_national,
)
from chinacoords.conversion import CoordinateSystem, convert, convert_array

__all__ = [
    'Coordinate',
    'CoordinateSystem',
    'convert',
    'convert_array',
    'global_to_national',
    'global_to_provider',
    'is_inside_obfuscation_region',
    'is_outside_obfuscation_region',
    'national_to_global',
    'national_to_provider',
    'provider_to_global',
    'provider_to_national',
    'LOGGER',
]

import logging

import numpy as np
import pytest

from chinacoords import Coordinate, transform, vectorized
from chinacoords.conversion import *
from chinacoords.utils import logging as cc_logging

from tests.functions import assert_coordinates_equal


BEIJING = Coordinate(116.404, 39.915)


def test_coordinate_system_lookup():
    assert CoordinateSystem('global') is CoordinateSystem.GLOBAL
    assert CoordinateSystem('national') is CoordinateSystem.NATIONAL
    assert CoordinateSystem('provider') is CoordinateSystem.PROVIDER

    # Case-insensitive
    assert CoordinateSystem('GLOBAL') is CoordinateSystem.GLOBAL
    assert CoordinateSystem(' Provider ') is CoordinateSystem.PROVIDER

    # Aliases
    assert CoordinateSystem('wgs84') is CoordinateSystem.GLOBAL
    assert CoordinateSystem('WGS-84') is CoordinateSystem.GLOBAL
    assert CoordinateSystem('gcj02') is CoordinateSystem.NATIONAL
    assert CoordinateSystem('GCJ-02') is CoordinateSystem.NATIONAL
    assert CoordinateSystem('bd09') is CoordinateSystem.PROVIDER
    assert CoordinateSystem('BD-09') is CoordinateSystem.PROVIDER

    with pytest.raises(ValueError):
        CoordinateSystem('mercator')

    with pytest.raises(ValueError):
        CoordinateSystem(4326)


@pytest.mark.parametrize('source,target,fn', [
    ('global', 'national', transform.global_to_national),
    ('national', 'global', transform.national_to_global),
    ('national', 'provider', transform.national_to_provider),
    ('provider', 'national', transform.provider_to_national),
    ('global', 'provider', transform.global_to_provider),
    ('provider', 'global', transform.provider_to_global),
])
def test_convert_routes(source, target, fn):
    assert convert(BEIJING, source, target) == fn(*BEIJING)
    assert convert(BEIJING.to_float(), source, target) == fn(*BEIJING)
    assert convert(
        BEIJING, CoordinateSystem(source), CoordinateSystem(target)
    ) == fn(*BEIJING)


def test_convert_same_system():
    for system in CoordinateSystem:
        assert convert(BEIJING, system, system) == BEIJING

    assert convert((116.404, 39.915), 'wgs84', 'global') == BEIJING


def test_convert_aliases():
    assert convert(BEIJING, 'wgs84', 'bd09') == transform.global_to_provider(*BEIJING)
    assert convert(BEIJING, 'GCJ02', 'WGS84') == transform.national_to_global(*BEIJING)


def test_convert_precision():
    result = convert(BEIJING, 'global', 'national', precision=6)
    assert result == Coordinate(116.410244, 39.916404)

    result = convert(BEIJING, 'national', 'national', precision=1)
    assert result == Coordinate(116.4, 39.9)


def test_convert_unknown_system():
    with pytest.raises(ValueError):
        convert(BEIJING, 'mercator', 'global')

    with pytest.raises(ValueError):
        convert(BEIJING, 'global', 'epsg:3857')


def test_convert_array():
    lons = np.array([116.404, 139.6917])
    lats = np.array([39.915, 35.6895])

    result_lons, result_lats = convert_array(lons, lats, 'wgs84', 'bd09')
    expected_lons, expected_lats = vectorized.global_to_provider_array(lons, lats)
    assert np.array_equal(result_lons, expected_lons)
    assert np.array_equal(result_lats, expected_lats)

    result_lons, result_lats = convert_array(lons, lats, 'bd09', 'wgs84')
    expected_lons, expected_lats = vectorized.provider_to_global_array(lons, lats)
    assert np.array_equal(result_lons, expected_lons)
    assert np.array_equal(result_lats, expected_lats)


def test_convert_array_same_system():
    lons = np.array([116.404, 139.6917])
    lats = np.array([39.915, 35.6895])
    result_lons, result_lats = convert_array(lons, lats, 'national', 'gcj02')
    assert np.array_equal(result_lons, lons)
    assert np.array_equal(result_lats, lats)

    # Returns copies, not views of the input
    result_lons[0] = 0.
    assert lons[0] == 116.404


def test_convert_array_unknown_system():
    with pytest.raises(ValueError):
        convert_array([116.404], [39.915], 'global', 'utm')


def test_convert_warns_once_on_approximate_inverse(caplog, monkeypatch):
    monkeypatch.setattr(cc_logging, '_WARNED', set())

    convert(BEIJING, 'global', 'national')
    assert 'approximate' not in caplog.text

    convert(BEIJING, 'national', 'global')
    assert 'approximate' in caplog.text
    assert 'inside the obfuscation region' in caplog.text

    convert(BEIJING, 'provider', 'global')
    convert_array([116.404], [39.915], 'national', 'global')
    assert caplog.text.count('approximate') == 1


def test_convert_logs_route(caplog):
    caplog.set_level(logging.DEBUG, logger='chinacoords')
    convert(BEIJING, 'national', 'provider')
    assert 'Converting coordinates from national to provider' in caplog.text


def test_coordinate_convert():
    assert_coordinates_equal(
        BEIJING.convert('global', 'national'),
        Coordinate(116.4102444992, 39.9164042815),
    )
    assert BEIJING.convert('gcj02', 'bd09', precision=4) == Coordinate(116.4104, 39.9213)

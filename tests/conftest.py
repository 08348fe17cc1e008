"""Shared fixtures for sounding-validate tests."""

import pytest

from sounding_validate.sounding import Index, Profile, Sounding, StationInfo, Surface


def build_valid_sounding() -> Sounding:
    """Eight-level sounding that passes every check."""
    return (
        Sounding()
        .with_station_info(StationInfo("1", 45.0, -115.0, 1023.0))
        .with_lead_time(0)
        .with_profile(Profile.PRESSURE, [840.0, 800.0, 700.0, 500.0, 300.0, 250.0, 200.0, 100.0])
        .with_profile(Profile.TEMPERATURE, [20.0, 15.0, 2.0, -10.0, -20.0, -30.0, -50.0, -45.0])
        .with_profile(Profile.WET_BULB, [20.0, 14.0, 1.0, -11.0, -25.0, -39.0, -58.0, -60.0])
        .with_profile(Profile.DEW_POINT, [20.0, 13.0, 0.0, -12.0, -27.0, -45.0, -62.0, -80.0])
        .with_profile(Profile.WIND_DIRECTION, [0.0, 40.0, 80.0, 120.0, 160.0, 200.0, 240.0, 280.0])
        .with_profile(Profile.WIND_SPEED, [5.0, 10.0, 15.0, 12.0, 27.0, 45.0, 62.0, 80.0])
        .with_profile(
            Profile.GEOPOTENTIAL_HEIGHT,
            [1050.0, 2000.0, 3000.0, 4000.0, 5000.0, 6500.0, 7000.0, 8000.0],
        )
        .with_profile(Profile.CLOUD_FRACTION, [100.0, 85.0, 70.0, 50.0, 30.0, 25.0, 20.0, 10.0])
        .with_surface_value(Surface.MSLP, 1014.0)
        .with_surface_value(Surface.STATION_PRESSURE, 847.0)
        .with_surface_value(Surface.WIND_SPEED, 0.0)
        .with_surface_value(Surface.WIND_DIRECTION, 0.0)
        .with_index(Index.CAPE, 850.0)
        .with_index(Index.CIN, -35.0)
        .with_index(Index.PWAT, 22.0)
    )


@pytest.fixture
def valid_sounding():
    return build_valid_sounding()

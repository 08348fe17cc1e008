"""
Sounding consistency checks.

Runs a fixed battery of independent checks over a sounding and collects
every violation into one ``ValidationErrors`` collection:

1. Pressure profile present
2. Every other non-empty profile as long as the pressure profile
3. Pressure decreasing with height, starting from station pressure
4. Height increasing with level, starting from station elevation
5. Temperature >= wet bulb >= dew point at each level
6. Wind speed, cloud fraction, surface pressures non-negative
7. Wind direction within [0, 360] degrees
8. CAPE and PWAT non-negative, CIN non-positive

Absent samples are skipped. Comparisons are plain float comparisons with no
tolerance, so a value exactly on a boundary passes.
"""

import logging
from typing import Sequence

import numpy as np

from sounding_validate.errors import (
    InvalidNegativeValue,
    InvalidPositiveValue,
    InvalidVectorLength,
    InvalidWindDirection,
    NoPressureProfile,
    PressureNotDecreasingWithHeight,
    TemperatureLessThanDewPoint,
    TemperatureLessThanWetBulb,
    ValidationErrors,
    WetBulbLessThanDewPoint,
)
from sounding_validate.sounding import Index, Profile, Sounding, Surface
from sounding_validate.units import unpack

logger = logging.getLogger(__name__)

# Profiles checked against the pressure profile length, with report names
LENGTH_CHECKED_PROFILES = [
    (Profile.TEMPERATURE, "Temperature"),
    (Profile.WET_BULB, "Wet bulb temperature"),
    (Profile.DEW_POINT, "Dew point"),
    (Profile.THETA_E, "Theta-e"),
    (Profile.WIND_DIRECTION, "Wind direction"),
    (Profile.WIND_SPEED, "Wind speed"),
    (Profile.PRESSURE_VERTICAL_VELOCITY, "Omega (pressure vertical velocity)"),
    (Profile.GEOPOTENTIAL_HEIGHT, "Height"),
    (Profile.CLOUD_FRACTION, "Cloud fraction"),
]

MAX_WIND_DIRECTION = 360.0


def validate(snd: Sounding, check_indices: bool = True) -> None:
    """
    Validate a sounding with simple physical consistency checks.

    Parameters
    ----------
    snd : Sounding
        Sounding to check; never modified
    check_indices : bool
        Also check the signs of CAPE, CIN and PWAT

    Raises
    ------
    ValidationErrors
        Holding every failed check, in check order
    """
    collect_errors(snd, check_indices=check_indices).check_any()


def collect_errors(snd: Sounding, check_indices: bool = True) -> ValidationErrors:
    """
    Run every check and return the (possibly empty) error collection.

    Parameters
    ----------
    snd : Sounding
        Sounding to check
    check_indices : bool
        Also check the signs of CAPE, CIN and PWAT

    Returns
    -------
    errors : ValidationErrors
        Every failed check, in check order
    """
    errors = ValidationErrors()

    pressure = snd.pressure_profile()
    check_pressure_exists(pressure, errors)

    n_levels = len(pressure)
    for profile, name in LENGTH_CHECKED_PROFILES:
        check_vector_len(snd.profile(profile), n_levels, name, errors)

    check_vertical_pressure(snd, errors)
    check_vertical_height(snd, errors)
    check_temp_wet_bulb_dew_point(snd, errors)
    check_non_negative(snd, errors)
    check_wind_direction(snd, errors)
    if check_indices:
        check_indices_sign(snd, errors)

    if errors.is_empty():
        logger.debug(f"Sounding with {n_levels} levels passed validation")
    else:
        logger.info(f"Sounding with {n_levels} levels failed {len(errors)} check(s)")

    return errors


# =============================================================================
# Helpers
# =============================================================================

def _as_array(samples: Sequence) -> np.ndarray:
    """Float array of ``samples`` with NaN at absent levels."""
    return np.array(
        [np.nan if s is None else unpack(s) for s in samples],
        dtype=float,
    )


def _present(samples: Sequence) -> np.ndarray:
    """Float array of the present samples only, in level order."""
    values = _as_array(samples)
    return values[~np.isnan(values)]


def _paired(a: Sequence, b: Sequence):
    """Level-aligned arrays of two profiles, cut to the shorter one."""
    n = min(len(a), len(b))
    return _as_array(a[:n]), _as_array(b[:n])


# =============================================================================
# Checks
# =============================================================================

def check_pressure_exists(pressure: Sequence, errors: ValidationErrors) -> None:
    if len(pressure) == 0:
        errors.push(NoPressureProfile())


def check_vector_len(
    samples: Sequence,
    expected: int,
    name: str,
    errors: ValidationErrors,
) -> None:
    """Empty profiles are optional and always pass."""
    if len(samples) != 0 and len(samples) != expected:
        errors.push(InvalidVectorLength(name, len(samples), expected))


def _check_ordering(
    levels: np.ndarray,
    baseline: float,
    increasing: bool,
    profile: str,
    errors: ValidationErrors,
) -> None:
    """One error per level that breaks the ordering against the level below."""
    if levels.size == 0:
        return

    below = np.concatenate(([baseline], levels[:-1]))
    if increasing:
        bad = levels < below
    else:
        bad = levels > below

    for lower, upper in zip(below[bad], levels[bad]):
        errors.push(PressureNotDecreasingWithHeight(profile, float(lower), float(upper)))


def check_vertical_pressure(snd: Sounding, errors: ValidationErrors) -> None:
    """Pressure must not increase with height, starting at station pressure."""
    station_pressure = snd.station_pressure()
    baseline = np.inf if station_pressure is None else unpack(station_pressure)
    _check_ordering(
        _present(snd.pressure_profile()), baseline, False, "Pressure", errors
    )


def check_vertical_height(snd: Sounding, errors: ValidationErrors) -> None:
    """Height must not decrease with level, starting at station elevation."""
    # TODO: heights are compared to elevation as if both were above sea level;
    # AGL height profiles need the elevation subtracted first.
    elevation = snd.station_info().elevation
    baseline = -np.inf if elevation is None else unpack(elevation)
    _check_ordering(
        _present(snd.height_profile()), baseline, True, "Height", errors
    )


def check_temp_wet_bulb_dew_point(snd: Sounding, errors: ValidationErrors) -> None:
    """Check that dew point <= wet bulb <= temperature at every level."""
    temperature = snd.temperature_profile()
    wet_bulb = snd.wet_bulb_profile()
    dew_point = snd.dew_point_profile()

    # NaN compares False, so levels missing either value are skipped
    t, wb = _paired(temperature, wet_bulb)
    for i in np.flatnonzero(t < wb):
        errors.push(TemperatureLessThanWetBulb(float(t[i]), float(wb[i])))

    t, dp = _paired(temperature, dew_point)
    for i in np.flatnonzero(t < dp):
        errors.push(TemperatureLessThanDewPoint(float(t[i]), float(dp[i])))

    wb, dp = _paired(wet_bulb, dew_point)
    for i in np.flatnonzero(wb < dp):
        errors.push(WetBulbLessThanDewPoint(float(wb[i]), float(dp[i])))


def _check_profile_non_negative(
    samples: Sequence, name: str, errors: ValidationErrors
) -> None:
    values = _as_array(samples)
    for value in values[values < 0.0]:
        errors.push(InvalidNegativeValue(name, float(value)))


def _check_scalar_non_negative(value, name: str, errors: ValidationErrors) -> None:
    if value is not None and unpack(value) < 0.0:
        errors.push(InvalidNegativeValue(name, unpack(value)))


def check_non_negative(snd: Sounding, errors: ValidationErrors) -> None:
    """Wind speed, cloud fraction and surface pressures must be >= 0."""
    _check_profile_non_negative(snd.wind_speed_profile(), "Wind speed", errors)
    _check_profile_non_negative(snd.cloud_fraction_profile(), "Cloud fraction", errors)

    for surface, name in [
        (Surface.LOW_CLOUD, "Low cloud"),
        (Surface.MID_CLOUD, "Mid cloud"),
        (Surface.HIGH_CLOUD, "High cloud"),
        (Surface.WIND_SPEED, "Surface wind speed"),
        (Surface.MSLP, "MSLP"),
        (Surface.STATION_PRESSURE, "Station pressure"),
    ]:
        _check_scalar_non_negative(snd.surface_value(surface), name, errors)


def check_wind_direction(snd: Sounding, errors: ValidationErrors) -> None:
    """Wind directions must lie in [0, 360] degrees inclusive."""
    # Profile levels first, surface value last
    directions = _as_array(
        snd.wind_direction_profile() + (snd.surface_value(Surface.WIND_DIRECTION),)
    )
    bad = (directions < 0.0) | (directions > MAX_WIND_DIRECTION)
    for value in directions[bad]:
        errors.push(InvalidWindDirection(float(value)))


def check_indices_sign(snd: Sounding, errors: ValidationErrors) -> None:
    """CAPE and PWAT must be >= 0, CIN must be <= 0."""
    _check_scalar_non_negative(snd.index(Index.CAPE), "CAPE", errors)
    _check_scalar_non_negative(snd.index(Index.PWAT), "PWAT", errors)

    cin = snd.index(Index.CIN)
    if cin is not None and cin > 0.0:
        errors.push(InvalidPositiveValue("CIN", float(cin)))

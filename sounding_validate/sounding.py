"""
Read-only sounding snapshot.

A sounding is a set of named profiles (one optional sample per vertical
level, ordered from the lowest level to the highest) plus surface values,
derived indices and station metadata. Snapshots are built fluently and
never mutated; every ``with_*`` call returns a new snapshot.

Example
-------
>>> from sounding_validate.sounding import Sounding, Profile, Surface
>>> snd = (
...     Sounding()
...     .with_profile(Profile.PRESSURE, [850.0, 700.0, 500.0])
...     .with_profile(Profile.TEMPERATURE, [12.0, None, -15.0])
...     .with_surface_value(Surface.STATION_PRESSURE, 860.0)
... )
>>> snd.n_levels
3
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from sounding_validate.units import (
    Celsius,
    HectoPascal,
    Kelvin,
    Knots,
    Meters,
    PaPS,
    coerce,
)


class Profile(Enum):
    """Vertical profiles a sounding may carry."""

    PRESSURE = "pressure"
    TEMPERATURE = "temperature"
    WET_BULB = "wet_bulb"
    DEW_POINT = "dew_point"
    THETA_E = "theta_e"
    WIND_DIRECTION = "wind_direction"
    WIND_SPEED = "wind_speed"
    PRESSURE_VERTICAL_VELOCITY = "omega"
    GEOPOTENTIAL_HEIGHT = "height"
    CLOUD_FRACTION = "cloud_fraction"


class Surface(Enum):
    """Scalar values observed at the surface station."""

    MSLP = "mslp"
    STATION_PRESSURE = "station_pressure"
    WIND_SPEED = "wind_speed"
    WIND_DIRECTION = "wind_direction"
    LOW_CLOUD = "low_cloud"
    MID_CLOUD = "mid_cloud"
    HIGH_CLOUD = "high_cloud"


class Index(Enum):
    """Derived stability and moisture indices."""

    CAPE = "cape"
    CIN = "cin"
    PWAT = "pwat"


# Unit of each variable; None means a plain float
PROFILE_UNITS = {
    Profile.PRESSURE: HectoPascal,
    Profile.TEMPERATURE: Celsius,
    Profile.WET_BULB: Celsius,
    Profile.DEW_POINT: Celsius,
    Profile.THETA_E: Kelvin,
    Profile.WIND_DIRECTION: None,  # degrees
    Profile.WIND_SPEED: Knots,
    Profile.PRESSURE_VERTICAL_VELOCITY: PaPS,
    Profile.GEOPOTENTIAL_HEIGHT: Meters,
    Profile.CLOUD_FRACTION: None,  # percent
}

SURFACE_UNITS = {
    Surface.MSLP: HectoPascal,
    Surface.STATION_PRESSURE: HectoPascal,
    Surface.WIND_SPEED: Knots,
    Surface.WIND_DIRECTION: None,
    Surface.LOW_CLOUD: None,
    Surface.MID_CLOUD: None,
    Surface.HIGH_CLOUD: None,
}


@dataclass(frozen=True)
class StationInfo:
    """Station metadata.

    Attributes:
        station_id: WMO or local station identifier
        latitude: Latitude [degrees north]
        longitude: Longitude [degrees east]
        elevation: Station elevation, used as the height baseline
    """
    station_id: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    elevation: Optional[Meters] = None

    def __post_init__(self):
        object.__setattr__(self, "elevation", coerce(self.elevation, Meters))


def _freeze(mapping: Dict) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Sounding:
    """
    Immutable atmospheric sounding.

    Attributes
    ----------
    station : StationInfo
        Station metadata
    valid_time : datetime, optional
        Valid time of the observation or forecast
    lead_time : int, optional
        Forecast lead time in hours (0 for analyses and observations)
    """
    station: StationInfo = field(default_factory=StationInfo)
    valid_time: Optional[datetime] = None
    lead_time: Optional[int] = None
    _profiles: Mapping = field(default_factory=lambda: _freeze({}), repr=False)
    _surface: Mapping = field(default_factory=lambda: _freeze({}), repr=False)
    _indices: Mapping = field(default_factory=lambda: _freeze({}), repr=False)

    def __hash__(self):
        # frozensets so the hash agrees with mapping equality
        return hash((
            self.station,
            self.valid_time,
            self.lead_time,
            frozenset(self._profiles.items()),
            frozenset(self._surface.items()),
            frozenset(self._indices.items()),
        ))

    # -------------------------------------------------------------------------
    # Builder
    # -------------------------------------------------------------------------

    def with_profile(self, profile: Profile, values: Iterable) -> "Sounding":
        """Return a copy with ``profile`` replaced by ``values``.

        Args:
            profile: Profile to set
            values: Samples from the lowest level upward; None marks a
                level without a measurement

        Returns:
            New Sounding
        """
        unit = PROFILE_UNITS[profile]
        samples = tuple(coerce(v, unit) for v in values)
        profiles = dict(self._profiles)
        profiles[profile] = samples
        return replace(self, _profiles=_freeze(profiles))

    def with_surface_value(self, surface: Surface, value) -> "Sounding":
        """Return a copy with a surface value set (None clears it)."""
        surface_values = dict(self._surface)
        surface_values[surface] = coerce(value, SURFACE_UNITS[surface])
        return replace(self, _surface=_freeze(surface_values))

    def with_index(self, index: Index, value) -> "Sounding":
        """Return a copy with a derived index set (None clears it)."""
        indices = dict(self._indices)
        indices[index] = coerce(value, None)
        return replace(self, _indices=_freeze(indices))

    def with_station_info(self, station: StationInfo) -> "Sounding":
        return replace(self, station=station)

    def with_valid_time(self, valid_time: Optional[datetime]) -> "Sounding":
        return replace(self, valid_time=valid_time)

    def with_lead_time(self, lead_time: Optional[int]) -> "Sounding":
        return replace(self, lead_time=lead_time)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def profile(self, profile: Profile) -> Tuple:
        """Samples of ``profile``, or an empty tuple if it was never set."""
        return self._profiles.get(profile, ())

    def surface_value(self, surface: Surface):
        return self._surface.get(surface)

    def index(self, index: Index) -> Optional[float]:
        return self._indices.get(index)

    def station_info(self) -> StationInfo:
        return self.station

    @property
    def n_levels(self) -> int:
        """Number of levels in the pressure profile."""
        return len(self.profile(Profile.PRESSURE))

    def pressure_profile(self) -> Tuple[Optional[HectoPascal], ...]:
        return self.profile(Profile.PRESSURE)

    def temperature_profile(self) -> Tuple[Optional[Celsius], ...]:
        return self.profile(Profile.TEMPERATURE)

    def wet_bulb_profile(self) -> Tuple[Optional[Celsius], ...]:
        return self.profile(Profile.WET_BULB)

    def dew_point_profile(self) -> Tuple[Optional[Celsius], ...]:
        return self.profile(Profile.DEW_POINT)

    def theta_e_profile(self) -> Tuple[Optional[Kelvin], ...]:
        return self.profile(Profile.THETA_E)

    def wind_direction_profile(self) -> Tuple[Optional[float], ...]:
        return self.profile(Profile.WIND_DIRECTION)

    def wind_speed_profile(self) -> Tuple[Optional[Knots], ...]:
        return self.profile(Profile.WIND_SPEED)

    def pvv_profile(self) -> Tuple[Optional[PaPS], ...]:
        return self.profile(Profile.PRESSURE_VERTICAL_VELOCITY)

    def height_profile(self) -> Tuple[Optional[Meters], ...]:
        return self.profile(Profile.GEOPOTENTIAL_HEIGHT)

    def cloud_fraction_profile(self) -> Tuple[Optional[float], ...]:
        return self.profile(Profile.CLOUD_FRACTION)

    def station_pressure(self) -> Optional[HectoPascal]:
        return self.surface_value(Surface.STATION_PRESSURE)

    def mslp(self) -> Optional[HectoPascal]:
        return self.surface_value(Surface.MSLP)

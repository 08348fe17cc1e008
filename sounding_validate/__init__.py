"""
sounding-validate: physical consistency checks for atmospheric soundings.

A sounding is a vertical profile of pressure, temperature, humidity proxies,
wind, height and cloud fraction plus surface values and derived indices.
This library confirms that a populated sounding is self-consistent, reporting
every violation found in a single pass.

Modules
-------
units
    Unit-tagged quantities (hPa, C, K, kt, Pa/s, m)
sounding
    Read-only sounding snapshot with fluent construction
errors
    Validation error records and the multi-error collection
validate
    The consistency check battery
report
    Per-sounding reports and multi-sounding summaries
loader
    Loading soundings from JSON, YAML and CSV
config
    YAML/JSON configuration for the command-line tool
"""

__version__ = "0.1.0"
__author__ = "sounding-validate Contributors"

from sounding_validate.errors import (
    ValidationError,
    ValidationErrors,
    NoPressureProfile,
    InvalidVectorLength,
    PressureNotDecreasingWithHeight,
    TemperatureLessThanWetBulb,
    TemperatureLessThanDewPoint,
    WetBulbLessThanDewPoint,
    InvalidNegativeValue,
    InvalidPositiveValue,
    InvalidWindDirection,
)
from sounding_validate.sounding import (
    Sounding,
    StationInfo,
    Profile,
    Surface,
    Index,
)
from sounding_validate.validate import validate, collect_errors

__all__ = [
    "__version__",
    # Snapshot
    "Sounding",
    "StationInfo",
    "Profile",
    "Surface",
    "Index",
    # Validation
    "validate",
    "collect_errors",
    # Errors
    "ValidationError",
    "ValidationErrors",
    "NoPressureProfile",
    "InvalidVectorLength",
    "PressureNotDecreasingWithHeight",
    "TemperatureLessThanWetBulb",
    "TemperatureLessThanDewPoint",
    "WetBulbLessThanDewPoint",
    "InvalidNegativeValue",
    "InvalidPositiveValue",
    "InvalidWindDirection",
]

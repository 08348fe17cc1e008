#!/usr/bin/env python3
"""
Example: Validating a Sounding
==============================

Builds a consistent sounding, validates it, then breaks it by moving the
station pressure below the lowest pressure level and validates again.

Usage:
    python validate_sounding.py
"""

import sys
from pathlib import Path

# Add parent to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from sounding_validate import (
    Profile,
    Sounding,
    StationInfo,
    Surface,
    ValidationErrors,
    validate,
)


def create_valid_sounding() -> Sounding:
    return (
        Sounding()
        .with_station_info(StationInfo("1", 45.0, -115.0, 1023.0))
        .with_lead_time(0)
        .with_profile(Profile.PRESSURE, [840, 800, 700, 500, 300, 250, 200, 100])
        .with_profile(Profile.TEMPERATURE, [20, 15, 2, -10, -20, -30, -50, -45])
        .with_profile(Profile.WET_BULB, [20, 14, 1, -11, -25, -39, -58, -60])
        .with_profile(Profile.DEW_POINT, [20, 13, 0, -12, -27, -45, -62, -80])
        .with_profile(Profile.WIND_DIRECTION, [0, 40, 80, 120, 160, 200, 240, 280])
        .with_profile(Profile.WIND_SPEED, [5, 10, 15, 12, 27, 45, 62, 80])
        .with_profile(
            Profile.GEOPOTENTIAL_HEIGHT,
            [1050, 2000, 3000, 4000, 5000, 6500, 7000, 8000],
        )
        .with_profile(Profile.CLOUD_FRACTION, [100, 85, 70, 50, 30, 25, 20, 10])
        .with_surface_value(Surface.MSLP, 1014.0)
        .with_surface_value(Surface.STATION_PRESSURE, 847.0)
        .with_surface_value(Surface.WIND_SPEED, 0.0)
        .with_surface_value(Surface.WIND_DIRECTION, 0.0)
    )


def report(label: str, snd: Sounding) -> None:
    try:
        validate(snd)
    except ValidationErrors as errs:
        print(f"{label}: {len(errs)} error(s)")
        print(errs)
    else:
        print(f"{label}: Validated!")


def main():
    snd = create_valid_sounding()
    report("Valid sounding", snd)

    broken = snd.with_surface_value(Surface.STATION_PRESSURE, 830.0)
    report("Station pressure below lowest level", broken)


if __name__ == "__main__":
    main()

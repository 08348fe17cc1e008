"""
Sounding file loading.

Reads soundings from JSON or YAML documents, or profile-only soundings from
CSV. Levels keep file order; nothing is sorted, filled or interpolated.

Document format (JSON shown, YAML is the same structure):
    {
        "station": {"station_id": "OUN", "latitude": 35.2,
                    "longitude": -97.5, "elevation": 357.0},
        "valid_time": "2024-06-12T00:00:00",
        "lead_time": 0,
        "profiles": {"pressure": [970.0, 850.0, 700.0],
                     "temperature": [28.0, 19.5, null]},
        "surface": {"station_pressure": 972.0, "mslp": 1011.0},
        "indices": {"cape": 2300.0, "cin": -45.0}
    }

CSV format (one column per profile, one row per level, empty = missing):
    pressure,temperature,dew_point
    970.0,28.0,21.0
    850.0,19.5,
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from sounding_validate.sounding import (
    Index,
    Profile,
    Sounding,
    StationInfo,
    Surface,
)

logger = logging.getLogger(__name__)


def _lookup(enum_cls, key: str, section: str):
    try:
        return enum_cls(key)
    except ValueError:
        valid = [member.value for member in enum_cls]
        raise ValueError(
            f"Unknown {section} key: {key}. Available keys: {valid}"
        ) from None


def _parse_time(value) -> Union[datetime, None]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(
            f"Section '{name}' must be a mapping, got {type(section).__name__}"
        )
    return section


def sounding_from_dict(data: Dict[str, Any]) -> Sounding:
    """Build a Sounding from a parsed JSON/YAML document.

    Args:
        data: Document with optional station, valid_time, lead_time,
            profiles, surface and indices sections

    Returns:
        Sounding

    Raises:
        ValueError: If the document or a section is not a mapping, a
            section contains an unknown key, or a sample is not a number
    """
    if not isinstance(data, dict):
        raise ValueError(
            f"Sounding document must be a mapping, got {type(data).__name__}"
        )

    station_dict = _section(data, "station")
    profiles = _section(data, "profiles")
    surface = _section(data, "surface")
    indices = _section(data, "indices")

    try:
        station = StationInfo(
            station_id=station_dict.get("station_id"),
            latitude=station_dict.get("latitude"),
            longitude=station_dict.get("longitude"),
            elevation=station_dict.get("elevation"),
        )

        snd = (
            Sounding()
            .with_station_info(station)
            .with_valid_time(_parse_time(data.get("valid_time")))
            .with_lead_time(data.get("lead_time"))
        )

        for key, values in profiles.items():
            profile = _lookup(Profile, key, "profile")
            if not isinstance(values, (list, tuple, type(None))):
                raise ValueError(
                    f"Profile '{key}' must be a list, got {type(values).__name__}"
                )
            snd = snd.with_profile(profile, values or [])

        for key, value in surface.items():
            snd = snd.with_surface_value(_lookup(Surface, key, "surface"), value)

        for key, value in indices.items():
            snd = snd.with_index(_lookup(Index, key, "index"), value)
    except TypeError as e:
        raise ValueError(f"Invalid sounding value: {e}") from e

    return snd


def load_csv_profiles(csv_path: Union[str, Path]) -> Sounding:
    """Load a profile-only sounding from CSV.

    Args:
        csv_path: Path to CSV file with one column per profile key

    Returns:
        Sounding with the CSV columns as profiles
    """
    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(f"Sounding file not found: {csv_path}")

    columns: Dict[Profile, list] = {}
    with open(path, 'r', newline='') as f:
        reader = csv.DictReader(f)
        profiles = [
            _lookup(Profile, name.strip(), "profile")
            for name in (reader.fieldnames or [])
        ]
        for profile in profiles:
            columns[profile] = []
        for row in reader:
            for name, profile in zip(reader.fieldnames, profiles):
                cell = (row.get(name) or "").strip()
                columns[profile].append(float(cell) if cell else None)

    snd = Sounding()
    for profile, values in columns.items():
        snd = snd.with_profile(profile, values)
    return snd


def load_sounding(path: Union[str, Path]) -> Sounding:
    """
    Load a sounding from a JSON, YAML or CSV file.

    Parameters
    ----------
    path : str or Path
        Path to sounding file (.json, .yaml, .yml or .csv)

    Returns
    -------
    snd : Sounding
        Loaded sounding

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist
    ValueError
        If the file format is not supported, the file cannot be parsed
        or its content is not a valid sounding document
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Sounding file not found: {path}")

    suffix = path.suffix.lower()
    logger.info(f"Loading sounding from {path}")

    if suffix in ('.yaml', '.yml'):
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Could not parse {path}: {e}") from e
    elif suffix == '.json':
        with open(path) as f:
            data = json.load(f)
    elif suffix == '.csv':
        return load_csv_profiles(path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Use .json, .yaml, .yml or .csv")

    snd = sounding_from_dict(data or {})
    logger.debug(f"Loaded {snd.n_levels} levels from {path.name}")
    return snd

"""
Configuration file support for sounding-validate.

Provides YAML and JSON configuration loading and validation for the
command-line validator.

Usage
-----
>>> from sounding_validate.config import load_config
>>> config = load_config("validate.yaml")
>>> print(config.output.format)

Example YAML:
    checks:
      derived_indices: true
    output:
      format: json
      output_path: report.json
    logging:
      level: DEBUG
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class CheckConfig:
    """Which optional checks run.

    Attributes:
        derived_indices: Check signs of CAPE, CIN and PWAT
    """
    derived_indices: bool = True


@dataclass
class OutputConfig:
    """Report output settings.

    Attributes:
        format: Console format (text, json)
        output_path: Optional path for a JSON report file
    """
    format: str = "text"
    output_path: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class ValidatorConfig:
    """Complete validator configuration."""

    checks: CheckConfig = field(default_factory=CheckConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ValidatorConfig":
        """Create ValidatorConfig from a dictionary.

        Args:
            config_dict: Configuration dictionary; missing keys use defaults

        Returns:
            ValidatorConfig instance
        """
        checks_dict = config_dict.get("checks", {}) or {}
        checks = CheckConfig(
            derived_indices=checks_dict.get("derived_indices", True),
        )

        out_dict = config_dict.get("output", {}) or {}
        output = OutputConfig(
            format=out_dict.get("format", "text"),
            output_path=out_dict.get("output_path"),
        )

        log_dict = config_dict.get("logging", {}) or {}
        logging_config = LoggingConfig(
            level=str(log_dict.get("level", "INFO")).upper(),
            format=log_dict.get("format", DEFAULT_LOG_FORMAT),
        )

        return cls(checks=checks, output=output, logging=logging_config)

    @classmethod
    def from_json(cls, json_path: Union[str, Path]) -> "ValidatorConfig":
        with open(json_path, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict or {})

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "ValidatorConfig":
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f)
        return cls.from_dict(config_dict or {})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self) -> List[str]:
        """Validate configuration parameters.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.output.format not in OUTPUT_FORMATS:
            errors.append(
                f"Invalid output format: {self.output.format}. "
                f"Use one of {list(OUTPUT_FORMATS)}"
            )

        if self.logging.level not in LOG_LEVELS:
            errors.append(f"Invalid logging level: {self.logging.level}")

        if not isinstance(self.checks.derived_indices, bool):
            errors.append("checks.derived_indices must be true or false")

        return errors

    @property
    def log_level(self) -> int:
        return getattr(logging, self.logging.level, logging.INFO)


def load_config(path: Union[str, Path]) -> ValidatorConfig:
    """
    Load validator configuration from YAML or JSON file.

    Parameters
    ----------
    path : str or Path
        Path to configuration file (.yaml, .yml, or .json)

    Returns
    -------
    config : ValidatorConfig
        Loaded configuration

    Raises
    ------
    FileNotFoundError
        If configuration file doesn't exist
    ValueError
        If file format is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in ('.yaml', '.yml'):
        return ValidatorConfig.from_yaml(path)
    if suffix == '.json':
        return ValidatorConfig.from_json(path)
    raise ValueError(f"Unsupported file format: {suffix}. Use .yaml, .yml, or .json")

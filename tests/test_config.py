"""Tests for validator configuration."""

import json
import logging

import pytest

from sounding_validate.config import ValidatorConfig, load_config


class TestValidatorConfig:
    """Tests for ValidatorConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = ValidatorConfig()
        assert config.checks.derived_indices is True
        assert config.output.format == "text"
        assert config.output.output_path is None
        assert config.log_level == logging.INFO
        assert config.validate() == []

    def test_from_dict(self):
        """Test building configuration from a dictionary."""
        config = ValidatorConfig.from_dict({
            "checks": {"derived_indices": False},
            "output": {"format": "json", "output_path": "report.json"},
            "logging": {"level": "debug"},
        })
        assert config.checks.derived_indices is False
        assert config.output.format == "json"
        assert config.output.output_path == "report.json"
        assert config.log_level == logging.DEBUG

    def test_validate_reports_issues(self):
        """Test that invalid settings are reported."""
        config = ValidatorConfig.from_dict({
            "output": {"format": "xml"},
            "logging": {"level": "LOUD"},
        })
        issues = config.validate()
        assert len(issues) == 2
        assert "output format" in issues[0]

    def test_to_dict_round_trip(self):
        """Test to_dict and from_dict agree."""
        config = ValidatorConfig.from_dict({"output": {"format": "json"}})
        assert ValidatorConfig.from_dict(config.to_dict()) == config


class TestLoadConfig:
    """Tests for configuration file loading."""

    def test_yaml(self, tmp_path):
        """Test loading YAML configuration."""
        path = tmp_path / "validate.yaml"
        ValidatorConfig.from_dict({"output": {"format": "json"}}).to_yaml(path)

        config = load_config(path)
        assert config.output.format == "json"

    def test_json(self, tmp_path):
        """Test loading JSON configuration."""
        path = tmp_path / "validate.json"
        path.write_text(json.dumps({"checks": {"derived_indices": False}}))

        config = load_config(str(path))
        assert config.checks.derived_indices is False

    def test_empty_yaml_uses_defaults(self, tmp_path):
        """Test that an empty YAML file gives defaults."""
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_config(path) == ValidatorConfig()

    def test_missing_file(self, tmp_path):
        """Test missing file handling."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path):
        """Test that unknown extensions are rejected."""
        path = tmp_path / "validate.ini"
        path.write_text("[checks]\n")
        with pytest.raises(ValueError):
            load_config(path)

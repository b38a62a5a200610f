"""
Unit tests for the configuration system.

Tests loading JSON and YAML configuration files, environment variable
overrides, fallback to defaults and saving.
"""

import json
import logging

import pytest
import yaml

from namescope import ProfileError
from namescope.utils.config import (
    LoggingConfig,
    NamescopeConfig,
    NamingConfig,
    get_config,
    load_config,
    set_config,
)


class TestConfigLoading:
    """Test reading configuration files."""

    def test_missing_file_uses_defaults(self, tmp_path):
        config = NamescopeConfig(str(tmp_path / "absent.json"))

        assert config.naming == NamingConfig()
        assert config.logging == LoggingConfig()
        assert config.naming.profile == "go"
        assert config.naming.kernel_name == "kernel"

    def test_json_file(self, tmp_path):
        config_file = tmp_path / "namescope_config.json"
        config_file.write_text(json.dumps({
            "naming": {"profile": "choreo", "extra_reserved": ["tile"], "kernel_name": "fused"},
            "logging": {"level": "DEBUG"},
        }))

        config = NamescopeConfig(str(config_file))

        assert config.naming.profile == "choreo"
        assert config.naming.extra_reserved == ["tile"]
        assert config.naming.kernel_name == "fused"
        assert config.logging.level == "DEBUG"
        assert config.logging.enable_file_logging is False

    def test_yaml_file(self, tmp_path):
        config_file = tmp_path / "namescope_config.yaml"
        config_file.write_text(
            "naming:\n"
            "  profile: python\n"
            "  extra_reserved:\n"
            "    - self\n"
            "logging:\n"
            "  level: WARNING\n"
        )

        config = NamescopeConfig(str(config_file))

        assert config.naming.profile == "python"
        assert config.naming.extra_reserved == ["self"]
        assert config.logging.level == "WARNING"

    def test_config_file_from_environment(self, tmp_path, monkeypatch):
        config_file = tmp_path / "custom.json"
        config_file.write_text('{"naming": {"kernel_name": "k"}}')
        monkeypatch.setenv("NAMESCOPE_CONFIG", str(config_file))

        config = NamescopeConfig()

        assert config.config_file == config_file
        assert config.naming.kernel_name == "k"

    def test_malformed_json_uses_defaults(self, tmp_path):
        config_file = tmp_path / "broken.json"
        config_file.write_text("{not json")

        config = NamescopeConfig(str(config_file))

        assert config.naming == NamingConfig()

    def test_malformed_yaml_uses_defaults(self, tmp_path):
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("naming: [unclosed\n")

        config = NamescopeConfig(str(config_file))

        assert config.naming == NamingConfig()

    def test_non_mapping_uses_defaults(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- go\n- python\n")

        config = NamescopeConfig(str(config_file))

        assert config.naming == NamingConfig()


class TestEnvironmentOverrides:
    """Test environment variable overrides."""

    def test_profile_override(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"naming": {"profile": "choreo"}}')
        monkeypatch.setenv("NAMESCOPE_PROFILE", "python")

        config = NamescopeConfig(str(config_file))

        assert config.naming.profile == "python"

    def test_log_level_override(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"logging": {"level": "ERROR"}}')
        monkeypatch.setenv("NAMESCOPE_LOG_LEVEL", "DEBUG")

        config = NamescopeConfig(str(config_file))

        assert config.logging.level == "DEBUG"


class TestConfigProfile:
    """Test resolving the configured language profile."""

    def test_profile_with_extra_reserved(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"naming": {"profile": "go", "extra_reserved": ["ctx"]}}')

        profile = NamescopeConfig(str(config_file)).profile()

        assert profile.name == "go"
        assert profile.is_reserved("ctx")
        assert profile.is_reserved("func")

    def test_unknown_profile(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"naming": {"profile": "cobol"}}')

        with pytest.raises(ProfileError):
            NamescopeConfig(str(config_file)).profile()

    def test_apply_logging(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"logging": {"level": "WARNING"}}')

        try:
            NamescopeConfig(str(config_file)).apply_logging()
            assert logging.getLogger("namescope").level == logging.WARNING
        finally:
            NamescopeConfig(str(tmp_path / "absent.json")).apply_logging()


class TestConfigSaving:
    """Test writing configuration files."""

    def test_save_json(self, tmp_path):
        config_file = tmp_path / "saved.json"
        config = NamescopeConfig(str(config_file))
        config.naming.profile = "python"
        config.naming.extra_reserved = ["self"]

        config.save_config()

        data = json.loads(config_file.read_text())
        assert data["naming"]["profile"] == "python"
        assert data["naming"]["extra_reserved"] == ["self"]
        assert NamescopeConfig(str(config_file)).naming.profile == "python"

    def test_save_yaml(self, tmp_path):
        config_file = tmp_path / "saved.yaml"
        config = NamescopeConfig(str(config_file))
        config.naming.kernel_name = "fused"

        config.save_config()

        data = yaml.safe_load(config_file.read_text())
        assert data["naming"]["kernel_name"] == "fused"
        assert data["logging"]["level"] == "INFO"

    def test_to_dict_sections(self, tmp_path):
        data = NamescopeConfig(str(tmp_path / "absent.json")).to_dict()

        assert set(data) >= {"naming", "logging"}


class TestGlobalConfig:
    """Test the process-wide configuration instance."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_config(self, tmp_path):
        config = load_config(str(tmp_path / "absent.json"))
        set_config(config)

        assert get_config() is config

    def test_set_config_none_resets(self, tmp_path):
        config = load_config(str(tmp_path / "absent.json"))
        set_config(config)
        set_config(None)

        assert get_config() is not config

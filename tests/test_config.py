"""
Tests for EquipmentConfig loading, validation and the logging setup.
"""

import logging

import pytest

from equipment import EquipmentConfig, configure_logging, get_config, set_config
from equipment.logging_setup import LOG_FORMAT


class TestEquipmentConfig:
    def test_defaults(self):
        config = EquipmentConfig()
        assert config.log_level == "WARNING"
        assert config.prime_witness_limit == 10
        assert config.pending_counts_as_failure is False
        config.validate()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("EQUIPMENT_LOG_LEVEL", "debug")
        monkeypatch.setenv("EQUIPMENT_PRIME_WITNESS_LIMIT", "3")
        monkeypatch.setenv("EQUIPMENT_PENDING_STRICT", "TRUE")
        monkeypatch.delenv("EQUIPMENT_LAW_REGISTRY_DIR", raising=False)
        config = EquipmentConfig.from_env()
        assert config.to_dict() == {
            "log_level": "DEBUG",
            "law_registry_dir": None,
            "prime_witness_limit": 3,
            "pending_counts_as_failure": True,
        }

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "equipment.yaml"
        path.write_text("log_level: INFO\nprime_witness_limit: 4\n", encoding="utf-8")
        config = EquipmentConfig.from_yaml(str(path))
        assert config.log_level == "INFO"
        assert config.prime_witness_limit == 4

    def test_from_yaml_rejects_unknown_keys(self, tmp_path):
        path = tmp_path / "equipment.yaml"
        path.write_text("log_level: INFO\nverbose: true\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unknown equipment config keys .*: verbose"):
            EquipmentConfig.from_yaml(str(path))

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert EquipmentConfig.from_yaml(str(path)) == EquipmentConfig()

    def test_registry_dir_fallback(self, tmp_path):
        default = tmp_path / "packaged"
        assert EquipmentConfig().registry_dir(default) == default
        assert EquipmentConfig(law_registry_dir=str(tmp_path)).registry_dir(default) == tmp_path


class TestValidation:
    """validate collects every problem into one ValueError."""

    def test_witness_limit_must_be_positive(self):
        with pytest.raises(ValueError, match="prime_witness_limit"):
            EquipmentConfig(prime_witness_limit=0).validate()

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="log_level must be one of"):
            EquipmentConfig(log_level="LOUD").validate()

    def test_missing_registry_dir(self, tmp_path):
        with pytest.raises(ValueError, match="law_registry_dir does not exist"):
            EquipmentConfig(law_registry_dir=str(tmp_path / "absent")).validate()

    def test_errors_are_reported_together(self):
        with pytest.raises(ValueError) as excinfo:
            EquipmentConfig(log_level="LOUD", prime_witness_limit=0).validate()
        message = str(excinfo.value)
        assert "log_level" in message
        assert "prime_witness_limit" in message

    def test_set_config_validates(self):
        with pytest.raises(ValueError):
            set_config(EquipmentConfig(prime_witness_limit=0))


class TestActiveConfig:
    def test_set_and_reset(self, monkeypatch):
        monkeypatch.setenv("EQUIPMENT_PRIME_WITNESS_LIMIT", "7")
        custom = EquipmentConfig(prime_witness_limit=2)
        set_config(custom)
        assert get_config() is custom

        set_config(None)
        assert get_config().prime_witness_limit == 7


class TestLogging:
    def test_configure_logging_uses_config_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(EquipmentConfig(log_level="info"))
        assert calls == [{"level": logging.INFO, "format": LOG_FORMAT}]

    def test_configure_logging_defaults_to_active_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        set_config(EquipmentConfig(log_level="ERROR"))
        configure_logging()
        assert calls[0]["level"] == logging.ERROR

    @pytest.mark.parametrize("level", ["LOUD", "basic_format"])
    def test_unknown_level_falls_back_to_info(self, monkeypatch, level):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(EquipmentConfig(log_level=level))
        assert calls == [{"level": logging.INFO, "format": LOG_FORMAT}]

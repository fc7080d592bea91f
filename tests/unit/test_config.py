"""Tests for settings.json handling and statutory ceiling overrides."""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from salarycalc.sdk.config import (
    ConfigError,
    get_config_dir,
    get_templates_path,
    load_settings,
    load_statutory_config,
    set_setting,
    unset_setting,
)
from salarycalc.sdk.schemas import StatutoryConfig


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    monkeypatch.setenv("SALARY_CALC_CONFIG_PATH", str(config_dir))
    return config_dir


class TestConfigDir:
    def test_env_var(self, isolated_env):
        assert get_config_dir() == isolated_env

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("SALARY_CALC_CONFIG_PATH", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / "salary-calc"

    def test_templates_path_default(self, isolated_env):
        assert get_templates_path() == isolated_env / "templates.yaml"


class TestSettings:
    def test_missing_file_is_empty(self, isolated_env):
        assert load_settings() == {}

    def test_set_and_unset(self, isolated_env):
        path = set_setting("default_template", "Template 2")

        assert json.loads(path.read_text()) == {"default_template": "Template 2"}
        assert unset_setting("default_template") is True
        assert unset_setting("default_template") is False
        assert load_settings() == {}

    def test_limit_stored_as_exact_string(self, isolated_env):
        set_setting("esic_employee_limit", "21000.50")
        assert load_settings()["esic_employee_limit"] == "21000.50"

    def test_unknown_key_rejected(self, isolated_env):
        with pytest.raises(ConfigError, match="Unknown setting"):
            set_setting("tax_rate", "10")

    @pytest.mark.parametrize("value", ["abc", "-1", "NaN"])
    def test_invalid_limit_rejected(self, isolated_env, value):
        with pytest.raises(ConfigError):
            set_setting("pf_employee_limit", value)

    def test_invalid_json(self, isolated_env):
        isolated_env.mkdir(parents=True)
        (isolated_env / "settings.json").write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_settings()


class TestStatutoryConfig:
    def test_defaults(self, isolated_env):
        config = load_statutory_config()
        assert config == StatutoryConfig()
        assert config.pf_employee_limit == Decimal("15000")
        assert config.esic_employee_limit == Decimal("21000")

    def test_overrides_from_settings(self, isolated_env):
        set_setting("pf_employee_limit", 20000)
        config = load_statutory_config()

        assert config.pf_employee_limit == Decimal("20000")
        assert config.esic_employee_limit == Decimal("21000")

    def test_bad_value_in_file(self, isolated_env):
        isolated_env.mkdir(parents=True)
        (isolated_env / "settings.json").write_text(json.dumps({"esic_employee_limit": "lots"}))
        with pytest.raises(ConfigError, match="esic_employee_limit"):
            load_statutory_config()

    def test_explicit_settings_dict(self):
        config = load_statutory_config({"esic_employee_limit": 25000})
        assert config.esic_employee_limit == Decimal("25000")

    def test_immutable(self):
        config = StatutoryConfig()
        with pytest.raises(ValidationError):
            config.pf_employee_limit = Decimal("1")

"""Configuration management for Salary Calc.

Configuration lives in the config directory:

1. settings.json - Machine-specific settings
   - pf_employee_limit: PF wage ceiling override (default 15000)
   - esic_employee_limit: ESIC eligibility ceiling override (default 21000)
   - templates: path to a templates YAML file (optional, if not colocated)
   - default_template: template used when none is named on the CLI

2. templates.yaml - User compensation templates
   - templates: list of {name, earning_components, deduction_components}
   - Merged over the built-in templates by name

Config directory resolution:
1. SALARY_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/salary-calc/ (XDG_CONFIG_HOME fallback)
"""

import json
import os
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Optional

from .schemas import StatutoryConfig


APP_NAME = "salary-calc"
SETTINGS_FILENAME = "settings.json"
TEMPLATES_FILENAME = "templates.yaml"

# Setting key -> description. Anything else is rejected by set_setting().
SETTING_KEYS = {
    "pf_employee_limit": "PF wage ceiling (monthly)",
    "esic_employee_limit": "ESIC eligibility ceiling (monthly gross)",
    "templates": "Path to templates YAML file",
    "default_template": "Template used when none is given",
}

LIMIT_KEYS = ("pf_employee_limit", "esic_employee_limit")


class ConfigError(Exception):
    """Raised when settings.json holds an invalid value."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. SALARY_CALC_CONFIG_PATH environment variable
    2. ~/.config/salary-calc/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    # 1. Check environment variable
    env_path = os.environ.get("SALARY_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    # 2. Fall back to XDG config path
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)

    Raises:
        ConfigError: If the file is not valid JSON
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {settings_file}: {e}") from e


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    settings = load_settings()
    return settings.get(key, default)


def validate_setting(key: str, value: Any) -> tuple[bool, str]:
    """Validate a setting key and value before saving.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if key not in SETTING_KEYS:
        valid = ", ".join(sorted(SETTING_KEYS))
        return False, f"Unknown setting '{key}'. Valid settings: {valid}"

    if key in LIMIT_KEYS:
        try:
            limit = Decimal(str(value))
        except InvalidOperation:
            return False, f"{key} must be a number, got '{value}'"
        if not limit.is_finite() or limit < 0:
            return False, f"{key} must be a non-negative number, got '{value}'"

    return True, ""


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Ceiling values are stored as strings so they round-trip as exact decimals.

    Raises:
        ConfigError: If the key is unknown or the value invalid
    """
    valid, error = validate_setting(key, value)
    if not valid:
        raise ConfigError(error)

    if key in LIMIT_KEYS:
        value = str(Decimal(str(value)))

    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was set."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_templates_path() -> Path:
    """Get the path to the user templates YAML file.

    Resolution order:
    1. settings.json "templates" key (if set)
    2. templates.yaml in config directory

    Returns:
        Path to the templates file (may not exist)
    """
    custom = get_setting("templates")
    if custom:
        return Path(custom).expanduser()
    return get_config_dir() / TEMPLATES_FILENAME


def load_statutory_config(settings: Optional[dict] = None) -> StatutoryConfig:
    """Build the statutory ceilings from settings overrides.

    Args:
        settings: Settings dict (default: loaded from settings.json)

    Returns:
        StatutoryConfig with defaults for any ceiling not overridden

    Raises:
        ConfigError: If an override is not a valid non-negative number
    """
    if settings is None:
        settings = load_settings()

    overrides = {}
    for key in LIMIT_KEYS:
        if key not in settings:
            continue
        valid, error = validate_setting(key, settings[key])
        if not valid:
            raise ConfigError(f"{get_settings_path()}: {error}")
        overrides[key] = Decimal(str(settings[key]))

    return StatutoryConfig(**overrides)

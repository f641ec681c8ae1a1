"""Config – settings loaders, validation errors and password policy."""
from mp_mcf.config.policy import PasswordPolicySettings, apply_policy
from mp_mcf.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from mp_mcf.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PasswordPolicySettings",
    "Settings",
    "SettingsLoader",
    "apply_policy",
]

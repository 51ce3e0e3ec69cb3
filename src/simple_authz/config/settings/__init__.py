"""Config settings – 12-factor env-based configuration."""
from simple_authz.config.settings.base import Settings
from simple_authz.config.settings.factory import SettingsFactory
from simple_authz.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from simple_authz.config.settings.validator import SettingsValidator

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "SettingsValidator",
]

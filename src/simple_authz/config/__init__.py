"""Config – 12-factor settings, loaders and authorization provider configuration."""

from simple_authz.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
    SettingsValidator,
)
from simple_authz.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from simple_authz.config.provider import (
    AuthorizationProviderConfig,
    NodeSettings,
    SecurityProviderConfig,
    load_node_settings,
    load_security_provider_config,
)

__all__ = [
    "AuthorizationProviderConfig",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "NodeSettings",
    "SecurityProviderConfig",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "SettingsValidator",
    "load_node_settings",
    "load_security_provider_config",
]

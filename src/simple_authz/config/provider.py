"""Config – authorization provider and node topology settings.

A :class:`SecurityProviderConfig` mirrors one provider entry of the host's
security configuration: a named provider of some type carrying one or more
provider-specific configuration blocks.  The authorization provider reads the
first :class:`AuthorizationProviderConfig` block it finds.

Environment variables::

    AUTHZ_PROVIDER_SUPPORT_POLICY_DEPLOY=false
    AUTHZ_PROVIDER_VERSION=1.0
    AUTHZ_NODE_CENTRAL=true
"""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from simple_authz.config.settings import EnvSettingsLoader, Settings, SettingsFactory, SettingsLoader
from simple_authz.config.validation import ConfigError, InvalidSettingValueError


@dataclasses.dataclass
class AuthorizationProviderConfig(Settings):
    """Diagnostic settings of the authorization provider.

    Neither field alters decision semantics.
    """

    _prefix: ClassVar[str] = "AUTHZ_PROVIDER"

    support_policy_deploy: bool = False
    version: str = "1.0"

    def _validate(self) -> None:
        if not isinstance(self.version, str) or not self.version.strip():
            raise InvalidSettingValueError("version", self.version, "must be a non-empty string")


@dataclasses.dataclass
class NodeSettings(Settings):
    """Deployment topology of the current process."""

    _prefix: ClassVar[str] = "AUTHZ_NODE"

    central: bool = True


@dataclasses.dataclass(frozen=True)
class SecurityProviderConfig:
    """One provider entry of the host security configuration."""

    name: str = "simpleAuthorization"
    type: str = "authorization"
    provider_configs: tuple[Any, ...] = ()

    def first_authorization_config(self) -> AuthorizationProviderConfig:
        """Return the first :class:`AuthorizationProviderConfig` block.

        Raises :class:`ConfigError` if the entry carries none.
        """
        for cfg in self.provider_configs:
            if isinstance(cfg, AuthorizationProviderConfig):
                return cfg
        raise ConfigError(
            f"security provider {self.name!r} has no authorization provider config",
            detail={"provider": self.name, "type": self.type},
        )


def load_security_provider_config(
    loaders: list[SettingsLoader] | None = None,
    *,
    name: str = "simpleAuthorization",
    **overrides: Any,
) -> SecurityProviderConfig:
    """Build a provider entry from the environment (or the given *loaders*)."""
    cfg = SettingsFactory.create(
        AuthorizationProviderConfig,
        loaders if loaders is not None else [EnvSettingsLoader()],
        overrides or None,
    )
    return SecurityProviderConfig(name=name, provider_configs=(cfg,))


def load_node_settings(loaders: list[SettingsLoader] | None = None) -> NodeSettings:
    return SettingsFactory.create(
        NodeSettings,
        loaders if loaders is not None else [EnvSettingsLoader()],
    )


__all__ = [
    "AuthorizationProviderConfig",
    "NodeSettings",
    "SecurityProviderConfig",
    "load_node_settings",
    "load_security_provider_config",
]

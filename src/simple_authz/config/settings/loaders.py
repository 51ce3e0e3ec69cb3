"""Config settings – SettingsLoader port, EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from simple_authz.config.settings.base import Settings
from simple_authz.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


def required_fields(settings_class: type[Settings]) -> list[dataclasses.Field[Any]]:
    """Fields of *settings_class* that declare no default."""
    return [
        field
        for field in dataclasses.fields(settings_class)  # type: ignore[arg-type]
        if field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
    ]


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source.

    :meth:`load_values` returns only the fields the source actually supplies,
    so that :class:`~simple_authz.config.settings.factory.SettingsFactory` can
    layer several sources without defaults of one masking values of another.
    """

    @abc.abstractmethod
    def load_values(self, settings_class: type[Settings]) -> dict[str, Any]: ...

    def setting_name(self, settings_class: type[Settings], field_name: str) -> str:
        """Name of *field_name* as the source knows it (used in error messages)."""
        return field_name

    def load(self, settings_class: type[T]) -> T:
        """Build *settings_class* from this source alone."""
        values = self.load_values(settings_class)
        for field in required_fields(settings_class):
            if field.name not in values:
                raise MissingRequiredSettingError(self.setting_name(settings_class, field.name))
        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables named ``<PREFIX>_<FIELD>``."""

    def setting_name(self, settings_class: type[Settings], field_name: str) -> str:
        prefix = getattr(settings_class, "_prefix", "").upper()
        return f"{prefix}_{field_name}".upper().lstrip("_")

    def load_values(self, settings_class: type[Settings]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = self.setting_name(settings_class, field.name)
            raw = os.environ.get(env_key)
            if raw is not None:
                values[field.name] = self._coerce(env_key, raw, field.type)
        return values

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        origin = getattr(type_hint, "__origin__", None)
        if type_hint is bool or type_hint == "bool":
            lowered = value.strip().lower()
            if lowered in _TRUTHY:
                return True
            if lowered in _FALSY:
                return False
            raise InvalidSettingValueError(key, value, "expected a boolean")
        try:
            if type_hint is int or type_hint == "int":
                return int(value)
            if type_hint is float or type_hint == "float":
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(key, value, str(exc)) from exc
        if origin is list or (isinstance(type_hint, str) and type_hint.startswith("list")):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the environment, then read it like ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load_values(self, settings_class: type[Settings]) -> dict[str, Any]:
        load_dotenv(self._env_file, override=self._override)
        return super().load_values(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "required_fields"]

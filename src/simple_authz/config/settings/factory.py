"""Config settings – SettingsFactory."""
from __future__ import annotations

from typing import Any, Sequence, TypeVar

from simple_authz.config.settings.base import Settings
from simple_authz.config.settings.loaders import SettingsLoader, required_fields
from simple_authz.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)
from simple_authz.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


class SettingsFactory:
    """Merge values from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; a later loader overrides an earlier one only
    for the fields it actually supplies, and fields no source supplies keep
    their declared default.  *overrides* (if provided) take the highest
    priority.  A loader that raises :class:`ConfigError` is logged and skipped
    so that the remaining loaders may still contribute values.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~simple_authz.config.settings.base.Settings` subclass
            to construct.
        loaders:
            Ordered sequence of loaders.  Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders, useful for
            tests and local development.

        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        InvalidSettingValueError
            When the merged values fail type or field validation.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                values = loader.load_values(settings_cls)
            except ConfigError as exc:
                _log.warning(
                    "config.loader.skipped",
                    loader=type(loader).__name__,
                    settings=settings_cls.__name__,
                    error=exc.message,
                )
                continue
            merged.update(values)

        if overrides:
            merged.update(overrides)

        for field in required_fields(settings_cls):
            if field.name not in merged:
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(
                f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc
            ) from exc


__all__ = ["SettingsFactory"]

"""Config settings – SettingsValidator.

Checks a populated settings instance against its declared field types.  Values
set from code (overrides, provider entries built by a host) do not go through
loader coercion, so ``support_policy_deploy="yes"`` is caught here rather than
silently treated as truthy.
"""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from simple_authz.config.validation import InvalidSettingValueError

if TYPE_CHECKING:
    from simple_authz.config.settings.base import Settings

_NAMED_TYPES: dict[str, type] = {
    "bool": bool,
    "int": int,
    "float": float,
    "str": str,
    "list": list,
}


def _declared_type(type_hint: Any) -> type | None:
    if isinstance(type_hint, str):
        return _NAMED_TYPES.get(type_hint.split("[", 1)[0].strip())
    origin = getattr(type_hint, "__origin__", None)
    if origin is list:
        return list
    if type_hint in _NAMED_TYPES.values():
        return type_hint
    return None


def _conforms(value: Any, expected: type) -> bool:
    # bool is an int subclass; keep the two apart
    if expected is bool:
        return isinstance(value, bool)
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if expected is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, expected)


class SettingsValidator:
    """Validate a populated settings instance."""

    def problems(self, settings: Settings) -> list[tuple[str, Any, str]]:
        """Return ``(field, value, reason)`` for every invalid field."""
        found: list[tuple[str, Any, str]] = []
        for field in dataclasses.fields(settings):
            value = getattr(settings, field.name)
            if value is None:
                if field.default is dataclasses.MISSING:
                    found.append((field.name, value, "is required but None"))
                continue
            expected = _declared_type(field.type)
            if expected is not None and not _conforms(value, expected):
                found.append(
                    (field.name, value, f"must be {expected.__name__}, got {type(value).__name__}")
                )
        return found

    def validate(self, settings: Settings) -> list[str]:
        """Return a list of validation error messages."""
        return [f"{name} {reason}" for name, _, reason in self.problems(settings)]

    def ensure_valid(self, settings: Settings) -> None:
        """Raise :class:`InvalidSettingValueError` for the first invalid field."""
        found = self.problems(settings)
        if found:
            name, value, reason = found[0]
            raise InvalidSettingValueError(name, value, reason)


__all__ = ["SettingsValidator"]

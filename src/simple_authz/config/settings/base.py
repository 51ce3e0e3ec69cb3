"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from simple_authz.config.settings.validator import SettingsValidator


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Every instance is type-checked by :class:`SettingsValidator` on
    construction, then handed to :meth:`_validate` for cross-field rules.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        SettingsValidator().ensure_valid(self)
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]

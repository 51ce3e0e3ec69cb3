"""Kernel security – Resource, Action, Environment, AttributeResolver."""
from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Final, Protocol

from simple_authz.kernel.security.subject import Subject

READ_ACTION: Final[str] = "read"

# RFC 3986 scheme; case is preserved
_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


@dataclasses.dataclass(frozen=True)
class Resource:
    """Target of an authorization request, identified by a URI.

    The scheme selects the resource class (``admin://domain/servers``).
    A ``None`` URI or one without a scheme yields ``scheme is None``.
    """
    uri: str | None

    @property
    def scheme(self) -> str | None:
        if not self.uri:
            return None
        match = _SCHEME_RE.match(self.uri)
        return match.group(1) if match else None

    def __str__(self) -> str:
        return "null" if self.uri is None else self.uri


@dataclasses.dataclass(frozen=True)
class Action:
    """Requested action label.  Only the exact literal ``"read"`` is read-only."""
    name: str

    def is_read(self) -> bool:
        return self.name == READ_ACTION

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class Environment:
    """Opaque request context (time of day, network origin, ...).

    Forwarded unchanged; the administrative rule set does not read it.
    """
    attributes: Mapping[str, Any] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )

    def get(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)


class AttributeResolver(Protocol):
    """Port: resolve a named attribute for attribute-based policies."""

    def resolve(
        self,
        name: str,
        subject: Subject,
        resource: Resource,
        action: Action,
        environment: Environment,
    ) -> Any: ...


__all__ = ["READ_ACTION", "Action", "AttributeResolver", "Environment", "Resource"]

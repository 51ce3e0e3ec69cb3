"""Kernel security – Subject."""
from __future__ import annotations

import dataclasses
from typing import TypeVar

from simple_authz.kernel.security.principal import Principal

P = TypeVar("P", bound=Principal)


@dataclasses.dataclass(frozen=True)
class Subject:
    """Authenticated identity carrying an unordered collection of principals.

    Built by the authentication layer before the engine is invoked.
    Duplicate principals are allowed and order carries no meaning.
    """
    principals: tuple[Principal, ...] = ()

    @classmethod
    def of(cls, *names: str) -> "Subject":
        """Build a subject from plain principal names."""
        return cls(principals=tuple(Principal(n) for n in names))

    def principal_names(self) -> frozenset[str]:
        return frozenset(p.name for p in self.principals)

    def has_principal(self, name: str) -> bool:
        return any(p.name == name for p in self.principals)

    def principals_of_type(self, kind: type[P]) -> tuple[P, ...]:
        return tuple(p for p in self.principals if isinstance(p, kind))

    def __str__(self) -> str:
        return ",".join(sorted(self.principal_names())) or "<anonymous>"


__all__ = ["Subject"]

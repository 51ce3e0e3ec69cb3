"""Kernel security – Principal and KernelPrincipal."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Principal:
    """Named credential marker (group membership, token type, ...)."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class KernelPrincipal(Principal):
    """Principal carried only by the distinguished kernel identity."""


__all__ = ["KernelPrincipal", "Principal"]

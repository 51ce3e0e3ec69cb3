"""Deployment topology – is this process the central administrative node?"""
from __future__ import annotations

from typing import Protocol

from simple_authz.config.provider import NodeSettings


class NodeRole(Protocol):
    """Port: role of the current node in the deployment."""

    def is_central(self) -> bool: ...


class StaticNodeRole:
    """Node role fixed at process startup."""

    __slots__ = ("_central",)

    def __init__(self, central: bool) -> None:
        self._central = central

    def is_central(self) -> bool:
        return self._central

    def __repr__(self) -> str:
        return f"StaticNodeRole(central={self._central})"


def node_role_from_settings(settings: NodeSettings) -> StaticNodeRole:
    return StaticNodeRole(central=settings.central)


__all__ = ["NodeRole", "StaticNodeRole", "node_role_from_settings"]

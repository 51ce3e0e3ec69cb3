"""Kernel security – process-wide authorization constants.

Principal names recognised by the administrative rule set.  Trusted names are
granted full access on the central node and on member nodes alike.
"""
from __future__ import annotations

from typing import Final

ADMIN_GROUP: Final[str] = "asadmin"

LOCAL_PASSWORD: Final[str] = "_localPassword"
ADMIN_TOKEN: Final[str] = "_adminToken"
SERVER: Final[str] = "_server"

TRUSTED_FOR_DAS_OR_INSTANCE: Final[frozenset[str]] = frozenset({
    LOCAL_PASSWORD,
    ADMIN_TOKEN,
    SERVER,
})

__all__ = [
    "ADMIN_GROUP",
    "ADMIN_TOKEN",
    "LOCAL_PASSWORD",
    "SERVER",
    "TRUSTED_FOR_DAS_OR_INSTANCE",
]

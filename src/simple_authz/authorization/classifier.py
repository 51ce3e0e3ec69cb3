"""Resource classification – is a resource in the administrative domain?"""
from __future__ import annotations

from typing import Final

from simple_authz.kernel.errors import MalformedResourceError
from simple_authz.kernel.security import Resource

ADMIN_SCHEME: Final[str] = "admin"


def is_administrative_resource(resource: Resource) -> bool:
    """Return ``True`` iff the resource URI scheme is exactly ``"admin"``.

    Raises :class:`MalformedResourceError` when the URI has no scheme.
    """
    scheme = resource.scheme
    if scheme is None:
        raise MalformedResourceError(resource)
    return scheme == ADMIN_SCHEME


__all__ = ["ADMIN_SCHEME", "is_administrative_resource"]

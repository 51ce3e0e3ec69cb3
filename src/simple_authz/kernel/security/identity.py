"""Kernel security – distinguished kernel identity.

The kernel identity represents trusted in-process system callers.  Exactly one
instance is used per process; it is passed explicitly to the decision engine.
When the host supplies none, :func:`resolve_kernel_identity` builds
:class:`DefaultKernelIdentity` so the kernel check is always answerable.
"""
from __future__ import annotations

from typing import Final, Protocol

from simple_authz.kernel.security.principal import KernelPrincipal
from simple_authz.kernel.security.subject import Subject

KERNEL_PRINCIPAL_NAME: Final[str] = "_kernel"


class KernelIdentity(Protocol):
    """Port: the process's own system identity."""

    @property
    def subject(self) -> Subject: ...


class DefaultKernelIdentity:
    """Fallback identity carrying a single :class:`KernelPrincipal`."""

    __slots__ = ("_subject",)

    def __init__(self, name: str = KERNEL_PRINCIPAL_NAME) -> None:
        self._subject = Subject(principals=(KernelPrincipal(name),))

    @property
    def subject(self) -> Subject:
        return self._subject

    def __repr__(self) -> str:
        return f"DefaultKernelIdentity({self._subject.principals[0].name!r})"


def resolve_kernel_identity(identity: KernelIdentity | None) -> KernelIdentity:
    """Return *identity*, or the default fallback when it is ``None``."""
    if identity is None:
        return DefaultKernelIdentity()
    return identity


def is_kernel_subject(subject: Subject, identity: KernelIdentity) -> bool:
    """``True`` if *subject* carries one of *identity*'s kernel principals."""
    markers = set(identity.subject.principals_of_type(KernelPrincipal))
    if not markers:
        return False
    return any(p in markers for p in subject.principals_of_type(KernelPrincipal))


__all__ = [
    "KERNEL_PRINCIPAL_NAME",
    "DefaultKernelIdentity",
    "KernelIdentity",
    "is_kernel_subject",
    "resolve_kernel_identity",
]

"""Policy deployment context lookup – Available, NotRequired and Unsupported.

A host may ask the provider for a context into which richer policy documents
are deployed for one application.  The lookup result keeps three outcomes
apart: a usable context, no context needed, and a provider that does not
implement policy deployment at all.  Callers treat anything but
:class:`Available` as "no custom policy", never as a failure.
"""

from __future__ import annotations

from typing import Any, Generic, NoReturn, Protocol, TypeVar

from simple_authz.kernel.errors import DeploymentContextUnavailableError

T = TypeVar("T")


class PolicyDeploymentContext(Protocol):
    """Port: per-application sink for deployable policy documents."""

    @property
    def app_context(self) -> str: ...

    def deploy(self, policy: Any) -> None: ...

    def undeploy(self) -> None: ...


class Available(Generic[T]):
    """Lookup found (or created) a deployment context."""

    __slots__ = ("_context",)

    def __init__(self, context: T) -> None:
        self._context = context

    @property
    def context(self) -> T:
        return self._context

    def is_available(self) -> bool:
        return True

    def is_supported(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self._context

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._context

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Available):
            return NotImplemented
        return self._context == other._context

    def __hash__(self) -> int:
        return hash((Available, self._context))

    def __repr__(self) -> str:
        return f"Available({self._context!r})"


class NotRequired(Generic[T]):
    """The application needs no custom policy context."""

    __slots__ = ("_app_context",)

    def __init__(self, app_context: str | None = None) -> None:
        self._app_context = app_context

    def is_available(self) -> bool:
        return False

    def is_supported(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise DeploymentContextUnavailableError(self._app_context, "not required")

    def unwrap_or(self, default: T) -> T:
        return default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotRequired):
            return NotImplemented
        return self._app_context == other._app_context

    def __hash__(self) -> int:
        return hash((NotRequired, self._app_context))

    def __repr__(self) -> str:
        return f"NotRequired({self._app_context!r})"


class Unsupported(Generic[T]):
    """The provider does not implement policy deployment."""

    __slots__ = ("_app_context", "_reason")

    def __init__(self, app_context: str | None = None, reason: str = "policy deployment is not supported") -> None:
        self._app_context = app_context
        self._reason = reason

    @property
    def reason(self) -> str:
        return self._reason

    def is_available(self) -> bool:
        return False

    def is_supported(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise DeploymentContextUnavailableError(self._app_context, self._reason)

    def unwrap_or(self, default: T) -> T:
        return default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unsupported):
            return NotImplemented
        return (self._app_context, self._reason) == (other._app_context, other._reason)

    def __hash__(self) -> int:
        return hash((Unsupported, self._app_context, self._reason))

    def __repr__(self) -> str:
        return f"Unsupported({self._app_context!r}, {self._reason!r})"


type DeploymentLookup[T] = Available[T] | NotRequired[T] | Unsupported[T]

__all__ = [
    "Available",
    "DeploymentLookup",
    "NotRequired",
    "PolicyDeploymentContext",
    "Unsupported",
]

"""Application-layer errors — capability and configuration concerns."""

from __future__ import annotations

from typing import Any

from simple_authz.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class DeploymentContextUnavailableError(ApplicationError):
    """A policy deployment context was unwrapped but none is available."""

    default_code = "deployment_context_unavailable"

    def __init__(
        self,
        app_context: str | None,
        reason: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"no policy deployment context for {app_context!r}: {reason}",
            detail={"app_context": app_context, "reason": reason},
            **kwargs,
        )
        self.app_context = app_context
        self.reason = reason


__all__ = [
    "ApplicationError",
    "DeploymentContextUnavailableError",
]

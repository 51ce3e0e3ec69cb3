"""Domain errors — malformed authorization requests."""

from __future__ import annotations

from typing import Any

from simple_authz.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when an authorization request breaks a domain rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class MalformedResourceError(DomainError):
    """The resource identifier has no scheme and cannot be classified."""

    default_code = "malformed_resource"

    def __init__(self, resource: Any, **kwargs: Any) -> None:
        super().__init__(
            f"resource {str(resource)!r} has no scheme",
            detail={"resource": str(resource)},
            **kwargs,
        )
        self.resource = resource


__all__ = [
    "DomainError",
    "MalformedResourceError",
    "ValidationError",
]

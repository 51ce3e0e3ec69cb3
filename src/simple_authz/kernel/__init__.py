"""Kernel – framework-agnostic building blocks: errors and security types."""

from simple_authz.kernel.errors import (
    ApplicationError,
    BaseError,
    DeploymentContextUnavailableError,
    DomainError,
    MalformedResourceError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DeploymentContextUnavailableError",
    "DomainError",
    "MalformedResourceError",
    "ValidationError",
]

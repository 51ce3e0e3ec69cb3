"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── MalformedResourceError
    └── ApplicationError     (application.py)
        ├── DeploymentContextUnavailableError
        └── ConfigError      (simple_authz.config.validation)
"""

from simple_authz.kernel.errors.application import (
    ApplicationError,
    DeploymentContextUnavailableError,
)
from simple_authz.kernel.errors.base import BaseError
from simple_authz.kernel.errors.domain import (
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

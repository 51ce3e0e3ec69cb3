"""Kernel security – Decision, Status, Obligations, DecisionResult, provider port."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping, Sequence
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol

from simple_authz.kernel.security.request import (
    Action,
    AttributeResolver,
    Environment,
    Resource,
)
from simple_authz.kernel.security.subject import Subject

if TYPE_CHECKING:
    from simple_authz.authorization.deployment import DeploymentLookup
    from simple_authz.config.provider import SecurityProviderConfig


class Decision(str, Enum):
    PERMIT = "PERMIT"
    DENY = "DENY"


class Status(str, Enum):
    """Outcome of the evaluation itself, independent of the decision."""
    OK = "OK"
    PROCESSING_ERROR = "PROCESSING_ERROR"


@dataclasses.dataclass(frozen=True)
class Obligation:
    """Post-decision directive attached by richer policy backends."""
    name: str
    attributes: Mapping[str, Any] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )


@dataclasses.dataclass(frozen=True)
class Obligations:
    """Possibly-empty set of obligations.  Always empty for the admin rule set."""
    items: tuple[Obligation, ...] = ()

    def is_empty(self) -> bool:
        return not self.items

    def __iter__(self) -> Iterator[Obligation]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclasses.dataclass(frozen=True)
class DecisionResult:
    """Decision, evaluation status and obligations of one request."""
    decision: Decision
    status: Status = Status.OK
    obligations: Obligations = dataclasses.field(default_factory=Obligations)

    @classmethod
    def permit(cls) -> "DecisionResult":
        return cls(decision=Decision.PERMIT)

    @classmethod
    def deny(cls) -> "DecisionResult":
        return cls(decision=Decision.DENY)

    def is_permitted(self) -> bool:
        return self.decision is Decision.PERMIT


class AuthorizationProvider(Protocol):
    """Port: render authorization decisions for the host framework."""

    def initialize(self, provider: SecurityProviderConfig) -> None: ...

    def get_authorization_decision(
        self,
        subject: Subject,
        resource: Resource,
        action: Action,
        environment: Environment,
        attribute_resolvers: Sequence[AttributeResolver] = (),
    ) -> DecisionResult: ...

    def find_or_create_deployment_context(self, app_context: str) -> DeploymentLookup: ...


__all__ = [
    "AuthorizationProvider",
    "Decision",
    "DecisionResult",
    "Obligation",
    "Obligations",
    "Status",
]

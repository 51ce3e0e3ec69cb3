"""SimpleAuthorizationProvider – the service facade over :class:`DecisionEngine`.

Grants access to the administrative domain:

- kernel (in-process) callers and trusted channels (local password, admin
  token, server-to-server) may do anything on any node;
- members of the administrator group may do anything on the central node and
  only ``"read"`` on member nodes.

Remote access that is not permitted has already been rejected during
authentication; this provider only renders the decision.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Final

from simple_authz.authorization.deployment import PolicyDeploymentContext, Unsupported
from simple_authz.authorization.engine import DecisionEngine
from simple_authz.authorization.rules import DEFAULT_RULES, Rule
from simple_authz.authorization.topology import NodeRole
from simple_authz.config.provider import SecurityProviderConfig
from simple_authz.config.settings import SettingsValidator
from simple_authz.kernel.errors import ValidationError
from simple_authz.kernel.security import (
    Action,
    AttributeResolver,
    DecisionResult,
    Environment,
    KernelIdentity,
    Resource,
    Subject,
)
from simple_authz.observability.logging import AuditLogger, AuditOutcome, get_logger

PROVIDER_NAME: Final[str] = "simpleAuthorization"

_log = get_logger(__name__)


class SimpleAuthorizationProvider:
    """Authorization provider for the administrative domain.

    Parameters
    ----------
    node_role:
        Deployment-topology collaborator (central vs member node).
    kernel_identity:
        Kernel identity; the default fallback is built when ``None``.
    audit:
        Optional audit sink receiving one entry per decision.
    rules:
        Ordered permit rules handed to the engine, :data:`DEFAULT_RULES`
        unless the host inserts its own.
    """

    name = PROVIDER_NAME

    def __init__(
        self,
        node_role: NodeRole,
        kernel_identity: KernelIdentity | None = None,
        *,
        audit: AuditLogger | None = None,
        rules: Iterable[Rule] = DEFAULT_RULES,
    ) -> None:
        self._engine = DecisionEngine(node_role, kernel_identity, rules=rules)
        self._audit = audit
        self._deployable = False
        self._version: str | None = None

    @property
    def engine(self) -> DecisionEngine:
        return self._engine

    @property
    def deployable(self) -> bool:
        return self._deployable

    @property
    def version(self) -> str | None:
        return self._version

    def initialize(self, provider: SecurityProviderConfig) -> None:
        """Record the provider configuration.  Decisions are not affected."""
        cfg = provider.first_authorization_config()
        SettingsValidator().ensure_valid(cfg)
        self._deployable = cfg.support_policy_deploy
        self._version = cfg.version
        _log.debug(
            "authz.provider.initialized",
            provider=provider.name,
            support_policy_deploy=self._deployable,
            version=self._version,
        )

    def get_authorization_decision(
        self,
        subject: Subject,
        resource: Resource,
        action: Action,
        environment: Environment | None = None,
        attribute_resolvers: Sequence[AttributeResolver] = (),  # noqa: ARG002
    ) -> DecisionResult:
        _require(subject=subject, resource=resource, action=action)
        result = self._engine.decide(
            subject,
            resource,
            action,
            environment if environment is not None else Environment(),
        )
        if self._audit is not None:
            self._audit.log_access(
                subject,
                str(resource),
                action.name,
                AuditOutcome.PERMIT if result.is_permitted() else AuditOutcome.DENY,
                provider=self.name,
            )
        return result

    def find_or_create_deployment_context(
        self, app_context: str
    ) -> Unsupported[PolicyDeploymentContext]:
        return Unsupported(app_context)


def _require(**values: Any) -> None:
    missing = [name for name, value in values.items() if value is None]
    if missing:
        raise ValidationError(
            "authorization request is incomplete",
            errors=[{"field": name, "error": "required"} for name in missing],
        )


__all__ = ["PROVIDER_NAME", "SimpleAuthorizationProvider"]

"""Decision engine – classifies the resource and applies the rule set."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from simple_authz.authorization.classifier import is_administrative_resource
from simple_authz.authorization.rules import DEFAULT_RULES, Rule, RuleContext, RuleSet
from simple_authz.authorization.topology import NodeRole
from simple_authz.kernel.errors import MalformedResourceError
from simple_authz.kernel.security import (
    Action,
    Decision,
    DecisionResult,
    Environment,
    KernelIdentity,
    Obligations,
    Resource,
    Status,
    Subject,
    resolve_kernel_identity,
)
from simple_authz.observability.logging import get_logger


class DecisionEngine:
    """Render PERMIT/DENY decisions for administrative requests.

    The engine holds no per-request state; one instance may serve any number
    of concurrent callers.

    Parameters
    ----------
    node_role:
        Tells whether this process is the central administrative node.
    kernel_identity:
        The process's kernel identity.  ``None`` selects
        :class:`~simple_authz.kernel.security.DefaultKernelIdentity`.
    rules:
        Ordered permit rules, :data:`DEFAULT_RULES` unless overridden.
    """

    def __init__(
        self,
        node_role: NodeRole,
        kernel_identity: KernelIdentity | None = None,
        *,
        rules: Iterable[Rule] = DEFAULT_RULES,
        logger: Any = None,
    ) -> None:
        self._node_role = node_role
        self._kernel_identity = resolve_kernel_identity(kernel_identity)
        self._rules = RuleSet(rules)
        self._log = logger if logger is not None else get_logger(__name__)

    @property
    def kernel_identity(self) -> KernelIdentity:
        return self._kernel_identity

    @property
    def rules(self) -> RuleSet:
        return self._rules

    def decide(
        self,
        subject: Subject,
        resource: Resource,
        action: Action,
        environment: Environment,
    ) -> DecisionResult:
        self._check_resource(resource)
        ctx = RuleContext(
            subject=subject,
            resource=resource,
            action=action,
            environment=environment,
            central_node=self._node_role.is_central(),
            kernel_identity=self._kernel_identity,
        )
        rule = self._rules.first_match(ctx)
        decision = Decision.PERMIT if rule is not None else Decision.DENY
        self._log.debug(
            "authz.decision",
            decision=decision.value,
            rule=rule.name if rule is not None else None,
            resource=str(resource),
            action=action.name,
            central_node=ctx.central_node,
        )
        return DecisionResult(decision=decision, status=Status.OK, obligations=Obligations())

    def _check_resource(self, resource: Resource) -> None:
        # Diagnostic only: evaluation proceeds for non-admin and malformed resources.
        try:
            administrative = is_administrative_resource(resource)
        except MalformedResourceError as exc:
            self._log.warning(
                "authz.resource.not_administrative",
                resource=str(resource),
                error=exc.code,
            )
            return
        if not administrative:
            self._log.warning(
                "authz.resource.not_administrative",
                resource=str(resource),
                scheme=resource.scheme,
            )


__all__ = ["DecisionEngine"]

"""Administrative authorization rules.

Rules are evaluated in order and the first one that matches yields PERMIT;
when none matches the decision is DENY.  The default order is:

1. :class:`KernelIdentityRule` – in-process system callers.
2. :class:`TrustedPrincipalRule` – local password, admin token and
   server-to-server principals, trusted on every node.
3. :class:`AdministratorScopeRule` – administrators get full access on the
   central node and read-only access on member nodes.

Any action other than the exact literal ``"read"`` is assumed to change state.

Example::

    rules = RuleSet(DEFAULT_RULES)
    decision = rules.evaluate(ctx)
"""

from __future__ import annotations

import abc
import dataclasses
from collections.abc import Iterable

from simple_authz.kernel.security import (
    ADMIN_GROUP,
    TRUSTED_FOR_DAS_OR_INSTANCE,
    Action,
    Decision,
    Environment,
    KernelIdentity,
    Resource,
    Subject,
    is_kernel_subject,
)


# ---------------------------------------------------------------------------
# RuleContext
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class RuleContext:
    """Everything a rule may inspect for a single request."""

    subject: Subject
    resource: Resource
    action: Action
    environment: Environment
    central_node: bool
    kernel_identity: KernelIdentity


# ---------------------------------------------------------------------------
# Rule base
# ---------------------------------------------------------------------------


class Rule(abc.ABC):
    """A single permit condition."""

    name: str = "rule"

    @abc.abstractmethod
    def matches(self, ctx: RuleContext) -> bool: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# ---------------------------------------------------------------------------
# Built-in rules
# ---------------------------------------------------------------------------


class KernelIdentityRule(Rule):
    """The subject carries the process's kernel principal."""

    name = "kernel_identity"

    def matches(self, ctx: RuleContext) -> bool:
        return is_kernel_subject(ctx.subject, ctx.kernel_identity)


class TrustedPrincipalRule(Rule):
    """Any principal name is in the trusted set, regardless of node or action."""

    name = "trusted_principal"

    def __init__(self, trusted: Iterable[str] = TRUSTED_FOR_DAS_OR_INSTANCE) -> None:
        self._trusted = frozenset(trusted)

    def matches(self, ctx: RuleContext) -> bool:
        return not ctx.subject.principal_names().isdisjoint(self._trusted)

    def __repr__(self) -> str:
        return f"TrustedPrincipalRule({sorted(self._trusted)!r})"


class AdministratorScopeRule(Rule):
    """Administrator on the central node, or administrator reading anywhere."""

    name = "administrator_scope"

    def __init__(self, admin_group: str = ADMIN_GROUP) -> None:
        self._admin_group = admin_group

    def matches(self, ctx: RuleContext) -> bool:
        return ctx.subject.has_principal(self._admin_group) and (
            ctx.central_node or ctx.action.is_read()
        )

    def __repr__(self) -> str:
        return f"AdministratorScopeRule({self._admin_group!r})"


DEFAULT_RULES: tuple[Rule, ...] = (
    KernelIdentityRule(),
    TrustedPrincipalRule(),
    AdministratorScopeRule(),
)


# ---------------------------------------------------------------------------
# RuleSet
# ---------------------------------------------------------------------------


class RuleSet:
    """Ordered, short-circuiting rule list.  An empty set denies everything."""

    def __init__(self, rules: Iterable[Rule] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def first_match(self, ctx: RuleContext) -> Rule | None:
        for rule in self._rules:
            if rule.matches(ctx):
                return rule
        return None

    def evaluate(self, ctx: RuleContext) -> Decision:
        return Decision.PERMIT if self.first_match(ctx) is not None else Decision.DENY

    def __len__(self) -> int:
        return len(self._rules)


__all__ = [
    "DEFAULT_RULES",
    "AdministratorScopeRule",
    "KernelIdentityRule",
    "Rule",
    "RuleContext",
    "RuleSet",
    "TrustedPrincipalRule",
]

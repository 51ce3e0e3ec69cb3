"""Authorization – resource classification, rules, decision engine, provider."""
from simple_authz.authorization.classifier import ADMIN_SCHEME, is_administrative_resource
from simple_authz.authorization.topology import NodeRole, StaticNodeRole, node_role_from_settings
from simple_authz.authorization.rules import (
    DEFAULT_RULES,
    AdministratorScopeRule,
    KernelIdentityRule,
    Rule,
    RuleContext,
    RuleSet,
    TrustedPrincipalRule,
)
from simple_authz.authorization.engine import DecisionEngine
from simple_authz.authorization.deployment import (
    Available,
    DeploymentLookup,
    NotRequired,
    PolicyDeploymentContext,
    Unsupported,
)
from simple_authz.authorization.provider import PROVIDER_NAME, SimpleAuthorizationProvider

__all__ = [
    "ADMIN_SCHEME",
    "DEFAULT_RULES",
    "PROVIDER_NAME",
    "AdministratorScopeRule",
    "Available",
    "DecisionEngine",
    "DeploymentLookup",
    "KernelIdentityRule",
    "NodeRole",
    "NotRequired",
    "PolicyDeploymentContext",
    "Rule",
    "RuleContext",
    "RuleSet",
    "SimpleAuthorizationProvider",
    "StaticNodeRole",
    "TrustedPrincipalRule",
    "Unsupported",
    "is_administrative_resource",
    "node_role_from_settings",
]

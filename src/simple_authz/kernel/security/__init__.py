"""Kernel security – Subject, Principal, request types, decisions, kernel identity."""
from simple_authz.kernel.security.principal import KernelPrincipal, Principal
from simple_authz.kernel.security.subject import Subject
from simple_authz.kernel.security.request import (
    READ_ACTION,
    Action,
    AttributeResolver,
    Environment,
    Resource,
)
from simple_authz.kernel.security.policy import (
    AuthorizationProvider,
    Decision,
    DecisionResult,
    Obligation,
    Obligations,
    Status,
)
from simple_authz.kernel.security.identity import (
    KERNEL_PRINCIPAL_NAME,
    DefaultKernelIdentity,
    KernelIdentity,
    is_kernel_subject,
    resolve_kernel_identity,
)
from simple_authz.kernel.security.constants import (
    ADMIN_GROUP,
    ADMIN_TOKEN,
    LOCAL_PASSWORD,
    SERVER,
    TRUSTED_FOR_DAS_OR_INSTANCE,
)

__all__ = [
    "ADMIN_GROUP",
    "ADMIN_TOKEN",
    "KERNEL_PRINCIPAL_NAME",
    "LOCAL_PASSWORD",
    "READ_ACTION",
    "SERVER",
    "TRUSTED_FOR_DAS_OR_INSTANCE",
    "Action",
    "AttributeResolver",
    "AuthorizationProvider",
    "Decision",
    "DecisionResult",
    "DefaultKernelIdentity",
    "Environment",
    "KernelIdentity",
    "KernelPrincipal",
    "Obligation",
    "Obligations",
    "Principal",
    "Resource",
    "Status",
    "Subject",
    "is_kernel_subject",
    "resolve_kernel_identity",
]

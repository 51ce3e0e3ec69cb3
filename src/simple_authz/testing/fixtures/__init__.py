"""Testing fixtures – subjects, node roles and engines for authorization tests."""
from simple_authz.testing.fixtures.authorization import (
    admin_resource,
    admin_subject,
    central_node,
    central_provider,
    kernel_identity,
    kernel_subject,
    member_node,
    member_provider,
)

__all__ = [
    "admin_resource",
    "admin_subject",
    "central_node",
    "central_provider",
    "kernel_identity",
    "kernel_subject",
    "member_node",
    "member_provider",
]

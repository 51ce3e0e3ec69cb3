"""Testing generators – hypothesis strategies for authorization requests."""
from simple_authz.testing.generators.strategies import (
    action_strategy,
    mutating_action_strategy,
    plain_subject_strategy,
    principal_name_strategy,
    resource_strategy,
    subject_strategy,
)

__all__ = [
    "action_strategy",
    "mutating_action_strategy",
    "plain_subject_strategy",
    "principal_name_strategy",
    "resource_strategy",
    "subject_strategy",
]

"""Shared pytest configuration."""

from __future__ import annotations

import pytest
import structlog

from simple_authz.testing.fixtures import (  # noqa: F401
    admin_resource,
    admin_subject,
    central_node,
    central_provider,
    kernel_identity,
    kernel_subject,
    member_node,
    member_provider,
)


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any structlog configuration a test performed."""
    yield
    structlog.reset_defaults()

"""Observability – AuditLogger.

A dedicated structured-log sink for authorization decisions.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

from simple_authz.observability.logging.processors import get_logger


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    PERMIT = "permit"
    DENY = "deny"
    ERROR = "error"


class AuditLogger:
    """Structured-log sink for security-sensitive actions.

    All audit entries are emitted at ``WARNING`` level so they pass through
    even restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying structlog logger.  Defaults to one named ``audit``.
    """

    def __init__(
        self,
        service: str = "simple-authz",
        logger: Any = None,
    ) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    def log_access(
        self,
        principal: Any,
        resource: str,
        action: str,
        outcome: AuditOutcome | str,
        **extra: Any,
    ) -> None:
        """Record one access decision.

        ``principal`` is rendered with ``str()``; a :class:`Subject` renders as
        its sorted principal names.
        """
        self._log.warning(
            "audit.access",
            service=self._service,
            principal=str(principal),
            resource=resource,
            action=action,
            outcome=outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            timestamp=datetime.datetime.now(datetime.UTC).isoformat(),
            **extra,
        )


__all__ = ["AuditLogger", "AuditOutcome"]

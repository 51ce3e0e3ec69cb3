"""Observability – structured logging helpers."""
from simple_authz.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from simple_authz.observability.logging.factory import JsonLoggerFactory
from simple_authz.observability.logging.processors import get_logger
from simple_authz.observability.logging.audit import AuditLogger, AuditOutcome

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]

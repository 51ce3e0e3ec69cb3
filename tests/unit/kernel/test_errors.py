"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from simple_authz.config.validation import ConfigError
from simple_authz.kernel.errors import (
    ApplicationError,
    BaseError,
    DeploymentContextUnavailableError,
    DomainError,
    MalformedResourceError,
    ValidationError,
)
from simple_authz.kernel.security import Resource


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (DomainError, BaseError),
            (ValidationError, DomainError),
            (MalformedResourceError, DomainError),
            (ApplicationError, BaseError),
            (DeploymentContextUnavailableError, ApplicationError),
            (ConfigError, ApplicationError),
        ],
    )
    def test_subclass(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)


class TestValidationError:
    def test_errors_default_empty(self) -> None:
        assert ValidationError("bad").errors == []

    def test_errors_in_dict(self) -> None:
        err = ValidationError("bad", errors=[{"field": "subject", "error": "required"}])
        assert err.to_dict()["errors"] == [{"field": "subject", "error": "required"}]


class TestMalformedResourceError:
    def test_code_and_detail(self) -> None:
        err = MalformedResourceError(Resource("domain/servers"))
        assert err.code == "malformed_resource"
        assert err.detail == {"resource": "domain/servers"}
        assert "domain/servers" in err.message

    def test_null_uri_rendered_as_null(self) -> None:
        err = MalformedResourceError(Resource(None))
        assert err.detail == {"resource": "null"}


class TestDeploymentContextUnavailableError:
    def test_fields(self) -> None:
        err = DeploymentContextUnavailableError("app1", "not supported")
        assert err.app_context == "app1"
        assert err.reason == "not supported"
        assert err.code == "deployment_context_unavailable"
        assert err.detail == {"app_context": "app1", "reason": "not supported"}

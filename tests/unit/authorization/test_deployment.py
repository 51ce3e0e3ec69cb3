"""Unit tests for deployment context lookup variants."""

from __future__ import annotations

import pytest

from simple_authz.authorization import Available, NotRequired, Unsupported
from simple_authz.kernel.errors import DeploymentContextUnavailableError


class _Context:
    app_context = "app"

    def deploy(self, policy) -> None: ...

    def undeploy(self) -> None: ...


class TestAvailable:
    def test_unwrap(self) -> None:
        ctx = _Context()
        lookup = Available(ctx)
        assert lookup.is_available() is True
        assert lookup.is_supported() is True
        assert lookup.unwrap() is ctx
        assert lookup.unwrap_or(None) is ctx
        assert lookup.context is ctx

    def test_equality(self) -> None:
        ctx = _Context()
        assert Available(ctx) == Available(ctx)
        assert Available(ctx) != Available(_Context())
        assert hash(Available(ctx)) == hash(Available(ctx))
        assert len({Available(ctx), Available(ctx)}) == 1


class TestNotRequired:
    def test_flags(self) -> None:
        lookup = NotRequired("app")
        assert lookup.is_available() is False
        assert lookup.is_supported() is True
        assert lookup.unwrap_or("default") == "default"

    def test_unwrap_raises(self) -> None:
        with pytest.raises(DeploymentContextUnavailableError) as exc_info:
            NotRequired("app").unwrap()
        assert exc_info.value.reason == "not required"

    def test_equality(self) -> None:
        assert NotRequired("app") == NotRequired("app")
        assert NotRequired("app") != NotRequired("other")
        assert hash(NotRequired("app")) == hash(NotRequired("app"))

    def test_distinct_from_available(self) -> None:
        assert NotRequired("app") != Available("app")


class TestUnsupported:
    def test_flags(self) -> None:
        lookup = Unsupported("app")
        assert lookup.is_available() is False
        assert lookup.is_supported() is False
        assert "not supported" in lookup.reason

    def test_unwrap_raises(self) -> None:
        with pytest.raises(DeploymentContextUnavailableError) as exc_info:
            Unsupported("app", "no backend").unwrap()
        assert exc_info.value.app_context == "app"
        assert exc_info.value.reason == "no backend"

    def test_equality(self) -> None:
        assert Unsupported("a") == Unsupported("a")
        assert Unsupported("a") != Unsupported("b")
        assert hash(Unsupported("a")) == hash(Unsupported("a"))

    def test_repr(self) -> None:
        assert repr(Unsupported("a", "r")) == "Unsupported('a', 'r')"

    def test_distinct_from_not_required(self) -> None:
        assert Unsupported("a") != NotRequired("a")

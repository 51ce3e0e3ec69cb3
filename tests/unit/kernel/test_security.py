"""Unit tests for kernel security types."""

from __future__ import annotations

import pytest

from simple_authz.kernel.security import (
    ADMIN_GROUP,
    ADMIN_TOKEN,
    KERNEL_PRINCIPAL_NAME,
    LOCAL_PASSWORD,
    SERVER,
    TRUSTED_FOR_DAS_OR_INSTANCE,
    Action,
    Decision,
    DecisionResult,
    DefaultKernelIdentity,
    Environment,
    KernelPrincipal,
    Obligation,
    Obligations,
    Principal,
    Resource,
    Status,
    Subject,
    is_kernel_subject,
    resolve_kernel_identity,
)


# ---------------------------------------------------------------------------
# Principal / Subject
# ---------------------------------------------------------------------------


class TestPrincipal:
    def test_frozen(self) -> None:
        p = Principal("alice")
        with pytest.raises((AttributeError, TypeError)):
            p.name = "bob"  # type: ignore[misc]

    def test_str_is_name(self) -> None:
        assert str(Principal("asadmin")) == "asadmin"

    def test_kernel_principal_differs_from_plain_principal(self) -> None:
        assert KernelPrincipal("_kernel") != Principal("_kernel")
        assert isinstance(KernelPrincipal("_kernel"), Principal)


class TestSubject:
    def test_of_builds_principals(self) -> None:
        s = Subject.of("alice", ADMIN_GROUP)
        assert s.principal_names() == frozenset({"alice", ADMIN_GROUP})

    def test_duplicates_allowed(self) -> None:
        s = Subject.of("alice", "alice")
        assert len(s.principals) == 2
        assert s.principal_names() == frozenset({"alice"})

    def test_has_principal_is_case_sensitive(self) -> None:
        s = Subject.of(ADMIN_GROUP)
        assert s.has_principal(ADMIN_GROUP) is True
        assert s.has_principal(ADMIN_GROUP.upper()) is False

    def test_principals_of_type(self) -> None:
        s = Subject(principals=(Principal("a"), KernelPrincipal("k")))
        assert s.principals_of_type(KernelPrincipal) == (KernelPrincipal("k"),)

    def test_empty_subject_str(self) -> None:
        assert str(Subject()) == "<anonymous>"

    def test_str_is_sorted_names(self) -> None:
        assert str(Subject.of("b", "a")) == "a,b"


# ---------------------------------------------------------------------------
# Kernel identity
# ---------------------------------------------------------------------------


class TestKernelIdentity:
    def test_default_carries_single_kernel_principal(self) -> None:
        identity = DefaultKernelIdentity()
        assert identity.subject.principals == (KernelPrincipal(KERNEL_PRINCIPAL_NAME),)

    def test_resolve_returns_supplied_identity(self) -> None:
        identity = DefaultKernelIdentity("_custom")
        assert resolve_kernel_identity(identity) is identity

    def test_resolve_builds_fallback(self) -> None:
        resolved = resolve_kernel_identity(None)
        assert isinstance(resolved, DefaultKernelIdentity)

    def test_fallback_is_deterministic(self) -> None:
        a = resolve_kernel_identity(None)
        b = resolve_kernel_identity(None)
        assert a.subject == b.subject

    def test_kernel_subject_recognised(self) -> None:
        identity = DefaultKernelIdentity()
        assert is_kernel_subject(identity.subject, identity) is True

    def test_kernel_subject_with_extra_principals(self) -> None:
        identity = DefaultKernelIdentity()
        subject = Subject(principals=(Principal("alice"), KernelPrincipal(KERNEL_PRINCIPAL_NAME)))
        assert is_kernel_subject(subject, identity) is True

    def test_plain_principal_with_kernel_name_is_not_kernel(self) -> None:
        identity = DefaultKernelIdentity()
        assert is_kernel_subject(Subject.of(KERNEL_PRINCIPAL_NAME), identity) is False

    def test_foreign_kernel_principal_is_not_kernel(self) -> None:
        identity = DefaultKernelIdentity()
        subject = Subject(principals=(KernelPrincipal("_other"),))
        assert is_kernel_subject(subject, identity) is False

    def test_identity_without_kernel_principal_matches_nothing(self) -> None:
        class _Bare:
            subject = Subject.of("x")

        assert is_kernel_subject(Subject.of("x"), _Bare()) is False


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------


class TestConstants:
    def test_trusted_set(self) -> None:
        assert TRUSTED_FOR_DAS_OR_INSTANCE == frozenset({LOCAL_PASSWORD, ADMIN_TOKEN, SERVER})

    def test_admin_group_not_trusted(self) -> None:
        assert ADMIN_GROUP not in TRUSTED_FOR_DAS_OR_INSTANCE

    def test_trusted_set_is_immutable(self) -> None:
        assert isinstance(TRUSTED_FOR_DAS_OR_INSTANCE, frozenset)


# ---------------------------------------------------------------------------
# Resource / Action / Environment
# ---------------------------------------------------------------------------


class TestResource:
    @pytest.mark.parametrize(
        ("uri", "scheme"),
        [
            ("admin://domain/servers", "admin"),
            ("admin:domain", "admin"),
            ("http://example.com", "http"),
            ("ADMIN://x", "ADMIN"),
            ("svc+rest://x", "svc+rest"),
            ("domain/servers", None),
            ("/domain/servers", None),
            ("", None),
            (None, None),
            ("1abc://x", None),
        ],
    )
    def test_scheme(self, uri: str | None, scheme: str | None) -> None:
        assert Resource(uri).scheme == scheme

    def test_str(self) -> None:
        assert str(Resource("admin://x")) == "admin://x"
        assert str(Resource(None)) == "null"


class TestAction:
    def test_read_exact(self) -> None:
        assert Action("read").is_read() is True

    @pytest.mark.parametrize("name", ["Read", "READ", " read", "read ", "write", ""])
    def test_other_actions_are_mutating(self, name: str) -> None:
        assert Action(name).is_read() is False


class TestEnvironment:
    def test_default_empty(self) -> None:
        assert dict(Environment().attributes) == {}

    def test_get(self) -> None:
        env = Environment({"origin": "10.0.0.1"})
        assert env.get("origin") == "10.0.0.1"
        assert env.get("missing", "d") == "d"


# ---------------------------------------------------------------------------
# Decision results
# ---------------------------------------------------------------------------


class TestDecisionResult:
    def test_string_values(self) -> None:
        assert Decision.PERMIT == "PERMIT"
        assert Decision.DENY == "DENY"
        assert Status.OK == "OK"

    def test_defaults(self) -> None:
        result = DecisionResult(decision=Decision.DENY)
        assert result.status is Status.OK
        assert result.obligations.is_empty()
        assert len(result.obligations) == 0

    def test_factories(self) -> None:
        assert DecisionResult.permit().is_permitted() is True
        assert DecisionResult.deny().is_permitted() is False

    def test_equality(self) -> None:
        assert DecisionResult.permit() == DecisionResult.permit()

    def test_obligations_iterable(self) -> None:
        obligations = Obligations((Obligation("log"),))
        assert [o.name for o in obligations] == ["log"]
        assert not obligations.is_empty()

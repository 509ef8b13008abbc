from __future__ import annotations

from src.claims_system.claims_system.core.enums import Role, View
from src.claims_system.claims_system.navigation.router import ViewRouter
from src.claims_system.claims_system.navigation.session import SessionRegistry
from src.claims_system.claims_system.users.model import AdminIdentity


def test_router_starts_on_login():
    router = ViewRouter()
    assert router.current == View.LOGIN


def test_router_switches_by_role():
    router = ViewRouter()
    assert router.show_role_view(Role.LECTURER) == View.LECTURER
    assert router.show_role_view(Role.ADMIN) == View.ADMIN
    assert router.history == [View.LOGIN, View.LECTURER]
    assert router.reset() == View.LOGIN
    assert router.history == []


def test_sessions_are_independent(lecturer, claim_service):
    registry = SessionRegistry()
    a = registry.create()
    b = registry.create()

    a.sign_in(lecturer, draft=claim_service.new_draft(lecturer))
    b.sign_in(AdminIdentity(first_name="Ann", last_name="Admin", unique_id="987654"))

    assert a.view == View.LECTURER
    assert a.claimant == lecturer
    assert b.view == View.ADMIN
    assert b.claimant is None
    assert b.draft is None


def test_sign_out_clears_identity(lecturer, claim_service):
    registry = SessionRegistry()
    s = registry.create()
    s.sign_in(lecturer, draft=claim_service.new_draft(lecturer))

    assert s.sign_out() == View.LOGIN
    assert s.identity is None
    assert s.draft is None


def test_anonymous_sessions_are_not_tracked():
    registry = SessionRegistry()
    s = registry.anonymous()

    assert len(registry) == 0
    assert registry.get(s.session_id) is None


def test_registered_sessions_can_be_looked_up_and_discarded():
    registry = SessionRegistry()
    s = registry.register(registry.anonymous())

    assert len(registry) == 1
    assert registry.get(s.session_id) is s
    assert registry.get("unknown") is None
    assert registry.get(None) is None

    registry.discard(s.session_id)
    assert registry.get(s.session_id) is None
    assert len(registry) == 0

"""
Name: Scope Resolution Tests

Responsibilities:
  - Cover the scope validity matrix (Individual vs Organization)
  - Validate reject precedence over short-circuit
"""

import pytest

from workspace_query.domain.query import QueryDescriptorBuilder, QueryScope
from workspace_query.domain.surfaces import SurfaceKind
from workspace_query.domain.workspace_scope import ScopeOutcome, resolve_scope

pytestmark = pytest.mark.unit


def test_individual_scope_targets_tenant_surface():
    decision = resolve_scope(QueryDescriptorBuilder(QueryScope.INDIVIDUAL).build())

    assert decision.outcome == ScopeOutcome.PROCEED
    assert decision.surface == SurfaceKind.TENANT
    assert decision.should_call_backend


def test_organization_scope_targets_admin_surface():
    decision = resolve_scope(QueryDescriptorBuilder(QueryScope.ORGANIZATION).build())

    assert decision.outcome == ScopeOutcome.PROCEED
    assert decision.surface == SurfaceKind.ADMIN


def test_member_filter_rejected_for_individual_scope():
    descriptor = (
        QueryDescriptorBuilder(QueryScope.INDIVIDUAL)
        .with_member("john@contoso.com")
        .build()
    )
    decision = resolve_scope(descriptor)

    assert decision.outcome == ScopeOutcome.REJECT
    assert decision.reason == "--user is only applied when --scope is set to Organization"
    assert not decision.should_call_backend


def test_reject_wins_over_short_circuit():
    descriptor = (
        QueryDescriptorBuilder(QueryScope.INDIVIDUAL)
        .with_member("john@contoso.com")
        .deleted_only()
        .build()
    )
    assert resolve_scope(descriptor).outcome == ScopeOutcome.REJECT


@pytest.mark.parametrize("flag", ["deleted_only", "orphaned_only"])
def test_deleted_or_orphaned_short_circuit_for_individual(flag):
    builder = QueryDescriptorBuilder(QueryScope.INDIVIDUAL)
    getattr(builder, flag)()
    decision = resolve_scope(builder.build())

    assert decision.outcome == ScopeOutcome.SHORT_CIRCUIT_EMPTY
    assert decision.surface is None


@pytest.mark.parametrize("flag", ["deleted_only", "orphaned_only"])
def test_deleted_or_orphaned_proceed_for_organization(flag):
    builder = QueryDescriptorBuilder(QueryScope.ORGANIZATION)
    getattr(builder, flag)()
    decision = resolve_scope(builder.build())

    assert decision.outcome == ScopeOutcome.PROCEED
    assert decision.surface == SurfaceKind.ADMIN


def test_whitespace_member_filter_is_not_a_member_filter():
    descriptor = QueryDescriptorBuilder(QueryScope.INDIVIDUAL).with_member("   ").build()
    assert resolve_scope(descriptor).outcome == ScopeOutcome.PROCEED

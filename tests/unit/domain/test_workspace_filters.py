"""
Name: Workspace Filter Composition Tests

Responsibilities:
  - Validate predicate precedence and grouping
  - Validate id/name lookups supersede every other predicate
  - Validate case normalization and literal quoting
"""

import pytest

from workspace_query.domain.query import QueryDescriptorBuilder, QueryScope
from workspace_query.domain.workspace_filters import (
    DELETED_PREDICATE,
    ORPHANED_PREDICATE,
    compose_filter,
    conjoin,
    member_predicate,
    name_predicate,
    quote_literal,
)

pytestmark = pytest.mark.unit


def _org() -> QueryDescriptorBuilder:
    return QueryDescriptorBuilder(QueryScope.ORGANIZATION)


def test_no_predicates_yields_no_filter():
    assert compose_filter(_org().build()) is None


def test_single_predicate_is_not_grouped():
    assert compose_filter(_org().deleted_only().build()) == "state eq 'Deleted'"


def test_orphaned_predicate_matches_wire_format():
    assert compose_filter(_org().orphaned_only().build()) == (
        "(not users/any()) or (not users/any(u: u/groupUserAccessRight eq "
        "Microsoft.PowerBI.ServiceContracts.Api.GroupUserAccessRight'Admin'))"
    )


def test_explicit_filter_passed_verbatim():
    descriptor = _org().with_filter("name eq 'n/a'").build()
    assert compose_filter(descriptor) == "name eq 'n/a'"


def test_predicates_compose_in_fixed_order():
    descriptor = (
        _org()
        .with_member("JOHN@contoso.com")
        .orphaned_only()
        .deleted_only()
        .with_filter("type eq 'Workspace'")
        .build()
    )

    assert compose_filter(descriptor) == (
        "(type eq 'Workspace') and "
        f"({DELETED_PREDICATE}) and "
        f"({ORPHANED_PREDICATE}) and "
        "(users/any(u: tolower(u/emailAddress) eq 'john@contoso.com'))"
    )


def test_builder_call_order_does_not_change_filter():
    first = _org().deleted_only().with_filter("a eq 1").build()
    second = _org().with_filter("a eq 1").deleted_only().build()
    assert compose_filter(first) == compose_filter(second)


def test_member_predicate_can_be_left_for_client_side():
    descriptor = _org().deleted_only().with_member("john@contoso.com").build()
    assert compose_filter(descriptor, include_member=False) == DELETED_PREDICATE


def test_member_predicate_is_lowercased():
    assert member_predicate("JOHN@contoso.com") == (
        "users/any(u: tolower(u/emailAddress) eq 'john@contoso.com')"
    )


def test_id_lookup_supersedes_all_other_predicates():
    workspace_id = "11111111-1111-1111-1111-111111111111"
    descriptor = (
        _org()
        .by_id(workspace_id)
        .with_filter("name eq 'x'")
        .deleted_only()
        .orphaned_only()
        .build()
    )
    assert compose_filter(descriptor) == f"id eq '{workspace_id}'"


def test_name_lookup_is_case_insensitive_and_exclusive():
    descriptor = _org().by_name("Test").with_filter("name eq 'x'").deleted_only().build()
    assert compose_filter(descriptor) == "tolower(name) eq 'test'"


def test_quotes_are_escaped_in_literals():
    assert quote_literal("O'Brien") == "'O''Brien'"
    assert name_predicate("O'Brien") == "tolower(name) eq 'o''brien'"


@pytest.mark.parametrize(
    "predicates, expected",
    [
        ([], None),
        (["", "  "], None),
        (["a"], "a"),
        (["a", "", "b"], "(a) and (b)"),
    ],
)
def test_conjoin_never_emits_empty_groups(predicates, expected):
    assert conjoin(predicates) == expected

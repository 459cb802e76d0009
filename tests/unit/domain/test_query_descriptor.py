"""
Name: Query Descriptor Builder Tests

Responsibilities:
  - Validate mode resolution and mutual exclusion
  - Validate lookup modes drop list-only inputs
  - Validate immutability and single build
"""

from dataclasses import FrozenInstanceError

import pytest

from workspace_query.crosscutting.exceptions import QueryValidationError
from workspace_query.domain.query import (
    QueryCapability,
    QueryDescriptorBuilder,
    QueryScope,
    SelectionMode,
)

pytestmark = pytest.mark.unit


def test_defaults_to_individual_list_mode():
    descriptor = QueryDescriptorBuilder().build()

    assert descriptor.scope == QueryScope.INDIVIDUAL
    assert descriptor.selection_mode == SelectionMode.LIST
    assert descriptor.explicit_filter is None
    assert descriptor.top is None and descriptor.skip is None


def test_list_mode_keeps_every_input():
    descriptor = (
        QueryDescriptorBuilder(QueryScope.ORGANIZATION)
        .with_filter(" name eq 'x' ")
        .with_member("john@contoso.com")
        .deleted_only()
        .orphaned_only()
        .exhaustive()
        .window(top=10, skip=20)
        .build()
    )

    assert descriptor.explicit_filter == "name eq 'x'"
    assert descriptor.member_filter == "john@contoso.com"
    assert descriptor.deleted_only and descriptor.orphaned_only
    assert descriptor.exhaustive
    assert (descriptor.top, descriptor.skip) == (10, 20)
    assert descriptor.capabilities == frozenset(QueryCapability)


def test_id_mode_drops_list_only_inputs():
    descriptor = (
        QueryDescriptorBuilder(QueryScope.ORGANIZATION)
        .by_id("11111111-1111-1111-1111-111111111111")
        .with_filter("name eq 'x'")
        .with_member("john@contoso.com")
        .deleted_only()
        .orphaned_only()
        .exhaustive()
        .window(top=5, skip=5)
        .build()
    )

    assert descriptor.selection_mode == SelectionMode.BY_ID
    assert descriptor.workspace_id == "11111111-1111-1111-1111-111111111111"
    assert descriptor.explicit_filter is None
    assert descriptor.member_filter is None
    assert not descriptor.deleted_only and not descriptor.orphaned_only
    assert not descriptor.exhaustive
    assert descriptor.top is None and descriptor.skip is None
    assert descriptor.capabilities == frozenset()


def test_name_mode_is_selected():
    descriptor = QueryDescriptorBuilder().by_name("Finance").build()
    assert descriptor.selection_mode == SelectionMode.BY_NAME
    assert descriptor.name == "Finance"


def test_id_and_name_are_mutually_exclusive():
    builder = QueryDescriptorBuilder().by_id("abc").by_name("Finance")
    with pytest.raises(QueryValidationError):
        builder.build()


@pytest.mark.parametrize("window", [{"top": -1}, {"skip": -5}])
def test_negative_window_is_rejected(window):
    with pytest.raises(QueryValidationError):
        QueryDescriptorBuilder().window(**window).build()


def test_blank_name_is_rejected():
    with pytest.raises(QueryValidationError):
        QueryDescriptorBuilder().by_name("  ").build()


def test_builder_cannot_build_twice():
    builder = QueryDescriptorBuilder()
    builder.build()
    with pytest.raises(QueryValidationError):
        builder.build()


def test_descriptor_is_immutable():
    descriptor = QueryDescriptorBuilder().build()
    with pytest.raises(FrozenInstanceError):
        descriptor.explicit_filter = "state eq 'Deleted'"

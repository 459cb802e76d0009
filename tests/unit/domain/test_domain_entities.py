"""Unit tests for workspace entities."""

import pytest

from workspace_query.domain.entities import (
    AccessRight,
    Workspace,
    WorkspaceState,
    WorkspaceType,
    WorkspaceUser,
)

pytestmark = pytest.mark.unit


def test_users_default_to_empty_tuple():
    workspace = Workspace(id="1", name="Finance", users=None)
    assert workspace.users == ()


def test_users_list_is_frozen_into_tuple():
    workspace = Workspace(id="1", name="Finance", users=[WorkspaceUser("a@x.com")])
    assert isinstance(workspace.users, tuple)


def test_member_match_is_case_insensitive():
    workspace = Workspace(
        id="1",
        name="Finance",
        users=(WorkspaceUser("john@x.com", AccessRight.MEMBER),),
    )
    assert workspace.has_member("JOHN@x.com")
    assert not workspace.has_member("jane@x.com")


def test_service_principal_without_name_never_matches():
    user = WorkspaceUser(principal_name=None, access_right=AccessRight.ADMIN)
    assert not user.matches("john@x.com")


def test_is_deleted():
    assert Workspace(id="1", name="a", state=WorkspaceState.DELETED).is_deleted
    assert not Workspace(id="1", name="a").is_deleted


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Workspace", WorkspaceType.WORKSPACE),
        ("PersonalGroup", WorkspaceType.PERSONAL_GROUP),
        ("Group", WorkspaceType.GROUP),
        ("Something", WorkspaceType.OTHER),
        (None, WorkspaceType.OTHER),
    ],
)
def test_workspace_type_parse(raw, expected):
    assert WorkspaceType.parse(raw) == expected


def test_access_right_parse_unknown_is_none():
    assert AccessRight.parse("Owner") == AccessRight.NONE
    assert AccessRight.parse("Admin") == AccessRight.ADMIN

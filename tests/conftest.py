"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures
  - Provide recording fakes for the tenant/admin read surfaces
  - Configure test environment (no .env, no network)

Collaborators:
  - pytest: Test framework
  - workspace_query.domain: entities and surface protocols

Notes:
  - Fakes record every call so tests can assert "no backend call" and the
    exact filter/top/skip that was sent.
"""

import os
import sys
from pathlib import Path
from typing import Callable, List, Optional
from uuid import uuid4

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from workspace_query.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from workspace_query.domain.entities import (  # noqa: E402
    AccessRight,
    Workspace,
    WorkspaceState,
    WorkspaceUser,
)

os.environ.setdefault("APP_ENV", "test")


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


# ============================================================================
# Recording fakes
# ============================================================================


class FakeTenantSurface:
    """TenantSurface que sirve una lista fija y registra cada llamada."""

    def __init__(self, workspaces: Optional[List[Workspace]] = None):
        self.workspaces = list(workspaces or [])
        self.calls: list[dict] = []

    def list(self, filter=None, top=None, skip=None):
        self.calls.append({"filter": filter, "top": top, "skip": skip})
        return list(self.workspaces)


class FakeAdminSurface:
    """
    AdminSurface que pagina una lista fija con top/skip.

    fail_on_call: número de llamada (1-based) que lanza `error`.
    """

    def __init__(
        self,
        workspaces: Optional[List[Workspace]] = None,
        *,
        fail_on_call: int | None = None,
        error: Exception | None = None,
        return_none: bool = False,
    ):
        self.workspaces = list(workspaces or [])
        self.calls: list[dict] = []
        self._fail_on_call = fail_on_call
        self._error = error
        self._return_none = return_none

    def list(self, expand, filter=None, top=None, skip=None):
        self.calls.append({"expand": expand, "filter": filter, "top": top, "skip": skip})
        if self._fail_on_call is not None and len(self.calls) == self._fail_on_call:
            raise self._error
        if self._return_none:
            return None
        start = skip or 0
        end = start + top if top is not None else len(self.workspaces)
        return self.workspaces[start:end]


# ============================================================================
# Fixtures
# ============================================================================


def make_workspace(
    name: str = "Finance",
    *,
    members: tuple = (),
    state: WorkspaceState = WorkspaceState.ACTIVE,
) -> Workspace:
    users = tuple(
        WorkspaceUser(principal_name=principal, access_right=right)
        for principal, right in members
    )
    return Workspace(id=str(uuid4()), name=name, state=state, users=users)


@pytest.fixture
def workspace_factory() -> Callable[..., Workspace]:
    return make_workspace


@pytest.fixture
def sample_workspaces() -> List[Workspace]:
    return [
        make_workspace("Finance", members=(("ana@contoso.com", AccessRight.ADMIN),)),
        make_workspace("Sales", members=(("john@contoso.com", AccessRight.MEMBER),)),
        make_workspace("Legal"),
    ]


@pytest.fixture
def tenant_surface(sample_workspaces) -> FakeTenantSurface:
    return FakeTenantSurface(sample_workspaces)


@pytest.fixture
def admin_surface(sample_workspaces) -> FakeAdminSurface:
    return FakeAdminSurface(sample_workspaces)


@pytest.fixture
def admin_surface_factory() -> Callable[..., FakeAdminSurface]:
    return FakeAdminSurface


@pytest.fixture
def tenant_surface_factory() -> Callable[..., FakeTenantSurface]:
    return FakeTenantSurface

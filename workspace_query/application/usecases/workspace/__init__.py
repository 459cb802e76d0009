"""
===============================================================================
WORKSPACE USE CASES PACKAGE (Public API / Exports)
===============================================================================

Expone un punto único de importación para el listado de workspaces, su
paginación y sus modelos de resultado.
===============================================================================
"""

from __future__ import annotations

from .list_workspaces import ListWorkspacesUseCase
from .workspace_pagination import (
    DEFAULT_PAGE_SIZE,
    FullEnumerator,
    PageStats,
    SurfacePageExecutor,
    filter_by_member,
)
from .workspace_results import (
    WorkspaceError,
    WorkspaceErrorCode,
    WorkspaceListResult,
    emit_workspaces,
)

__all__ = [
    # Use Cases
    "ListWorkspacesUseCase",
    # Pagination
    "DEFAULT_PAGE_SIZE",
    "FullEnumerator",
    "PageStats",
    "SurfacePageExecutor",
    "filter_by_member",
    # Result models
    "WorkspaceError",
    "WorkspaceErrorCode",
    "WorkspaceListResult",
    "emit_workspaces",
]

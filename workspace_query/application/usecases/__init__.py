"""
Use cases package (public exports).
"""

from .workspace import (
    ListWorkspacesUseCase,
    WorkspaceError,
    WorkspaceErrorCode,
    WorkspaceListResult,
)

__all__ = [
    "ListWorkspacesUseCase",
    "WorkspaceError",
    "WorkspaceErrorCode",
    "WorkspaceListResult",
]

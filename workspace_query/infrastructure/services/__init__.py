"""
Infrastructure services: HTTP client for the workspaces read surfaces.
"""

from .workspaces_api_client import (
    AdminWorkspacesSurface,
    TenantWorkspacesSurface,
    WorkspacesApiClient,
)

__all__ = [
    "AdminWorkspacesSurface",
    "TenantWorkspacesSurface",
    "WorkspacesApiClient",
]

"""
Domain layer: entities, query descriptor, filter composition, scope policy.

Sin dependencias a HTTP/CLI.
"""

from .entities import (
    AccessRight,
    Workspace,
    WorkspaceState,
    WorkspaceType,
    WorkspaceUser,
)
from .query import (
    QueryCapability,
    QueryDescriptor,
    QueryDescriptorBuilder,
    QueryScope,
    SelectionMode,
)
from .surfaces import USERS_EXPANSION, AdminSurface, SurfaceKind, TenantSurface
from .workspace_filters import compose_filter
from .workspace_scope import ScopeDecision, ScopeOutcome, resolve_scope

__all__ = [
    "AccessRight",
    "Workspace",
    "WorkspaceState",
    "WorkspaceType",
    "WorkspaceUser",
    "QueryCapability",
    "QueryDescriptor",
    "QueryDescriptorBuilder",
    "QueryScope",
    "SelectionMode",
    "USERS_EXPANSION",
    "AdminSurface",
    "SurfaceKind",
    "TenantSurface",
    "compose_filter",
    "ScopeDecision",
    "ScopeOutcome",
    "resolve_scope",
]

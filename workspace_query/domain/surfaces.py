"""
CRC — domain/surfaces.py

Name
- Backend Read Surfaces (Protocols)

Responsibilities
- Define the two read contracts the engine consumes (ports).
- Keep the application layer independent from the HTTP transport.
- Enable straightforward unit testing with recording fakes.

Collaborators
- domain.entities: Workspace
- infrastructure.services.workspaces_api_client: HTTP implementations

Constraints
- Pure interfaces only: no retry, no error translation.
- Failures surface as TransportError raised by the implementation.
"""

from enum import Enum
from typing import List, Optional, Protocol

from .entities import Workspace

USERS_EXPANSION = "users"


class SurfaceKind(str, Enum):
    """Which backend read endpoint a request targets."""

    TENANT = "tenant"
    ADMIN = "admin"


class TenantSurface(Protocol):
    """
    R: Individual-scope listing (caller's own workspaces).

    Members are never expanded on this surface.
    """

    def list(
        self,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> Optional[List[Workspace]]:
        """R: One page of workspaces, in backend order."""
        ...


class AdminSurface(Protocol):
    """R: Organization-scope listing with member expansion."""

    def list(
        self,
        expand: str,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> Optional[List[Workspace]]:
        """R: One page of workspaces, members populated when expand="users"."""
        ...

"""
===============================================================================
TARJETA CRC — interfaces/cli/schemas.py
===============================================================================

Módulo:
    Schemas de salida para el CLI

Responsabilidades:
    - Serializar Workspace/WorkspaceUser a JSON estable (camelCase como el
      servicio).
    - Mantener la entidad de dominio libre de detalles de serialización.

Colaboradores:
    - domain.entities
    - interfaces/cli/main.py
===============================================================================
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...domain.entities import (
    AccessRight,
    Workspace,
    WorkspaceState,
    WorkspaceType,
    WorkspaceUser,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WorkspaceUserRes(_CamelModel):
    """Miembro del workspace."""

    principal_name: str | None = None
    access_right: AccessRight = AccessRight.NONE

    @classmethod
    def from_entity(cls, user: WorkspaceUser) -> "WorkspaceUserRes":
        return cls(principal_name=user.principal_name, access_right=user.access_right)


class WorkspaceRes(_CamelModel):
    """Workspace tal como se imprime (una línea JSON por workspace)."""

    id: str
    name: str
    type: WorkspaceType
    state: WorkspaceState
    users: list[WorkspaceUserRes] = Field(default_factory=list)
    description: str | None = None
    is_read_only: bool | None = None
    is_on_dedicated_capacity: bool | None = None
    capacity_id: str | None = None

    @classmethod
    def from_entity(cls, workspace: Workspace) -> "WorkspaceRes":
        return cls(
            id=workspace.id,
            name=workspace.name,
            type=workspace.type,
            state=workspace.state,
            users=[WorkspaceUserRes.from_entity(u) for u in workspace.users],
            description=workspace.description,
            is_read_only=workspace.is_read_only,
            is_on_dedicated_capacity=workspace.is_on_dedicated_capacity,
            capacity_id=workspace.capacity_id,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

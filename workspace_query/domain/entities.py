"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (Workspace, WorkspaceUser)

Responsabilidades:
    - Definir las proyecciones de solo lectura que devuelve el servicio.
    - Brindar helpers mínimos (membresía, estado) sin lógica pesada.
    - Normalizar "users" ausente a secuencia vacía.

Colaboradores:
    - infrastructure.services.workspaces_api_client: construye estas entidades.
    - application/usecases/workspace: las consume y filtra.
    - interfaces/cli: las serializa.

Principios:
    - Sin dependencias a HTTP/CLI.
    - Este motor nunca crea, muta ni elimina workspaces: dataclasses frozen.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class WorkspaceType(str, Enum):
    """Tipo de contenedor expuesto por el servicio."""

    WORKSPACE = "Workspace"
    PERSONAL_GROUP = "PersonalGroup"
    GROUP = "Group"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: str | None) -> "WorkspaceType":
        for member in cls:
            if member.value == value:
                return member
        return cls.OTHER


class WorkspaceState(str, Enum):
    """Estado del ciclo de vida."""

    ACTIVE = "Active"
    DELETED = "Deleted"


class AccessRight(str, Enum):
    """Permiso de un miembro sobre el workspace."""

    ADMIN = "Admin"
    MEMBER = "Member"
    CONTRIBUTOR = "Contributor"
    VIEWER = "Viewer"
    NONE = "None"

    @classmethod
    def parse(cls, value: str | None) -> "AccessRight":
        for member in cls:
            if member.value == value:
                return member
        return cls.NONE


# ---------------------------------------------------------------------------
# WorkspaceUser
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WorkspaceUser:
    """
    Miembro de un workspace.

    principal_name puede ser None (service principals).
    """

    principal_name: Optional[str]
    access_right: AccessRight = AccessRight.NONE

    def matches(self, principal_name: str) -> bool:
        """Igualdad case-insensitive; un nombre nulo nunca coincide."""
        if self.principal_name is None:
            return False
        return self.principal_name.lower() == principal_name.lower()


# ---------------------------------------------------------------------------
# Workspace
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Workspace:
    """Workspace: contenedor de colaboración con miembros y estado."""

    id: str
    name: str
    type: WorkspaceType = WorkspaceType.WORKSPACE
    state: WorkspaceState = WorkspaceState.ACTIVE
    users: Tuple[WorkspaceUser, ...] = field(default_factory=tuple)

    # Atributos informativos (solo lectura)
    description: Optional[str] = None
    is_read_only: Optional[bool] = None
    is_on_dedicated_capacity: Optional[bool] = None
    capacity_id: Optional[str] = None

    def __post_init__(self) -> None:
        # users nunca es None: ausencia == vacío.
        if self.users is None:
            object.__setattr__(self, "users", ())
        elif not isinstance(self.users, tuple):
            object.__setattr__(self, "users", tuple(self.users))

    @property
    def is_deleted(self) -> bool:
        """True si el servicio lo reporta eliminado."""
        return self.state == WorkspaceState.DELETED

    def has_member(self, principal_name: str) -> bool:
        """True si algún miembro coincide (case-insensitive)."""
        return any(user.matches(principal_name) for user in self.users)

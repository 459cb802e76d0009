"""
===============================================================================
TARJETA CRC — domain/workspace_filters.py
===============================================================================

Módulo:
    Composición de filtros OData para listados de workspaces

Responsabilidades:
    - Construir cada sub-predicado (deleted, orphaned, member, id, name).
    - Componer los predicados presentes en un único filtro, en orden fijo,
      agrupando con paréntesis y uniendo con "and".
    - Garantizar que id/name reemplazan a todo lo demás.

Colaboradores:
    - domain.query.QueryDescriptor (input)
    - application/usecases/workspace (consume compose_filter)

Reglas:
    - Funciones puras: mismo descriptor => mismo string.
    - Sin predicados => None (el parámetro se omite, "match all").
    - Comparaciones de nombre/miembro en minúsculas en ambos lados.
===============================================================================
"""

from __future__ import annotations

from typing import Final, List, Optional

from .entities import AccessRight, WorkspaceState
from .query import QueryDescriptor, SelectionMode

# Grupos sin usuarios llegan con users nulo (no lista vacía), por eso
# "not users/any()" cubre ese caso sin filtrar por tipo.
ORPHANED_PREDICATE: Final[str] = (
    "(not users/any()) or "
    "(not users/any(u: u/groupUserAccessRight eq "
    f"Microsoft.PowerBI.ServiceContracts.Api.GroupUserAccessRight'{AccessRight.ADMIN.value}'))"
)

DELETED_PREDICATE: Final[str] = f"state eq '{WorkspaceState.DELETED.value}'"


def quote_literal(value: str) -> str:
    """Literal OData entre comillas simples (comilla interna duplicada)."""
    return "'" + value.replace("'", "''") + "'"


def id_predicate(workspace_id: str) -> str:
    return f"id eq {quote_literal(str(workspace_id))}"


def name_predicate(name: str) -> str:
    return f"tolower(name) eq {quote_literal(name.lower())}"


def member_predicate(principal_name: str) -> str:
    return f"users/any(u: tolower(u/emailAddress) eq {quote_literal(principal_name.lower())})"


def conjoin(predicates: List[str]) -> Optional[str]:
    """
    Une predicados con "and".

    - 0 predicados => None
    - 1 predicado  => tal cual (sin grupo redundante)
    - N predicados => "(p1) and (p2) and ..."
    """
    present = [p for p in predicates if p and p.strip()]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return " and ".join(f"({p})" for p in present)


def compose_filter(
    descriptor: QueryDescriptor, *, include_member: bool = True
) -> Optional[str]:
    """
    Compone el filtro final del descriptor.

    include_member=False deja el predicado de miembro fuera (el llamador lo
    resuelve client-side, p.ej. en enumeración exhaustiva).
    """
    if descriptor.selection_mode == SelectionMode.BY_ID:
        return id_predicate(descriptor.workspace_id or "")

    if descriptor.selection_mode == SelectionMode.BY_NAME:
        return name_predicate(descriptor.name or "")

    predicates: List[str] = []
    if descriptor.explicit_filter:
        predicates.append(descriptor.explicit_filter)
    if descriptor.deleted_only:
        predicates.append(DELETED_PREDICATE)
    if descriptor.orphaned_only:
        predicates.append(ORPHANED_PREDICATE)
    if include_member and descriptor.member_filter:
        predicates.append(member_predicate(descriptor.member_filter))

    return conjoin(predicates)

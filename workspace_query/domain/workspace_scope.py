"""
===============================================================================
TARJETA CRC — domain/workspace_scope.py
===============================================================================

Módulo:
    Resolución de scope (validez del request + superficie destino)

Responsabilidades:
    - Rechazar combinaciones ilegales (filtro por usuario en scope Individual).
    - Cortocircuitar a vacío lo estructuralmente imposible (deleted/orphaned
      en scope Individual).
    - Elegir superficie: ADMIN para Organization, TENANT para Individual.

Colaboradores:
    - domain.query.QueryDescriptor
    - domain.surfaces.SurfaceKind
    - application/usecases/workspace/list_workspaces (consume la decisión)

Reglas:
    - Funciones puras: sin I/O. Ninguna llamada al backend en REJECT ni
      SHORT_CIRCUIT_EMPTY.
    - REJECT se evalúa antes que SHORT_CIRCUIT_EMPTY.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .query import QueryDescriptor, QueryScope
from .surfaces import SurfaceKind


class ScopeOutcome(str, Enum):
    REJECT = "reject"
    SHORT_CIRCUIT_EMPTY = "short_circuit_empty"
    PROCEED = "proceed"


@dataclass(frozen=True, slots=True)
class ScopeDecision:
    """Resultado de resolve_scope."""

    outcome: ScopeOutcome
    surface: Optional[SurfaceKind] = None
    reason: Optional[str] = None

    @classmethod
    def reject(cls, reason: str) -> "ScopeDecision":
        return cls(outcome=ScopeOutcome.REJECT, reason=reason)

    @classmethod
    def short_circuit_empty(cls, reason: str) -> "ScopeDecision":
        return cls(outcome=ScopeOutcome.SHORT_CIRCUIT_EMPTY, reason=reason)

    @classmethod
    def proceed(cls, surface: SurfaceKind) -> "ScopeDecision":
        return cls(outcome=ScopeOutcome.PROCEED, surface=surface)

    @property
    def should_call_backend(self) -> bool:
        return self.outcome == ScopeOutcome.PROCEED


def resolve_scope(descriptor: QueryDescriptor) -> ScopeDecision:
    """Evalúa validez del descriptor y superficie destino."""
    individual = descriptor.scope == QueryScope.INDIVIDUAL

    if individual and descriptor.member_filter:
        return ScopeDecision.reject(
            "--user is only applied when --scope is set to Organization"
        )

    if individual and descriptor.deleted_only:
        # Una vista individual nunca expone workspaces eliminados.
        return ScopeDecision.short_circuit_empty(
            "Deleted workspaces are not visible with Individual scope"
        )

    if individual and descriptor.orphaned_only:
        # Los huérfanos no tienen asignaciones: no aparecen en scope Individual.
        return ScopeDecision.short_circuit_empty(
            "Orphaned workspaces are not visible with Individual scope"
        )

    if individual:
        return ScopeDecision.proceed(SurfaceKind.TENANT)
    return ScopeDecision.proceed(SurfaceKind.ADMIN)

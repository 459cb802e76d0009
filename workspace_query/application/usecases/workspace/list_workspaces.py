"""
===============================================================================
USE CASE: List Workspaces
===============================================================================

Name:
    List Workspaces Use Case

Business Goal:
    Resolver un QueryDescriptor en las llamadas mínimas y correctas contra
    una de las dos superficies de lectura, y devolver una única secuencia
    ordenada y consistente.

Why (Context / Intención):
    - Los criterios del caller se solapan parcialmente (id, name, filter,
      deleted, orphaned, user, paginación, All) y no todos son legales juntos.
    - Centralizar el flujo evita reglas de scope inconsistentes entre
      interfaces (CLI hoy, otras mañana).

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    ListWorkspacesUseCase

Responsibilities:
    - Resolver scope (REJECT / SHORT_CIRCUIT_EMPTY / PROCEED).
    - Componer el filtro (con o sin predicado de miembro).
    - Elegir página única o enumeración exhaustiva.
    - Devolver WorkspaceListResult sin transformar la secuencia.

Collaborators:
    - domain.workspace_scope.resolve_scope
    - domain.workspace_filters.compose_filter
    - workspace_pagination: SurfacePageExecutor, FullEnumerator
    - workspace_results: WorkspaceListResult / WorkspaceError

-------------------------------------------------------------------------------
INPUTS / OUTPUTS (Contrato del caso de uso)
-------------------------------------------------------------------------------
Inputs:
    - descriptor: QueryDescriptor (inmutable)

Outputs:
    - WorkspaceListResult:
        - workspaces: list[Workspace] (vacía es éxito)
        - error: WorkspaceError | None

Error Mapping:
    Las validaciones viajan por dos canales:
    - QueryValidationError (raise): inputs mal formados, detectados por
      QueryDescriptorBuilder.build() antes de llegar a este caso de uso.
    - VALIDATION_ERROR (en WorkspaceListResult.error): combinación legal
      sintácticamente pero rechazada por scope (User con scope Individual).
      Sin llamada al backend.
    - TransportError: se propaga sin traducción

    La CLI trata ambos canales de validación con el mismo exit code.
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4

from ....context import clear_context, set_invocation_context, set_surface_context
from ....crosscutting.logger import logger
from ....domain.query import QueryDescriptor
from ....domain.surfaces import AdminSurface, SurfaceKind, TenantSurface
from ....domain.workspace_filters import compose_filter
from ....domain.workspace_scope import ScopeOutcome, resolve_scope
from .workspace_pagination import (
    DEFAULT_PAGE_SIZE,
    FullEnumerator,
    PageStats,
    SurfacePageExecutor,
)
from .workspace_results import (
    WorkspaceError,
    WorkspaceErrorCode,
    WorkspaceListResult,
    emit_workspaces,
)


class ListWorkspacesUseCase:
    """
    Use Case (Application Service / Query):
        Lista workspaces según scope, filtros y ventana de paginación.

    Nota de diseño:
        - Individual -> superficie tenant (sin miembros).
        - Organization -> superficie admin (expand=users).
        - All (solo Organization) -> enumeración exhaustiva; el filtro por
          usuario se aplica client-side en ese camino.
    """

    def __init__(
        self,
        tenant_surface: TenantSurface,
        admin_surface: AdminSurface,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._executor = SurfacePageExecutor(tenant_surface, admin_surface)
        self._enumerator = FullEnumerator(self._executor, page_size=page_size)

    def execute(self, descriptor: QueryDescriptor) -> WorkspaceListResult:
        """
        Ejecuta el listado.

        Reglas:
          - Sin llamadas al backend en REJECT o SHORT_CIRCUIT_EMPTY.
          - top/skip se ignoran en enumeración exhaustiva.
          - El resultado se entrega en el orden recibido.
        """
        set_invocation_context(
            invocation_id=uuid4().hex, scope=descriptor.scope.value
        )
        try:
            return self._execute(descriptor)
        finally:
            clear_context()

    def _execute(self, descriptor: QueryDescriptor) -> WorkspaceListResult:
        # ---------------------------------------------------------------------
        # 1) Scope: validez + superficie.
        # ---------------------------------------------------------------------
        decision = resolve_scope(descriptor)

        if decision.outcome == ScopeOutcome.REJECT:
            logger.warning(
                "workspace_query: request rejected",
                extra={"reason": decision.reason},
            )
            return WorkspaceListResult(
                error=WorkspaceError(
                    code=WorkspaceErrorCode.VALIDATION_ERROR,
                    message=decision.reason or "Invalid request.",
                )
            )

        if decision.outcome == ScopeOutcome.SHORT_CIRCUIT_EMPTY:
            logger.info(
                "workspace_query: empty by scope",
                extra={"reason": decision.reason},
            )
            return emit_workspaces([])

        surface = decision.surface
        set_surface_context(surface.value)
        stats = PageStats()

        # ---------------------------------------------------------------------
        # 2) Enumeración exhaustiva (solo superficie admin).
        # ---------------------------------------------------------------------
        if descriptor.exhaustive and surface == SurfaceKind.ADMIN:
            filter_expr = compose_filter(descriptor, include_member=False)
            workspaces = self._enumerator.enumerate_all(
                filter_expr,
                descriptor.member_filter,
                surface=surface,
                stats=stats,
            )
            return emit_workspaces(workspaces, backend_calls=stats.calls)

        if descriptor.exhaustive:
            # All no está disponible en scope Individual: una página normal.
            logger.warning(
                "workspace_query: All ignored for Individual scope",
            )

        # ---------------------------------------------------------------------
        # 3) Página única con filtro completo (miembro server-side).
        # ---------------------------------------------------------------------
        filter_expr = compose_filter(descriptor, include_member=True)
        workspaces = self._executor.execute(
            surface,
            filter_expr,
            top=descriptor.top,
            skip=descriptor.skip,
            stats=stats,
        )
        return emit_workspaces(workspaces, backend_calls=stats.calls)

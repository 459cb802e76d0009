"""
===============================================================================
WORKSPACE PAGINATION (Single Page Executor + Full Enumerator)
===============================================================================

Name:
    Workspace Pagination

Business Goal:
    Ejecutar listados contra la superficie elegida:
      - una página acotada (top/skip) sin paginar internamente
      - o enumeración exhaustiva con page size fijo, acumulando en orden

Why (Context / Intención):
    - El backend admin limita cada request; para "todo" hay que paginar.
    - El filtro por miembro no se combina de forma segura con la enumeración
      exhaustiva en un único predicado: se resuelve client-side.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    SurfacePageExecutor, FullEnumerator

Responsibilities:
    - Emitir exactamente un request por página (sin retry).
    - Admin: expand="users" siempre. Tenant: nunca expande.
    - Terminar la enumeración con la regla "página corta": se corta solo si
      una ronda devuelve menos de P items. Una página llena siempre dispara
      otra ronda, así un total múltiplo exacto de P se confirma con una
      página vacía.
    - Filtrar por miembro (case-insensitive, estable) sin nuevas llamadas.

Collaborators:
    - domain.surfaces: TenantSurface, AdminSurface, SurfaceKind
    - domain.entities: Workspace
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, List, Optional

from ....crosscutting.logger import logger
from ....domain.entities import Workspace
from ....domain.surfaces import (
    USERS_EXPANSION,
    AdminSurface,
    SurfaceKind,
    TenantSurface,
)

DEFAULT_PAGE_SIZE: Final[int] = 5000


@dataclass
class PageStats:
    """Contador de requests emitidos (una instancia por invocación)."""

    calls: int = 0


class SurfacePageExecutor:
    """
    Ejecuta una página acotada contra la superficie indicada.

    Los errores del transporte se propagan sin traducción.
    """

    def __init__(self, tenant_surface: TenantSurface, admin_surface: AdminSurface):
        self._tenant = tenant_surface
        self._admin = admin_surface

    def execute(
        self,
        surface: SurfaceKind,
        filter: Optional[str],
        top: Optional[int] = None,
        skip: Optional[int] = None,
        *,
        stats: PageStats | None = None,
    ) -> List[Workspace]:
        logger.debug(
            "workspace_query: page request",
            extra={"surface": surface.value, "filter": filter, "top": top, "skip": skip},
        )
        if stats is not None:
            stats.calls += 1

        if surface == SurfaceKind.ADMIN:
            page = self._admin.list(USERS_EXPANSION, filter=filter, top=top, skip=skip)
        else:
            page = self._tenant.list(filter=filter, top=top, skip=skip)

        return list(page or [])


class FullEnumerator:
    """Enumeración exhaustiva contra la superficie admin."""

    def __init__(
        self,
        executor: SurfacePageExecutor,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        if page_size <= 0:
            raise ValueError("page_size must be greater than 0")
        self._executor = executor
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def enumerate_all(
        self,
        filter: Optional[str],
        member_filter: Optional[str] = None,
        *,
        surface: SurfaceKind = SurfaceKind.ADMIN,
        stats: PageStats | None = None,
    ) -> List[Workspace]:
        """
        Recorre todas las páginas y devuelve la secuencia acumulada.

        Si una página falla, la excepción se propaga y lo acumulado se
        descarta (no hay entrega parcial).
        """
        stats = stats if stats is not None else PageStats()
        accumulated: List[Workspace] = []
        skip = 0

        while True:
            page = self._executor.execute(
                surface, filter, top=self._page_size, skip=skip, stats=stats
            )
            accumulated.extend(page)
            if len(page) < self._page_size:
                break
            skip += self._page_size

        logger.info(
            "workspace_query: enumeration complete",
            extra={
                "pages": stats.calls,
                "page_size": self._page_size,
                "total": len(accumulated),
            },
        )

        if not member_filter:
            return accumulated

        matched = filter_by_member(accumulated, member_filter)
        logger.info(
            "workspace_query: member post-filter",
            extra={"before": len(accumulated), "after": len(matched)},
        )
        return matched


def filter_by_member(
    workspaces: List[Workspace], principal_name: str
) -> List[Workspace]:
    """Mantiene (en orden) los workspaces con algún miembro coincidente."""
    return [ws for ws in workspaces if ws.has_member(principal_name)]

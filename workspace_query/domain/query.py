"""
===============================================================================
TARJETA CRC — domain/query.py
===============================================================================

Módulo:
    QueryDescriptor (request resuelto) + Builder

Responsabilidades:
    - Representar el request validado como valor inmutable (frozen).
    - Normalizar inputs según el modo de selección activo (ById/ByName/List)
      usando un set de capacidades por modo, no herencia.
    - Validar rangos simples (top/skip no negativos, un único modo activo).

Colaboradores:
    - domain.workspace_scope: decide superficie a partir del descriptor.
    - domain.workspace_filters: compone el filtro a partir del descriptor.
    - interfaces/cli: construye el descriptor desde argumentos.

Reglas:
    - El descriptor se construye una sola vez (build()) y no se reescribe.
    - ById/ByName descartan filter/top/skip/deleted/orphaned/user/All.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Mapping, Optional

from ..crosscutting.exceptions import QueryValidationError


class QueryScope(str, Enum):
    """Alcance de visibilidad."""

    INDIVIDUAL = "Individual"
    ORGANIZATION = "Organization"


class SelectionMode(str, Enum):
    """Modo de selección (mutuamente excluyentes)."""

    BY_ID = "Id"
    BY_NAME = "Name"
    LIST = "List"


class QueryCapability(str, Enum):
    """Inputs opcionales que un modo de selección acepta."""

    FILTER = "filter"
    PAGINATION = "pagination"
    DELETED = "deleted"
    ORPHANED = "orphaned"
    MEMBER = "member"
    EXHAUSTIVE = "exhaustive"


_LIST_CAPABILITIES: FrozenSet[QueryCapability] = frozenset(QueryCapability)
_LOOKUP_CAPABILITIES: FrozenSet[QueryCapability] = frozenset()

MODE_CAPABILITIES: Mapping[SelectionMode, FrozenSet[QueryCapability]] = {
    SelectionMode.BY_ID: _LOOKUP_CAPABILITIES,
    SelectionMode.BY_NAME: _LOOKUP_CAPABILITIES,
    SelectionMode.LIST: _LIST_CAPABILITIES,
}


@dataclass(frozen=True)
class QueryDescriptor:
    """Request validado sobre el que actúa el motor."""

    scope: QueryScope = QueryScope.INDIVIDUAL
    selection_mode: SelectionMode = SelectionMode.LIST
    workspace_id: Optional[str] = None
    name: Optional[str] = None
    explicit_filter: Optional[str] = None
    deleted_only: bool = False
    orphaned_only: bool = False
    member_filter: Optional[str] = None
    exhaustive: bool = False
    top: Optional[int] = None
    skip: Optional[int] = None

    @property
    def capabilities(self) -> FrozenSet[QueryCapability]:
        return MODE_CAPABILITIES[self.selection_mode]


class QueryDescriptorBuilder:
    """
    Builder del QueryDescriptor.

    Acumula inputs "crudos" del caller y en build() produce el valor final,
    ya normalizado. Después de build() el builder no puede reutilizarse.
    """

    def __init__(self, scope: QueryScope = QueryScope.INDIVIDUAL) -> None:
        self._scope = scope
        self._workspace_id: Optional[str] = None
        self._name: Optional[str] = None
        self._filter: Optional[str] = None
        self._deleted = False
        self._orphaned = False
        self._member: Optional[str] = None
        self._exhaustive = False
        self._top: Optional[int] = None
        self._skip: Optional[int] = None
        self._built = False

    def by_id(self, workspace_id: str) -> "QueryDescriptorBuilder":
        self._workspace_id = workspace_id
        return self

    def by_name(self, name: str) -> "QueryDescriptorBuilder":
        self._name = name
        return self

    def with_filter(self, expression: str | None) -> "QueryDescriptorBuilder":
        self._filter = expression
        return self

    def deleted_only(self, flag: bool = True) -> "QueryDescriptorBuilder":
        self._deleted = flag
        return self

    def orphaned_only(self, flag: bool = True) -> "QueryDescriptorBuilder":
        self._orphaned = flag
        return self

    def with_member(self, principal_name: str | None) -> "QueryDescriptorBuilder":
        self._member = principal_name
        return self

    def exhaustive(self, flag: bool = True) -> "QueryDescriptorBuilder":
        self._exhaustive = flag
        return self

    def window(
        self, *, top: int | None = None, skip: int | None = None
    ) -> "QueryDescriptorBuilder":
        self._top = top
        self._skip = skip
        return self

    def build(self) -> QueryDescriptor:
        """Valida, normaliza y congela el request."""
        if self._built:
            raise QueryValidationError("QueryDescriptorBuilder.build() already called")
        self._built = True

        mode = self._resolve_mode()
        caps = MODE_CAPABILITIES[mode]

        for label, value in (("top", self._top), ("skip", self._skip)):
            if value is not None and value < 0:
                raise QueryValidationError(f"{label} must be >= 0 (got {value})")

        member = (self._member or "").strip() or None
        explicit = (self._filter or "").strip() or None

        return QueryDescriptor(
            scope=self._scope,
            selection_mode=mode,
            workspace_id=self._workspace_id if mode == SelectionMode.BY_ID else None,
            name=self._name if mode == SelectionMode.BY_NAME else None,
            explicit_filter=explicit if QueryCapability.FILTER in caps else None,
            deleted_only=self._deleted and QueryCapability.DELETED in caps,
            orphaned_only=self._orphaned and QueryCapability.ORPHANED in caps,
            member_filter=member if QueryCapability.MEMBER in caps else None,
            exhaustive=self._exhaustive and QueryCapability.EXHAUSTIVE in caps,
            top=self._top if QueryCapability.PAGINATION in caps else None,
            skip=self._skip if QueryCapability.PAGINATION in caps else None,
        )

    def _resolve_mode(self) -> SelectionMode:
        has_id = self._workspace_id is not None
        has_name = self._name is not None
        if has_id and has_name:
            raise QueryValidationError("Id and Name lookups are mutually exclusive")
        if has_id:
            if not str(self._workspace_id).strip():
                raise QueryValidationError("Id must not be empty")
            return SelectionMode.BY_ID
        if has_name:
            if not self._name.strip():
                raise QueryValidationError("Name must not be empty")
            return SelectionMode.BY_NAME
        return SelectionMode.LIST

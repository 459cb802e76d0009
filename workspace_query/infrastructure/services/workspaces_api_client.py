"""
============================================================
TARJETA CRC — infrastructure/services/workspaces_api_client.py
============================================================
Class: WorkspacesApiClient (+ TenantWorkspacesSurface, AdminWorkspacesSurface)

Responsibilities:
  - Implementar TenantSurface (GET /groups) y AdminSurface (GET /admin/groups).
  - Traducir filter/top/skip/expand a parámetros OData ($filter, $top, ...).
  - Parsear {"value": [...]} a entidades de dominio.
  - Convertir status >= 400 y errores de red httpx en TransportError
    (status + Retry-After registrados). SIN retry: cada llamada es única.
  - No loguear nunca el access token.

Collaborators:
  - domain.entities (Workspace, WorkspaceUser, enums)
  - domain.surfaces (contratos)
  - crosscutting.exceptions (TransportError)
  - crosscutting.logger
  - httpx (HTTP client)
============================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from ...crosscutting.exceptions import TransportError
from ...crosscutting.logger import logger
from ...domain.entities import (
    AccessRight,
    Workspace,
    WorkspaceState,
    WorkspaceType,
    WorkspaceUser,
)

_TENANT_PATH = "/groups"
_ADMIN_PATH = "/admin/groups"


class WorkspacesApiClient:
    """
    Cliente HTTP mínimo para los listados de workspaces.

    Recibe un access_token válido (adquirido fuera de esta herramienta).
    No implementa retry/backoff: los errores se propagan como TransportError.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        *,
        timeout_s: float = 60.0,
    ):
        if not access_token:
            raise ValueError("access_token is required for WorkspacesApiClient")
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        }
        self._timeout = timeout_s

    # ------------------------------------------------------------------
    # API pública
    # ------------------------------------------------------------------

    def get_workspaces(
        self,
        *,
        filter: str | None = None,
        top: int | None = None,
        skip: int | None = None,
    ) -> List[Workspace]:
        """Listado scope Individual (sin expansión de miembros)."""
        params = _odata_params(filter=filter, top=top, skip=skip)
        return self._list(_TENANT_PATH, params)

    def get_workspaces_as_admin(
        self,
        *,
        expand: str | None = None,
        filter: str | None = None,
        top: int | None = None,
        skip: int | None = None,
    ) -> List[Workspace]:
        """Listado scope Organization (admin)."""
        params = _odata_params(filter=filter, top=top, skip=skip, expand=expand)
        return self._list(_ADMIN_PATH, params)

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------

    def _list(self, path: str, params: Dict[str, Any]) -> List[Workspace]:
        data = self._get_json(path, params)
        items = data.get("value") if isinstance(data, dict) else None
        try:
            return [_parse_workspace(item) for item in (items or [])]
        except (KeyError, TypeError, AttributeError) as exc:
            logger.error(
                "workspaces_api: payload inválido",
                extra={"path": path, "error": repr(exc)},
            )
            raise TransportError(
                f"Invalid workspace payload from {path}", original_error=exc
            ) from exc

    def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self._base_url}{path}"
        try:
            resp = httpx.request(
                "GET",
                url,
                params=params,
                headers=self._headers,
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            logger.error(
                "workspaces_api: error de red",
                extra={"path": path, "error": str(exc)},
            )
            raise TransportError(
                f"Network error calling {path}: {exc}", original_error=exc
            ) from exc

        if resp.status_code >= 400:
            retry_after = _parse_retry_after(resp)
            logger.error(
                "workspaces_api: respuesta de error",
                extra={
                    "path": path,
                    "status": resp.status_code,
                    "reason": _classify_error_reason(resp.status_code),
                    "retry_after_s": retry_after,
                },
            )
            raise TransportError(
                f"HTTP {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
                retry_after=retry_after,
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(
                f"Invalid JSON payload from {path}",
                status_code=resp.status_code,
                original_error=exc,
            ) from exc


class TenantWorkspacesSurface:
    """Adapter: WorkspacesApiClient como TenantSurface."""

    def __init__(self, client: WorkspacesApiClient):
        self._client = client

    def list(
        self,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[Workspace]:
        return self._client.get_workspaces(filter=filter, top=top, skip=skip)


class AdminWorkspacesSurface:
    """Adapter: WorkspacesApiClient como AdminSurface."""

    def __init__(self, client: WorkspacesApiClient):
        self._client = client

    def list(
        self,
        expand: str,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[Workspace]:
        return self._client.get_workspaces_as_admin(
            expand=expand, filter=filter, top=top, skip=skip
        )


# ---------------------------------------------------------------------------
# Helpers (módulo)
# ---------------------------------------------------------------------------


def _odata_params(
    *,
    filter: str | None,
    top: int | None,
    skip: int | None,
    expand: str | None = None,
) -> Dict[str, Any]:
    """Solo incluye los parámetros presentes (ausente == default del backend)."""
    params: Dict[str, Any] = {}
    if expand:
        params["$expand"] = expand
    if filter:
        params["$filter"] = filter
    if top is not None:
        params["$top"] = top
    if skip is not None:
        params["$skip"] = skip
    return params


def _parse_workspace(item: Dict[str, Any]) -> Workspace:
    state_raw = item.get("state")
    state = (
        WorkspaceState.DELETED
        if state_raw == WorkspaceState.DELETED.value
        else WorkspaceState.ACTIVE
    )
    users = tuple(_parse_user(u) for u in (item.get("users") or []))
    return Workspace(
        id=str(item["id"]),
        name=item.get("name") or "",
        type=WorkspaceType.parse(item.get("type")),
        state=state,
        users=users,
        description=item.get("description"),
        is_read_only=item.get("isReadOnly"),
        is_on_dedicated_capacity=item.get("isOnDedicatedCapacity"),
        capacity_id=item.get("capacityId"),
    )


def _parse_user(item: Dict[str, Any]) -> WorkspaceUser:
    return WorkspaceUser(
        principal_name=item.get("emailAddress") or item.get("userPrincipalName"),
        access_right=AccessRight.parse(item.get("groupUserAccessRight")),
    )


def _parse_retry_after(resp: httpx.Response) -> float:
    """Parsea el header Retry-After (segundos). 0 si no viene o es inválido."""
    raw = resp.headers.get("Retry-After", "")
    if not raw:
        return 0.0
    try:
        return float(raw)
    except (ValueError, TypeError):
        return 0.0


def _classify_error_reason(status_code: int) -> str:
    """Clasifica HTTP status en reason de baja cardinalidad para logs."""
    if status_code == 429:
        return "rate_limit"
    if status_code == 401:
        return "unauthorized"
    if status_code == 403:
        return "forbidden"
    if status_code == 404:
        return "not_found"
    if 500 <= status_code < 600:
        return "server_error"
    return "other"

"""
===============================================================================
TARJETA CRC — workspace_query/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (cliente HTTP, superficies, caso de uso) siguiendo DIP.
  - Mantener singletons con caching (lru_cache) por proceso.
  - Aplicar Settings al logger global.

Colaboradores:
  - crosscutting.config.get_settings
  - infrastructure.services.workspaces_api_client
  - application.usecases.workspace.ListWorkspacesUseCase

Notas:
  - Este archivo NO contiene lógica de negocio.
  - El caso de uso no guarda estado entre invocaciones: reutilizarlo es seguro.
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import ListWorkspacesUseCase
from .crosscutting.config import get_settings
from .crosscutting.logger import setup_logger
from .infrastructure.services import (
    AdminWorkspacesSurface,
    TenantWorkspacesSurface,
    WorkspacesApiClient,
)


def configure_logging() -> None:
    """Reconfigura el logger global con nivel/formato de Settings."""
    settings = get_settings()
    setup_logger(level=settings.log_level, use_json=settings.log_json)


@lru_cache
def get_workspaces_api_client() -> WorkspacesApiClient:
    settings = get_settings()
    return WorkspacesApiClient(
        settings.workspaces_api_base_url,
        settings.access_token,
        timeout_s=settings.http_timeout_seconds,
    )


@lru_cache
def get_tenant_surface() -> TenantWorkspacesSurface:
    return TenantWorkspacesSurface(get_workspaces_api_client())


@lru_cache
def get_admin_surface() -> AdminWorkspacesSurface:
    return AdminWorkspacesSurface(get_workspaces_api_client())


def get_list_workspaces_use_case() -> ListWorkspacesUseCase:
    return ListWorkspacesUseCase(get_tenant_surface(), get_admin_surface())

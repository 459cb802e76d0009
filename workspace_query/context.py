"""
===============================================================================
TARJETA CRC — workspace_query/context.py (Contexto por invocación)
===============================================================================

Responsabilidades:
  - Mantener contexto "invocation-scoped" usando ContextVars.
  - Permitir correlación de logs sin pasar parámetros por todo el stack.
  - Proveer helpers mínimos: set_*(), get_context_dict(), clear_context().

Colaboradores:
  - application/usecases/workspace/list_workspaces: setea el contexto al inicio.
  - crosscutting.logger: enriquece logs leyendo get_context_dict().

Restricciones:
  - Solo tipos primitivos (str) para serialización segura.
  - Defaults vacíos ("") para evitar None y simplificar JSON.
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Final

# Identificador de la invocación (uuid4 hex por llamada).
invocation_id_var: ContextVar[str] = ContextVar("invocation_id", default="")

# Scope y superficie resueltos (para filtrar logs por tipo de consulta).
scope_var: ContextVar[str] = ContextVar("scope", default="")
surface_var: ContextVar[str] = ContextVar("surface", default="")

_CTX_INVOCATION_ID: Final[str] = "invocation_id"
_CTX_SCOPE: Final[str] = "scope"
_CTX_SURFACE: Final[str] = "surface"


def set_invocation_context(*, invocation_id: str = "", scope: str = "") -> None:
    """Setea el contexto mínimo de la invocación."""
    invocation_id_var.set(invocation_id or "")
    scope_var.set(scope or "")


def set_surface_context(surface: str = "") -> None:
    surface_var.set(surface or "")


def get_context_dict() -> dict[str, str]:
    """Devuelve el contexto actual como dict, omitiendo claves vacías."""
    ctx: dict[str, str] = {}

    if val := invocation_id_var.get():
        ctx[_CTX_INVOCATION_ID] = val
    if val := scope_var.get():
        ctx[_CTX_SCOPE] = val
    if val := surface_var.get():
        ctx[_CTX_SURFACE] = val

    return ctx


def clear_context() -> None:
    """
    Limpia el contexto al final de la invocación.

    Cada invocación es independiente: nada se arrastra a la siguiente.
    """
    invocation_id_var.set("")
    scope_var.set("")
    surface_var.set("")

"""
===============================================================================
WORKSPACE QUERY RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Workspace Query Results

Business Goal:
    Proveer modelos de resultado y error para el listado de workspaces, con un
    contrato estable que distinga explícitamente:
      - validación (input ilegal, sin llamada al backend)
      - resultado vacío (NO es error)

Why (Context / Intención):
    - El caso de uso devuelve resultados tipados para la validación; los
      errores de transporte se propagan como excepción (TransportError).
    - La capa CLI mapea el código de error a exit codes.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    workspace_results models (module)

Responsibilities:
    - Definir WorkspaceErrorCode / WorkspaceError.
    - Representar WorkspaceListResult (secuencia ordenada + error opcional).
    - Exponer emit_workspaces: entrega la secuencia sin transformar.

Collaborators:
    - domain.entities.Workspace
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

from ....domain.entities import Workspace


class WorkspaceErrorCode(str, Enum):
    """
    Códigos de error del listado.

    - VALIDATION_ERROR: combinación ilegal de inputs (p.ej. User con scope
      Individual).
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"


@dataclass(frozen=True)
class WorkspaceError:
    """Error de caso de uso (code + message)."""

    code: WorkspaceErrorCode
    message: str


@dataclass
class WorkspaceListResult:
    """
    Resultado para el listado de Workspaces.

    Contrato:
      - workspaces: lista (posiblemente vacía) en éxito, en orden del backend
      - error: presente cuando el request es inválido
      - backend_calls: cantidad de requests emitidos (0 en REJECT/vacío)
    """

    workspaces: List[Workspace] = field(default_factory=list)
    error: WorkspaceError | None = None
    backend_calls: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


def emit_workspaces(
    workspaces: Iterable[Workspace] | None, *, backend_calls: int = 0
) -> WorkspaceListResult:
    """Entrega la secuencia tal cual (sin truncar, sin reordenar)."""
    return WorkspaceListResult(
        workspaces=list(workspaces or []), backend_calls=backend_calls
    )

# workspace_query/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones tipadas (errores internos)
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes, con:
- error_code estable
- error_id para correlación con logs
- message “humana” (sin filtrar secretos)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  WorkspaceQueryError + subclases

Responsabilidades:
  - Estandarizar errores de validación y de transporte
  - Generar error_id para rastreo

Colaboradores:
  - domain/query.py (QueryValidationError)
  - infrastructure/services/workspaces_api_client.py (TransportError)
  - interfaces/cli (mapea a exit codes)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class WorkspaceQueryError(Exception):
    """Base para errores internos del motor de consultas."""

    error_code: str = "WORKSPACE_QUERY_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class QueryValidationError(WorkspaceQueryError):
    """Combinación ilegal de inputs del caller (nunca se reintenta)."""

    error_code: str = "VALIDATION_ERROR"


class TransportError(WorkspaceQueryError):
    """
    Falla devuelta por una superficie del backend (red, auth, rate limit).

    Se propaga sin traducción; este motor no reintenta.
    """

    error_code: str = "TRANSPORT_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 0,
        retry_after: float = 0.0,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, error_id=error_id, original_error=original_error)
        self.status_code = status_code
        self.retry_after = retry_after

    @property
    def is_throttled(self) -> bool:
        return self.status_code == 429

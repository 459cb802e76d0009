"""
workspace_query — consultas administrativas de workspaces.

Capas:
  - domain: entidades, descriptor de consulta, filtros, política de scope
  - application: caso de uso de listado + paginación
  - infrastructure: cliente HTTP de las superficies de lectura
  - interfaces: CLI
"""

__version__ = "0.1.0"

"""Contrato de la fuente de datos.

Reglas de diseño:
- `fetch` es asíncrono porque hace I/O (HTTP).
- Un único intento por llamada; los fallos se expresan con la taxonomía de
  `core.domain.errors` (NotFound, FetchFailed, ParseFailed).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pokelookup.core.domain.models import CreatureRecord


@runtime_checkable
class CreatureSource(Protocol):
    async def fetch(self, query: str) -> CreatureRecord:
        """Obtiene y valida el registro para `query` (nombre o id normalizado)."""

        ...

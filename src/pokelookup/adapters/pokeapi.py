"""Fuente de datos: PokéAPI.

Fase única:
- Un GET a `<base_url>/<query>` por búsqueda, sin reintentos.
- Clasifica el resultado: 404 -> NotFound, otro no-2xx o fallo de red ->
  FetchFailed, cuerpo ilegible -> ParseFailed.

Está en adapters porque es I/O puro (HTTP).
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from pokelookup.adapters.http_client import build_async_client
from pokelookup.core.config import AppSettings
from pokelookup.core.domain.errors import FetchFailed, NotFound, ParseFailed
from pokelookup.core.domain.models import CreatureRecord
from pokelookup.core.interfaces.source import CreatureSource


class PokeApiClient(CreatureSource):
    """Consulta una criatura por nombre o id en PokéAPI."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def url_for(self, query: str) -> str:
        return f"{self._settings.base_url.rstrip('/')}/{query}"

    async def fetch(self, query: str) -> CreatureRecord:
        url = self.url_for(query)

        # InvalidURL (control characters, over-long queries) is not an HTTPError.
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                resp = await client.get(url)
        except (httpx.InvalidURL, httpx.HTTPError) as exc:
            raise FetchFailed(f"request to {url} failed: {exc}") from exc

        if resp.status_code == 404:
            raise NotFound(f"{url} returned 404")
        if not resp.is_success:
            raise FetchFailed(f"{url} returned HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise ParseFailed(f"{url} returned a non-JSON body") from exc

        try:
            return CreatureRecord.model_validate(data)
        except ValidationError as exc:
            raise ParseFailed(f"unexpected JSON shape from {url}: {exc.error_count()} error(s)") from exc

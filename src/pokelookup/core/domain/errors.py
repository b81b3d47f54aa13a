"""Taxonomía de errores de búsqueda.

Cada error lleva el mensaje que ve el usuario; el pipeline los captura en su
borde y los convierte en un estado ERROR. Ninguno es fatal.

Los tres mensajes usan la redacción del contrato de la herramienta (no la de la
página web de origen): son textos exactos que los tests comparan tal cual.
"""

from __future__ import annotations

EMPTY_INPUT_MESSAGE = "Please enter a name or ID"
NOT_FOUND_MESSAGE = "entity not found, check the name or ID and try again"
FETCH_FAILED_MESSAGE = "failed to fetch data, try again later"


class LookupFailure(Exception):
    """Base de los fallos esperables de una búsqueda."""

    message: str = FETCH_FAILED_MESSAGE

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail


class EmptyInput(LookupFailure):
    message = EMPTY_INPUT_MESSAGE


class NotFound(LookupFailure):
    message = NOT_FOUND_MESSAGE


class FetchFailed(LookupFailure):
    """Fallo de red/transporte o status HTTP no-2xx distinto de 404."""

    message = FETCH_FAILED_MESSAGE


class ParseFailed(FetchFailed):
    """Respuesta 2xx con cuerpo ilegible; el usuario ve el mensaje genérico."""

"""Contrato de la superficie de presentación.

Por qué Protocol:
- El Core nunca toca un documento global: escribe sobre una superficie
  abstracta que implementa la capa de UI elegida (página HTML, terminal...).
- Permite testear el pipeline con una superficie que solo registra llamadas.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from pokelookup.core.domain.models import CreatureCard


class Element(str, Enum):
    """Elementos de la página con los que trabaja el Core."""

    INPUT = "searchInput"
    SUBMIT = "searchBtn"
    LOADING = "loading"
    ERROR = "errorMessage"
    RESULTS = "resultsContainer"


@runtime_checkable
class DisplaySurface(Protocol):
    """Operaciones mínimas que el Core necesita de la UI."""

    def get_text(self, element: Element) -> str:
        ...

    def set_text(self, element: Element, text: str) -> None:
        ...

    def show(self, element: Element) -> None:
        ...

    def hide(self, element: Element) -> None:
        ...

    def set_enabled(self, element: Element, enabled: bool) -> None:
        ...

    def render_card(self, card: CreatureCard) -> None:
        """Reemplaza el contenido del contenedor de resultados."""

        ...

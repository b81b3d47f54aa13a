"""Superficie HTML (página del buscador).

Por qué está en adapters:
- El HTML es un detalle de infraestructura (Jinja2).
- El Core solo conoce `DisplaySurface` y la `CreatureCard`.

La página se modela como un dict de elementos (texto, visibilidad, enabled);
`render_page()` produce el documento completo con ese estado.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from pokelookup.core.domain.models import CreatureCard
from pokelookup.core.interfaces.surface import DisplaySurface, Element


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# Color para tipos que no están en la tabla.
NEUTRAL_TYPE_COLOR = "#777777"


def _get_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.globals["neutral_type_color"] = NEUTRAL_TYPE_COLOR
    return env


def render_card_html(card: CreatureCard) -> str:
    """Renderiza el fragmento HTML de la tarjeta."""

    return _get_env().get_template("card.html").render(card=card)


@dataclass
class ElementState:
    text: str = ""
    hidden: bool = True
    disabled: bool = False


class HtmlPageSurface(DisplaySurface):
    """Página con los cinco elementos que maneja el Core."""

    def __init__(self, *, title: str = "Pokémon Lookup", initial_query: str = "") -> None:
        self.title = title
        self._elements: dict[Element, ElementState] = {el: ElementState() for el in Element}
        # El input y el botón están siempre visibles.
        self._elements[Element.INPUT] = ElementState(text=initial_query, hidden=False)
        self._elements[Element.SUBMIT] = ElementState(text="Search", hidden=False)
        self._results_html = ""

    def element(self, element: Element) -> ElementState:
        return self._elements[element]

    @property
    def results_html(self) -> str:
        return self._results_html

    def get_text(self, element: Element) -> str:
        return self._elements[element].text

    def set_text(self, element: Element, text: str) -> None:
        self._elements[element].text = text

    def show(self, element: Element) -> None:
        self._elements[element].hidden = False

    def hide(self, element: Element) -> None:
        self._elements[element].hidden = True
        if element is Element.RESULTS:
            self._results_html = ""

    def set_enabled(self, element: Element, enabled: bool) -> None:
        self._elements[element].disabled = not enabled

    def render_card(self, card: CreatureCard) -> None:
        self._results_html = render_card_html(card)

    def render_page(self) -> str:
        """Renderiza el documento completo con el estado actual de los elementos."""

        template = _get_env().get_template("page.html")
        return template.render(
            title=self.title,
            elements={el.name.lower(): state for el, state in self._elements.items()},
            ids={el.name.lower(): el.value for el in Element},
            results_html=Markup(self._results_html),
        )

    def export_html(self, output_path: Path) -> Path:
        """Exporta la página como HTML autocontenido."""

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_page(), encoding="utf-8")
        return output_path

"""`DisplaySurface` over a Rich console.

A terminal cannot un-print, so "hide" only updates the tracked visibility;
"show" is what produces output (error line, card panel, loading spinner).
"""

from __future__ import annotations

from rich.console import Console
from rich.status import Status
from rich.text import Text

from pokelookup.cli.ui_components import build_card_panel
from pokelookup.core.domain.models import CreatureCard
from pokelookup.core.interfaces.surface import DisplaySurface, Element


class ConsoleSurface(DisplaySurface):
    def __init__(self, console: Console, *, initial_text: str = "") -> None:
        self._console = console
        self._texts: dict[Element, str] = {Element.INPUT: initial_text}
        self._visible: set[Element] = {Element.INPUT, Element.SUBMIT}
        self._disabled: set[Element] = set()
        self._card: CreatureCard | None = None
        self._status: Status | None = None

    @property
    def card(self) -> CreatureCard | None:
        return self._card

    def is_visible(self, element: Element) -> bool:
        return element in self._visible

    def is_enabled(self, element: Element) -> bool:
        return element not in self._disabled

    def get_text(self, element: Element) -> str:
        return self._texts.get(element, "")

    def set_text(self, element: Element, text: str) -> None:
        self._texts[element] = text

    def show(self, element: Element) -> None:
        self._visible.add(element)
        if element is Element.LOADING:
            if self._status is None:
                self._status = self._console.status("Searching...", spinner="dots")
                self._status.start()
        elif element is Element.ERROR:
            self._console.print(Text(self.get_text(Element.ERROR), style="red"))
        elif element is Element.RESULTS and self._card is not None:
            self._console.print(build_card_panel(self._card))

    def hide(self, element: Element) -> None:
        self._visible.discard(element)
        if element is Element.LOADING and self._status is not None:
            self._status.stop()
            self._status = None
        elif element is Element.RESULTS:
            self._card = None

    def set_enabled(self, element: Element, enabled: bool) -> None:
        if enabled:
            self._disabled.discard(element)
        else:
            self._disabled.add(element)

    def render_card(self, card: CreatureCard) -> None:
        self._card = card

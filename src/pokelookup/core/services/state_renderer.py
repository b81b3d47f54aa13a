"""Projection of a `UIState` onto a `DisplaySurface`.

The pipeline owns the state; this function is the only place that decides
which elements are visible for each phase.
"""

from __future__ import annotations

from pokelookup.core.domain.models import UIPhase, UIState
from pokelookup.core.interfaces.surface import DisplaySurface, Element


def _clear_error(surface: DisplaySurface) -> None:
    surface.set_text(Element.ERROR, "")
    surface.hide(Element.ERROR)


def render_state(state: UIState, surface: DisplaySurface) -> None:
    if state.phase is UIPhase.LOADING:
        surface.hide(Element.RESULTS)
        _clear_error(surface)
        surface.show(Element.LOADING)
        surface.set_enabled(Element.SUBMIT, False)
        return

    surface.hide(Element.LOADING)
    surface.set_enabled(Element.SUBMIT, True)

    if state.phase is UIPhase.ERROR:
        surface.hide(Element.RESULTS)
        surface.set_text(Element.ERROR, state.message or "")
        surface.show(Element.ERROR)
    elif state.phase is UIPhase.RESULT:
        assert state.card is not None
        _clear_error(surface)
        surface.render_card(state.card)
        surface.show(Element.RESULTS)
    else:
        _clear_error(surface)
        surface.hide(Element.RESULTS)

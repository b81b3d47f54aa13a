"""CLI entry point (Typer).

Commands:
- `search QUERY`: one lookup, card printed with Rich (optional HTML page).
- `interactive`: prompt loop; pressing Enter submits the search.
- `doctor ...`: diagnostics and user configuration.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from pokelookup.adapters.html_page import HtmlPageSurface
from pokelookup.adapters.pokeapi import PokeApiClient
from pokelookup.cli import doctor
from pokelookup.cli.console_surface import ConsoleSurface
from pokelookup.cli.ui_components import print_banner
from pokelookup.core.config import AppSettings
from pokelookup.core.domain.models import UIState
from pokelookup.core.interfaces.source import CreatureSource
from pokelookup.core.interfaces.surface import Element
from pokelookup.core.logging_config import setup_logging
from pokelookup.core.services.input_controller import InputController
from pokelookup.core.services.lookup_pipeline import LookupPipeline, PipelineHooks
from pokelookup.core.services.state_renderer import render_state

app = typer.Typer(no_args_is_help=True, help="Look up a Pokémon by name or ID.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
log = logging.getLogger("pokelookup.cli")

QUIT_COMMAND = ":q"


def _build_source(settings: AppSettings) -> CreatureSource:
    return PokeApiClient(settings)


def _log_state(state: UIState) -> None:
    log.debug("UI state -> %s", state.phase.value)


def _build_controller(settings: AppSettings, surface: ConsoleSurface) -> InputController:
    pipeline = LookupPipeline(
        source=_build_source(settings),
        surface=surface,
        hooks=PipelineHooks(state_changed=_log_state),
    )
    return InputController(pipeline=pipeline, confirm_key=settings.confirm_key)


@app.callback()
def _configure() -> None:
    setup_logging(AppSettings().log_level)


@app.command()
def search(
    query: str = typer.Argument(..., help="Pokémon name or numeric ID."),
    html: Optional[Path] = typer.Option(
        None,
        "--html",
        help="Also write the rendered page to this HTML file.",
        dir_okay=False,
    ),
) -> None:
    """Look up one Pokémon and print its card."""

    settings = AppSettings()
    surface = ConsoleSurface(_console, initial_text=query)
    controller = _build_controller(settings, surface)

    outcome = asyncio.run(controller.submit_search())

    if html is not None:
        page = HtmlPageSurface(initial_query=query)
        render_state(controller.pipeline.state, page)
        path = page.export_html(html)
        _console.print(f"[dim]HTML page written to[/dim] {path}")

    if not outcome.ok:
        raise typer.Exit(code=1)


@app.command()
def interactive() -> None:
    """Search repeatedly; an empty line shows the validation error."""

    settings = AppSettings()
    surface = ConsoleSurface(_console)
    controller = _build_controller(settings, surface)

    print_banner(_console)
    while True:
        try:
            text = _console.input(f"[bold cyan]Name or ID[/bold cyan] ({QUIT_COMMAND} to quit): ")
        except (EOFError, KeyboardInterrupt):
            break
        if text.strip() == QUIT_COMMAND:
            break
        surface.set_text(Element.INPUT, text)
        # The terminal only hands us the line once Enter was pressed.
        asyncio.run(controller.handle_key(settings.confirm_key))


def run() -> None:
    app()


if __name__ == "__main__":
    run()

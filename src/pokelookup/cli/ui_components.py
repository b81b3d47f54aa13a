"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar la tarjeta en `search` e `interactive`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pokelookup.core.domain.models import CreatureCard

NEUTRAL_BADGE_STYLE = "bold white on grey42"
STAT_BAR_WIDTH = 24


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("POKELOOKUP", style="bold cyan")
    subtitle = Text("Nombre o ID • Tipos • Habilidades • Stats", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_type_badges(card: CreatureCard) -> Text:
    badges = Text()
    for i, badge in enumerate(card.types):
        if i:
            badges.append(" ")
        style = f"bold white on {badge.color}" if badge.color else NEUTRAL_BADGE_STYLE
        badges.append(f" {badge.label} ", style=style)
    return badges


def stat_bar(percentage: float, width: int = STAT_BAR_WIDTH) -> str:
    # Sin recorte: valores > 100% dibujan una barra más larga que `width`.
    return "█" * int(round(percentage / 100 * width))


def build_details_table(card: CreatureCard) -> Table:
    table = Table.grid(padding=(0, 2))
    table.add_column("Field", style="dim", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Height", f"{card.height_m} m")
    table.add_row("Weight", f"{card.weight_kg} kg")
    table.add_row(
        "Base Experience",
        str(card.base_experience) if card.base_experience is not None else "N/A",
    )
    table.add_row("Abilities", ", ".join(card.abilities) or "-")
    if card.image_url:
        table.add_row("Artwork", Text(card.image_url, style="link " + card.image_url))
    return table


def build_stats_table(card: CreatureCard) -> Table:
    table = Table(title="Base Stats", show_header=False, box=None, title_justify="left")
    table.add_column("Stat", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right")
    table.add_column("Bar", style="green")
    for stat in card.stats:
        table.add_row(stat.label, str(stat.value), stat_bar(stat.percentage))
    return table


def build_card_panel(card: CreatureCard) -> Panel:
    """Panel para presentar la `CreatureCard`."""

    title = Text.assemble((card.name, "bold yellow"), "  ", (f"#{card.number}", "dim"))
    body = Group(
        build_type_badges(card),
        Text(),
        build_details_table(card),
        Text(),
        build_stats_table(card),
    )
    return Panel(body, title=title, title_align="left", border_style="yellow")

"""Tablas fijas de presentación.

Por qué un objeto inyectable:
- El builder de tarjetas recibe las tablas en su constructor; los tests (o
  una UI con otra paleta) pueden pasar las suyas sin tocar la lógica.
- `MappingProxyType` las deja de solo lectura.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

MAX_BASE_STAT = 255

TYPE_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "normal": "#A8A878",
        "fire": "#F08030",
        "water": "#6890F0",
        "electric": "#F8D030",
        "grass": "#78C850",
        "ice": "#98D8D8",
        "fighting": "#C03028",
        "poison": "#A040A0",
        "ground": "#E0C068",
        "flying": "#A890F0",
        "psychic": "#F85888",
        "bug": "#A8B820",
        "rock": "#B8A038",
        "ghost": "#705898",
        "dragon": "#7038F8",
        "dark": "#705848",
        "steel": "#B8B8D0",
        "fairy": "#EE99AC",
    }
)

STAT_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "hp": "HP",
        "attack": "Attack",
        "defense": "Defense",
        "special-attack": "Sp. Attack",
        "special-defense": "Sp. Defense",
        "speed": "Speed",
    }
)


@dataclass(frozen=True)
class DisplayTables:
    type_colors: Mapping[str, str] = field(default_factory=lambda: TYPE_COLORS)
    stat_labels: Mapping[str, str] = field(default_factory=lambda: STAT_LABELS)
    max_stat: int = MAX_BASE_STAT

    @classmethod
    def from_dicts(
        cls,
        *,
        type_colors: Mapping[str, str] | None = None,
        stat_labels: Mapping[str, str] | None = None,
        max_stat: int = MAX_BASE_STAT,
    ) -> "DisplayTables":
        """Construye tablas congeladas a partir de dicts mutables."""

        return cls(
            type_colors=MappingProxyType(dict(type_colors if type_colors is not None else TYPE_COLORS)),
            stat_labels=MappingProxyType(dict(stat_labels if stat_labels is not None else STAT_LABELS)),
            max_stat=max_stat,
        )
